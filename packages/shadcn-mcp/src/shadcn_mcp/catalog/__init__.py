"""Read-only catalog of known components and blocks."""

from shadcn_mcp.catalog.blocks import (
    BLOCKS,
    all_blocks,
    blocks_by_category,
    get_block,
    search_blocks,
)
from shadcn_mcp.catalog.components import (
    COMPONENTS,
    all_components,
    components_by_category,
    get_component,
    search_components,
)
from shadcn_mcp.catalog.models import (
    BLOCK_CATEGORIES,
    COMPONENT_CATEGORIES,
    BlockMeta,
    ComponentMeta,
)

__all__ = [
    "BLOCKS",
    "BLOCK_CATEGORIES",
    "BlockMeta",
    "COMPONENTS",
    "COMPONENT_CATEGORIES",
    "ComponentMeta",
    "all_blocks",
    "all_components",
    "blocks_by_category",
    "components_by_category",
    "get_block",
    "get_component",
    "search_blocks",
    "search_components",
]
