"""Static catalog of shadcn/ui blocks."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from shadcn_mcp.catalog.models import BlockMeta

_REGISTRY_URL = "https://ui.shadcn.com/r/styles/default/{name}.json"


def _block(
    name: str,
    description: str,
    category: str,
    components: list[str],
    dependencies: list[str],
) -> BlockMeta:
    return BlockMeta(
        name=name,
        description=description,
        category=category,
        components=tuple(components),
        dependencies=tuple(dependencies),
        registry_url=_REGISTRY_URL.format(name=name),
    )


_BLOCKS = [
    _block(
        "authentication-01",
        "A simple login form with email and password",
        "authentication",
        ["button", "card", "input", "label"],
        [],
    ),
    _block(
        "authentication-02",
        "A login form with email, password, and social login options",
        "authentication",
        ["button", "card", "input", "label", "separator"],
        [],
    ),
    _block(
        "authentication-03",
        "A sign-up form with name, email, and password",
        "authentication",
        ["button", "card", "input", "label"],
        [],
    ),
    _block(
        "authentication-04",
        "A login page with a split layout",
        "authentication",
        ["button", "input", "label"],
        [],
    ),
    _block(
        "dashboard-01",
        "A dashboard with cards displaying key metrics",
        "dashboard",
        ["card", "tabs", "button"],
        [],
    ),
    _block(
        "dashboard-02",
        "A dashboard with sidebar navigation",
        "dashboard",
        ["card", "sheet", "button", "nav"],
        [],
    ),
    _block(
        "dashboard-03",
        "A dashboard with charts and data tables",
        "dashboard",
        ["card", "chart", "table", "tabs"],
        ["recharts"],
    ),
    _block(
        "dashboard-04",
        "An analytics dashboard with multiple chart types",
        "dashboard",
        ["card", "chart", "select", "button"],
        ["recharts"],
    ),
    _block(
        "dashboard-05",
        "A responsive dashboard with collapsible sidebar",
        "dashboard",
        ["card", "sheet", "button", "badge", "dropdown-menu"],
        [],
    ),
    _block(
        "dashboard-06",
        "A dashboard with dark mode support",
        "dashboard",
        ["card", "button", "switch", "tabs"],
        [],
    ),
    _block(
        "dashboard-07",
        "A minimal dashboard with key performance indicators",
        "dashboard",
        ["card", "progress", "badge"],
        [],
    ),
    _block(
        "chart-01",
        "A simple bar chart with responsive container",
        "charts",
        ["card", "chart"],
        ["recharts"],
    ),
    _block(
        "chart-02",
        "A line chart with multiple data series",
        "charts",
        ["card", "chart"],
        ["recharts"],
    ),
    _block(
        "chart-03",
        "A pie chart with custom colors",
        "charts",
        ["card", "chart"],
        ["recharts"],
    ),
    _block(
        "chart-04",
        "An area chart with gradient fill",
        "charts",
        ["card", "chart"],
        ["recharts"],
    ),
    _block(
        "sidebar-01",
        "A collapsible sidebar with navigation links",
        "layout",
        ["button", "sheet", "scroll-area"],
        [],
    ),
    _block(
        "sidebar-02",
        "A sidebar with nested navigation",
        "layout",
        ["accordion", "button", "sheet"],
        [],
    ),
    _block(
        "sidebar-03",
        "A sidebar with user profile section",
        "layout",
        ["avatar", "button", "dropdown-menu", "sheet"],
        [],
    ),
    _block(
        "sidebar-04",
        "A minimal sidebar with icon navigation",
        "layout",
        ["button", "tooltip", "sheet"],
        [],
    ),
    _block(
        "sidebar-05",
        "A sidebar with search functionality",
        "layout",
        ["input", "button", "command", "sheet"],
        [],
    ),
    _block(
        "sidebar-06",
        "A responsive sidebar that converts to bottom nav on mobile",
        "layout",
        ["button", "sheet"],
        [],
    ),
    _block(
        "sidebar-07",
        "A sidebar with pinnable sections",
        "layout",
        ["button", "separator", "sheet"],
        [],
    ),
    _block(
        "settings-01",
        "A settings page with tabs for different sections",
        "forms",
        ["form", "tabs", "card", "button", "input", "label"],
        ["react-hook-form", "zod", "@hookform/resolvers"],
    ),
    _block(
        "settings-02",
        "A profile settings form",
        "forms",
        ["form", "card", "button", "input", "textarea", "label", "avatar"],
        ["react-hook-form", "zod", "@hookform/resolvers"],
    ),
    _block(
        "settings-03",
        "Account settings with password change",
        "forms",
        ["form", "card", "button", "input", "label"],
        ["react-hook-form", "zod", "@hookform/resolvers"],
    ),
    _block(
        "settings-04",
        "Notification preferences settings",
        "forms",
        ["form", "card", "switch", "label"],
        ["react-hook-form", "zod", "@hookform/resolvers"],
    ),
]

BLOCKS: Mapping[str, BlockMeta] = MappingProxyType({b.name: b for b in _BLOCKS})


def get_block(name: str) -> BlockMeta | None:
    return BLOCKS.get(name)


def all_blocks() -> list[BlockMeta]:
    return list(BLOCKS.values())


def blocks_by_category(category: str) -> list[BlockMeta]:
    return [b for b in BLOCKS.values() if b.category == category]


def search_blocks(query: str) -> list[BlockMeta]:
    """Case-insensitive match on name, description, category, or member component."""
    q = query.lower()
    return [
        b
        for b in BLOCKS.values()
        if q in b.name.lower()
        or q in b.description.lower()
        or q in b.category.lower()
        or any(q in comp.lower() for comp in b.components)
    ]
