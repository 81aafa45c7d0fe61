"""Local metadata types for components and blocks."""

from __future__ import annotations

from dataclasses import dataclass

COMPONENT_CATEGORIES = (
    "form",
    "layout",
    "navigation",
    "overlay",
    "feedback",
    "data-display",
    "disclosure",
    "data-entry",
    "typography",
)

BLOCK_CATEGORIES = (
    "authentication",
    "dashboard",
    "layout",
    "charts",
    "forms",
    "ecommerce",
    "marketing",
    "application",
)


@dataclass(frozen=True)
class ComponentMeta:
    name: str
    description: str
    category: str
    dependencies: tuple[str, ...] = ()
    registry_url: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "dependencies": list(self.dependencies),
        }


@dataclass(frozen=True)
class BlockMeta:
    name: str
    description: str
    category: str
    components: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    registry_url: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "components": list(self.components),
            "dependencies": list(self.dependencies),
        }
