"""Static catalog of shadcn/ui components.

Built once at import time and exposed through a read-only mapping.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from shadcn_mcp.catalog.models import ComponentMeta

_REGISTRY_URL = "https://ui.shadcn.com/registry/default/ui/{name}.json"


def _component(
    name: str, description: str, category: str, dependencies: list[str]
) -> ComponentMeta:
    return ComponentMeta(
        name=name,
        description=description,
        category=category,
        dependencies=tuple(dependencies),
        registry_url=_REGISTRY_URL.format(name=name),
    )


_COMPONENTS = [
    _component(
        "accordion",
        "A vertically stacked set of interactive headings that reveal content",
        "disclosure",
        ["@radix-ui/react-accordion"],
    ),
    _component(
        "aspect-ratio",
        "Displays content within a desired ratio",
        "layout",
        ["@radix-ui/react-aspect-ratio"],
    ),
    _component(
        "card",
        "Displays content in a card container",
        "layout",
        [],
    ),
    _component(
        "collapsible",
        "An interactive component which expands/collapses a content area",
        "disclosure",
        ["@radix-ui/react-collapsible"],
    ),
    _component(
        "resizable",
        "A component that allows resizing of panels",
        "layout",
        ["react-resizable-panels"],
    ),
    _component(
        "scroll-area",
        "Augments native scroll functionality with custom styling",
        "layout",
        ["@radix-ui/react-scroll-area"],
    ),
    _component(
        "separator",
        "Visually or semantically separates content",
        "layout",
        ["@radix-ui/react-separator"],
    ),
    _component(
        "tabs",
        "A set of layered sections of content, known as tab panels",
        "disclosure",
        ["@radix-ui/react-tabs"],
    ),
    _component(
        "button",
        "Displays a button or a component that looks like a button",
        "form",
        ["@radix-ui/react-slot"],
    ),
    _component(
        "checkbox",
        "A control that allows the user to toggle between checked and not checked",
        "form",
        ["@radix-ui/react-checkbox"],
    ),
    _component(
        "form",
        "Building forms with React Hook Form and Zod",
        "form",
        ["@radix-ui/react-label", "@radix-ui/react-slot", "react-hook-form", "@hookform/resolvers", "zod"],
    ),
    _component(
        "input",
        "Displays a form input field",
        "form",
        [],
    ),
    _component(
        "input-otp",
        "One-time password input component",
        "form",
        ["input-otp"],
    ),
    _component(
        "label",
        "Renders an accessible label associated with controls",
        "form",
        ["@radix-ui/react-label"],
    ),
    _component(
        "radio-group",
        "A set of checkable buttons where no more than one can be checked",
        "form",
        ["@radix-ui/react-radio-group"],
    ),
    _component(
        "select",
        "Displays a list of options for the user to pick from",
        "form",
        ["@radix-ui/react-select"],
    ),
    _component(
        "slider",
        "An input where the user selects a value from within a given range",
        "form",
        ["@radix-ui/react-slider"],
    ),
    _component(
        "switch",
        "A control that allows the user to toggle between on and off",
        "form",
        ["@radix-ui/react-switch"],
    ),
    _component(
        "textarea",
        "Displays a form textarea field",
        "form",
        [],
    ),
    _component(
        "toggle",
        "A two-state button that can be either on or off",
        "form",
        ["@radix-ui/react-toggle"],
    ),
    _component(
        "toggle-group",
        "A set of two-state buttons that can be toggled on or off",
        "form",
        ["@radix-ui/react-toggle-group"],
    ),
    _component(
        "breadcrumb",
        "Displays the path to the current resource",
        "navigation",
        [],
    ),
    _component(
        "command",
        "Fast, composable command menu",
        "navigation",
        ["cmdk"],
    ),
    _component(
        "dropdown-menu",
        "Displays a menu to the user triggered by a button",
        "navigation",
        ["@radix-ui/react-dropdown-menu"],
    ),
    _component(
        "menubar",
        "A visually persistent menu common in desktop applications",
        "navigation",
        ["@radix-ui/react-menubar"],
    ),
    _component(
        "navigation-menu",
        "A collection of links for navigating websites",
        "navigation",
        ["@radix-ui/react-navigation-menu"],
    ),
    _component(
        "pagination",
        "Component to navigate between pages",
        "navigation",
        [],
    ),
    _component(
        "alert-dialog",
        "A modal dialog that interrupts interaction",
        "overlay",
        ["@radix-ui/react-alert-dialog"],
    ),
    _component(
        "context-menu",
        "Displays a menu triggered by right-click",
        "overlay",
        ["@radix-ui/react-context-menu"],
    ),
    _component(
        "dialog",
        "A window overlaid on the primary window",
        "overlay",
        ["@radix-ui/react-dialog"],
    ),
    _component(
        "drawer",
        "A drawer component that slides in from the edge of the screen",
        "overlay",
        ["vaul"],
    ),
    _component(
        "hover-card",
        "Displays content on hover",
        "overlay",
        ["@radix-ui/react-hover-card"],
    ),
    _component(
        "popover",
        "Displays rich content in a portal",
        "overlay",
        ["@radix-ui/react-popover"],
    ),
    _component(
        "sheet",
        "Extends the dialog component with slide-in animation",
        "overlay",
        ["@radix-ui/react-dialog"],
    ),
    _component(
        "tooltip",
        "A popup that displays information on hover",
        "overlay",
        ["@radix-ui/react-tooltip"],
    ),
    _component(
        "alert",
        "Displays a callout for user attention",
        "feedback",
        [],
    ),
    _component(
        "badge",
        "Displays a small badge or status indicator",
        "feedback",
        [],
    ),
    _component(
        "progress",
        "Displays an indicator showing completion progress",
        "feedback",
        ["@radix-ui/react-progress"],
    ),
    _component(
        "skeleton",
        "Use to show a placeholder while content is loading",
        "feedback",
        [],
    ),
    _component(
        "sonner",
        "An opinionated toast component",
        "feedback",
        ["sonner"],
    ),
    _component(
        "toast",
        "A notification that appears at the corner of the screen",
        "feedback",
        ["@radix-ui/react-toast"],
    ),
    _component(
        "toaster",
        "The toaster component for displaying toasts",
        "feedback",
        [],
    ),
    _component(
        "avatar",
        "An image element with a fallback",
        "data-display",
        ["@radix-ui/react-avatar"],
    ),
    _component(
        "calendar",
        "A date picker component",
        "data-entry",
        ["react-day-picker", "date-fns"],
    ),
    _component(
        "carousel",
        "A carousel component for cycling through content",
        "data-display",
        ["embla-carousel-react"],
    ),
    _component(
        "chart",
        "Beautiful and responsive charts using Recharts",
        "data-display",
        ["recharts"],
    ),
    _component(
        "combobox",
        "Autocomplete input with a dropdown list",
        "data-entry",
        ["@radix-ui/react-popover", "cmdk"],
    ),
    _component(
        "data-table",
        "Powerful data table with sorting, filtering, and pagination",
        "data-display",
        ["@tanstack/react-table"],
    ),
    _component(
        "date-picker",
        "A date picker component with calendar popup",
        "data-entry",
        ["react-day-picker", "date-fns", "@radix-ui/react-popover"],
    ),
    _component(
        "table",
        "Displays data in a table format",
        "data-display",
        [],
    ),
]

COMPONENTS: Mapping[str, ComponentMeta] = MappingProxyType({c.name: c for c in _COMPONENTS})


def get_component(name: str) -> ComponentMeta | None:
    return COMPONENTS.get(name)


def all_components() -> list[ComponentMeta]:
    return list(COMPONENTS.values())


def components_by_category(category: str) -> list[ComponentMeta]:
    return [c for c in COMPONENTS.values() if c.category == category]


def search_components(query: str) -> list[ComponentMeta]:
    """Case-insensitive match on name, description, or category."""
    q = query.lower()
    return [
        c
        for c in COMPONENTS.values()
        if q in c.name.lower() or q in c.description.lower() or q in c.category.lower()
    ]
