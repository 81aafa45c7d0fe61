"""HTTP client for the shadcn/ui JSON registry."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from shadcn_registry.errors import ConfigurationError, RegistryFetchError
from shadcn_registry.types import STYLES, EntityKind, IndexEntry, RegistryItem

logger = logging.getLogger(__name__)

REGISTRY_BASE_URL = "https://ui.shadcn.com/registry"
DEFAULT_STYLE = "default"

_KIND_LABELS: dict[EntityKind, str] = {
    EntityKind.COMPONENT: "component",
    EntityKind.BLOCK: "block",
    EntityKind.EXAMPLE: "example",
}


class RegistryClient:
    """Fetches registry items and the registry index.

    Every call performs a single GET with no retry and no caching, so each
    returned item is freshly deserialized.
    """

    def __init__(
        self,
        base_url: str = REGISTRY_BASE_URL,
        style: str = DEFAULT_STYLE,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        if style not in STYLES:
            raise ConfigurationError(
                f"Unknown registry style {style!r}. Available: {list(STYLES)}"
            )
        self._base_url = base_url.rstrip("/")
        self._style = style
        self._client = http_client or httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def style(self) -> str:
        return self._style

    def item_url(self, kind: EntityKind, name: str, style: str | None = None) -> str:
        return f"{self._base_url}/{self._resolve_style(style)}/{EntityKind(kind).value}/{name}.json"

    def index_url(self, style: str | None = None) -> str:
        return f"{self._base_url}/{self._resolve_style(style)}/index.json"

    def _resolve_style(self, style: str | None) -> str:
        if not style:
            return self._style
        if style not in STYLES:
            raise ConfigurationError(
                f"Unknown registry style {style!r}. Available: {list(STYLES)}"
            )
        return style

    async def fetch(
        self, kind: EntityKind, name: str, style: str | None = None
    ) -> RegistryItem:
        """Fetch one registry item.

        Raises ConfigurationError for an unknown style and RegistryFetchError
        for any request failure.
        """
        kind = EntityKind(kind)
        label = _KIND_LABELS[kind]
        url = self.item_url(kind, name, style)
        data = await self._get_json(url, kind=label, name=name)
        try:
            return RegistryItem.from_dict(data)
        except ValueError as e:
            raise RegistryFetchError(
                f"Error fetching {label} {name}: invalid registry item: {e}",
                kind=label,
                name=name,
                url=url,
                cause=e,
            ) from e

    async def fetch_component(self, name: str, style: str | None = None) -> RegistryItem:
        return await self.fetch(EntityKind.COMPONENT, name, style)

    async def fetch_block(self, name: str, style: str | None = None) -> RegistryItem:
        return await self.fetch(EntityKind.BLOCK, name, style)

    async def fetch_example(self, name: str, style: str | None = None) -> RegistryItem:
        return await self.fetch(EntityKind.EXAMPLE, name, style)

    async def fetch_index(self, style: str | None = None) -> list[IndexEntry]:
        """Fetch the full registry index for a style."""
        url = self.index_url(style)
        data = await self._get_json(url, kind="index", name="registry index")
        try:
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [IndexEntry.from_dict(entry) for entry in data]
        except ValueError as e:
            raise RegistryFetchError(
                f"Error fetching registry index: {e}",
                kind="index",
                name="registry index",
                url=url,
                cause=e,
            ) from e

    async def close(self) -> None:
        await self._client.aclose()

    async def _get_json(self, url: str, *, kind: str, name: str) -> Any:
        logger.debug("GET %s", url)
        try:
            http_resp = await self._client.get(url)
        except httpx.HTTPError as e:
            raise RegistryFetchError(
                f"Error fetching {kind} {name}: {e}",
                kind=kind,
                name=name,
                url=url,
                cause=e,
            ) from e

        if not http_resp.is_success:
            raise RegistryFetchError(
                f"Failed to fetch {kind} {name}: "
                f"{http_resp.status_code} {http_resp.reason_phrase}",
                kind=kind,
                name=name,
                url=url,
                status_code=http_resp.status_code,
            )

        try:
            return http_resp.json()
        except ValueError as e:
            raise RegistryFetchError(
                f"Error fetching {kind} {name}: invalid JSON: {e}",
                kind=kind,
                name=name,
                url=url,
                status_code=http_resp.status_code,
                cause=e,
            ) from e
