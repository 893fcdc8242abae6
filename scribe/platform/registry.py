"""Api registry: in-memory lookup of provider strategies built from @api decorators."""

from typing import Optional

from scribe.core.logging import logger
from scribe.platform.apis import ALL_APIS, Api

registry_logger = logger.with_prefix("ApiRegistry: ").with_context(component="api_registry")


class ApiRegistry:
    """Maps short names to shared, stateless Api instances."""

    def __init__(self) -> None:
        self._entries: dict[str, Api] = {}

    def build(self, api_classes: Optional[list[type[Api]]] = None) -> None:
        """Instantiate every decorated Api class once.

        Raises:
            ValueError: If two classes share a short name.
        """
        for api_cls in api_classes if api_classes is not None else ALL_APIS:
            if not getattr(api_cls, "is_api", False):
                registry_logger.warning(f"Skipping {api_cls.__name__}: not decorated with @api")
                continue
            short_name = api_cls.short_name
            if short_name in self._entries:
                raise ValueError(f"Duplicate Api short name '{short_name}'")
            self._entries[short_name] = api_cls()
        registry_logger.debug(f"Registered {len(self._entries)} Api strategies")

    def get(self, short_name: str) -> Api:
        """Get an Api by short name.

        Raises:
            KeyError: If no Api with the given short name is registered.
        """
        return self._entries[short_name]

    def list_all(self) -> list[Api]:
        return list(self._entries.values())

    def __contains__(self, short_name: object) -> bool:
        return short_name in self._entries


api_registry = ApiRegistry()
api_registry.build()


def get_api(short_name: str) -> Api:
    """Shared Api instance registered under ``short_name``."""
    return api_registry.get(short_name)
