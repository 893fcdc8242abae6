"""Platform decorators for provider strategies."""

from typing import Callable, List, Optional

from scribe.core.shared_models import OAuthVersion


def api(
    name: str,
    short_name: str,
    labels: Optional[List[str]] = None,
) -> Callable[[type], type]:
    """Mark an Api strategy class as a registrable provider.

    Args:
        name: Display name for the provider
        short_name: Unique identifier used by ``ServiceBuilder.provider("...")``
        labels: Tags for categorization (e.g., "Social", "Developer Tools")

    Example:
        @api(name="QQ", short_name="qq", labels=["Social"])
        class QQApi(DefaultApi20):
            ...
    """

    def decorator(cls: type) -> type:
        from scribe.platform.apis._base import DefaultApi10a, DefaultApi20

        if not issubclass(cls, (DefaultApi10a, DefaultApi20)):
            raise TypeError(
                f"Api '{short_name}' must extend DefaultApi10a or DefaultApi20, got {cls.__name__}"
            )

        # Set metadata as class attributes
        cls.is_api = True
        cls.api_name = name
        cls.short_name = short_name
        cls.labels = labels or []
        cls.oauth_version = (
            OAuthVersion.V1_0A if issubclass(cls, DefaultApi10a) else OAuthVersion.V2_0
        )
        return cls

    return decorator
