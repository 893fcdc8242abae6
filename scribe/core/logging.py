"""Logging for the scribe engine.

``logger`` is a :class:`ContextualLogger` over the ``scribe`` stdlib logger.
Derive scoped loggers instead of configuring new ones::

    from scribe.core.logging import logger

    flow_logger = logger.with_prefix("OAuth1: ").with_context(provider="twitter")
    flow_logger.info("Requesting temporary credentials")

Dimensions passed to :meth:`ContextualLogger.with_context` are attached to
every record as ``extra`` and rendered after the message.
"""

import logging
from typing import Any, MutableMapping, Optional, Tuple

from scribe.core.config import settings


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries a prefix and a set of context dimensions."""

    def __init__(
        self,
        base_logger: logging.Logger,
        dimensions: Optional[dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        super().__init__(base_logger, dict(dimensions or {}))
        self.dimensions = dict(dimensions or {})
        self.prefix = prefix

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with ``dimensions`` merged over the current ones."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends ``prefix`` to every message."""
        return ContextualLogger(self.logger, self.dimensions, self.prefix + prefix)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping]:
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.dimensions)
        kwargs["extra"] = extra
        if self.dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            return f"{self.prefix}{msg} [{rendered}]", kwargs
        return f"{self.prefix}{msg}", kwargs


def mask(value: Optional[str], visible: int = 4) -> str:
    """Mask a credential for logging, keeping only its first ``visible`` characters."""
    if not value:
        return "<empty>"
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "*" * (len(value) - visible)


_base_logger = logging.getLogger("scribe")
_base_logger.setLevel(settings.LOG_LEVEL.value)
_base_logger.addHandler(logging.NullHandler())

logger = ContextualLogger(_base_logger)
