"""Logic for caching the merged resolution configuration."""

import logging
from collections.abc import Sequence

from import_resolver.config_source import ConfigSource
from import_resolver.merge_configs import merge_configs
from import_resolver.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)


class ConfigCache:
    """Holds the last merged configuration until it is invalidated.

    Sources are consulted in order from lowest to highest precedence. The
    cache is not synchronized: callers sharing one instance across threads
    must lock around ``get`` and ``invalidate`` themselves.
    """

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        """Initialize an empty cache over the given sources."""
        self.sources = list(sources)
        self.value: ResolverConfig | None = None
        self.loaded = False
        self.dirty = False

    def get(self) -> ResolverConfig | None:
        """Return the cached configuration, rebuilding it when needed."""
        if self.loaded and not self.dirty:
            return self.value

        self.value = None
        self.loaded = False
        self.dirty = False

        found = []
        for source in self.sources:
            config = source.load()
            if config is None:
                logger.debug("Configuration source %s not found", source.name)
                continue
            found.append(config)

        self.value = merge_configs(found)
        self.loaded = True
        logger.debug("Loaded configuration from %d source(s)", len(found))
        return self.value

    def invalidate(self) -> None:
        """Mark the cached value stale; the next ``get`` rebuilds it."""
        self.dirty = True
