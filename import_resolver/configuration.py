"""Process-wide configuration cache and the public resolution entry points.

The shared cache reads its sources from the working directory at load time.
It carries no locking; embedders calling from several threads must serialize
access themselves.
"""

from import_resolver.config_cache import ConfigCache
from import_resolver.load_settings import build_config_sources, load_settings
from import_resolver.resolve_import_path import resolve_import_path
from import_resolver.resolved_import import ResolvedImport
from import_resolver.resolver_config import ResolverConfig

_default_cache: ConfigCache | None = None


def default_cache() -> ConfigCache:
    """Return the shared cache, creating it on first use."""
    global _default_cache
    if _default_cache is None:
        _default_cache = ConfigCache(build_config_sources(load_settings()))
    return _default_cache


def reset_default_cache() -> None:
    """Drop the shared cache entirely."""
    global _default_cache
    _default_cache = None


def get_configuration() -> ResolverConfig | None:
    """Return the merged project configuration, loading it if needed."""
    return default_cache().get()


def invalidate_configuration() -> None:
    """Force the next ``get_configuration`` call to re-read the sources."""
    default_cache().invalidate()


def resolve(import_path: str, config: ResolverConfig | None) -> ResolvedImport | None:
    """Resolve an import specifier against the current working directory."""
    return resolve_import_path(import_path, config)
