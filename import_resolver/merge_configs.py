"""Logic for merging configuration from several sources."""

from collections.abc import Sequence

from import_resolver.resolver_config import ResolverConfig


def merge_configs(configs: Sequence[ResolverConfig]) -> ResolverConfig | None:
    """Merge configurations ordered from lowest to highest precedence.

    - No configurations gives None; a single one is returned unchanged.
    - ``base_url`` always comes from the higher-precedence configuration.
    - ``paths`` are overlaid: the higher-precedence entry wins on collision.
    """
    if not configs:
        return None

    result = configs[0]
    for update in configs[1:]:
        paths = dict(result.paths or {})
        paths.update(update.paths or {})
        result = ResolverConfig(base_url=update.base_url, paths=paths)
    return result
