"""Logic for resolving an import specifier against project configuration."""

import logging
import os

from import_resolver.resolved_import import ResolvedImport
from import_resolver.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)


def resolve_import_path(
    import_path: str,
    config: ResolverConfig | None,
    cwd: str | os.PathLike[str] | None = None,
) -> ResolvedImport | None:
    """Resolve ``import_path`` to an absolute path and a cwd-relative path.

    Rules are applied in order, first match wins:

    1. Relative or absolute specifiers (``./x``, ``../x``, ``/x``) resolve
       against the working directory.
    2. A configured base URL is joined with the specifier.
    3. The first alias that prefixes the specifier has its first replacement
       substituted for the first occurrence of the alias text. This is a plain
       string replace, not a path segment rewrite.

    Returns ``None`` when no rule applies, e.g. for a bare package import.
    """
    root = os.path.abspath(cwd) if cwd is not None else os.getcwd()

    if import_path.startswith((".", "/")):
        logger.debug("Resolving %s as a filesystem path", import_path)
        return _finalize(root, import_path)

    if config is None:
        logger.debug("No configuration available for %s", import_path)
        return None

    if config.base_url:
        logger.debug("Resolving %s against baseUrl %s", import_path, config.base_url)
        return _finalize(root, config.base_url, import_path)

    for alias, replacements in (config.paths or {}).items():
        if not replacements or not import_path.startswith(alias):
            continue
        rewritten = import_path.replace(alias, replacements[0], 1)
        logger.debug("Alias %s rewrote %s to %s", alias, import_path, rewritten)
        return _finalize(root, rewritten)

    logger.debug("No rule resolved %s", import_path)
    return None


def _finalize(root: str, *parts: str) -> ResolvedImport:
    resolved_path = os.path.normpath(os.path.join(root, *parts))
    return ResolvedImport(resolved_path, _relative_to(root, resolved_path))


def _relative_to(root: str, path: str) -> str:
    # The working directory itself is the empty relative path
    if path == root:
        return ""
    return os.path.relpath(path, root)
