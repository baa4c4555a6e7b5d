"""Logic for reading resolution settings from a TypeScript project file."""

import json
import logging
from pathlib import Path
from typing import Any

from import_resolver.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)

TSCONFIG_FILENAME = "tsconfig.json"


class TsConfigSource:
    """Reads ``compilerOptions.baseUrl`` and ``compilerOptions.paths``."""

    name = "tsconfig"

    def __init__(
        self, cwd: str | Path | None = None, filename: str = TSCONFIG_FILENAME
    ) -> None:
        """Initialize the source; ``cwd`` of None means the cwd at load time."""
        self.cwd = Path(cwd) if cwd is not None else None
        self.filename = filename

    @property
    def path(self) -> Path:
        """Location of the project file."""
        return (self.cwd or Path.cwd()) / self.filename

    def load(self) -> ResolverConfig | None:
        """Parse the project file, or return None if it is absent or malformed."""
        path = self.path
        if not path.exists():
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            # ValueError covers both JSONDecodeError and UnicodeDecodeError
            logger.error("Error parsing %s: %s", self.filename, e)
            return None

        options = data.get("compilerOptions") if isinstance(data, dict) else None
        if not isinstance(options, dict):
            return None

        base_url = options.get("baseUrl")
        if base_url is not None and not isinstance(base_url, str):
            logger.warning("Ignoring baseUrl: unsupported %r", base_url)
            base_url = None
        return ResolverConfig(
            base_url=base_url,
            paths=_coerce_paths(options.get("paths")),
        )


def _coerce_paths(raw: Any) -> dict[str, tuple[str, ...]] | None:
    if not isinstance(raw, dict):
        return None
    paths: dict[str, tuple[str, ...]] = {}
    for alias, targets in raw.items():
        if isinstance(targets, str):
            paths[alias] = (targets,)
        elif isinstance(targets, list) and all(isinstance(t, str) for t in targets):
            paths[alias] = tuple(targets)
        else:
            logger.warning("Ignoring paths entry %s: unsupported %r", alias, targets)
    return paths
