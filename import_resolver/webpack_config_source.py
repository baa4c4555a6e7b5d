"""Logic for reading resolve aliases from a webpack configuration module.

The configuration is a JavaScript module, so it is evaluated by the Node.js
interpreter in a subprocess. Only ``resolve.alias`` is read back, serialized
as JSON on stdout.
"""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any

from import_resolver.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)

WEBPACK_CONFIG_FILENAME = "webpack.config.js"

# argv[1] is the absolute path of the configuration module
ALIAS_DUMP_SCRIPT = """
const mod = require(process.argv[1]);
const config = mod && mod.__esModule ? mod.default : mod;
const alias = config && config.resolve && config.resolve.alias;
process.stdout.write(JSON.stringify(alias || null));
"""


class WebpackConfigSource:
    """Reads ``resolve.alias`` from ``webpack.config.js`` by executing it."""

    name = "webpack"

    def __init__(
        self,
        cwd: str | Path | None = None,
        filename: str = WEBPACK_CONFIG_FILENAME,
        node: str = "node",
        *,
        enabled: bool = True,
    ) -> None:
        """Initialize the source; ``cwd`` of None means the cwd at load time."""
        self.cwd = Path(cwd) if cwd is not None else None
        self.filename = filename
        self.node = node
        self.enabled = enabled

    @property
    def path(self) -> Path:
        """Location of the configuration module."""
        return (self.cwd or Path.cwd()) / self.filename

    def load(self) -> ResolverConfig | None:
        """Evaluate the module and return its aliases, or None."""
        path = self.path
        if not self.enabled or not path.exists():
            return None

        cmd = [self.node, "-e", ALIAS_DUMP_SCRIPT, str(path.resolve())]
        try:
            proc = subprocess.run(
                cmd, check=True, capture_output=True, text=True, cwd=path.parent
            )
            alias = json.loads(proc.stdout)
        except subprocess.CalledProcessError as e:
            logger.error(
                "Error loading %s (exit %s): %s",
                self.filename,
                e.returncode,
                (e.stderr or "").strip(),
            )
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading %s: %s", self.filename, e)
            return None

        if not isinstance(alias, dict):
            return None
        return ResolverConfig(paths=_coerce_alias(alias))


def _coerce_alias(alias: dict[str, Any]) -> dict[str, tuple[str, ...]]:
    """Wrap single replacements so every alias maps to a sequence."""
    paths: dict[str, tuple[str, ...]] = {}
    for key, value in alias.items():
        if isinstance(value, str):
            paths[key] = (value,)
        elif isinstance(value, list) and all(isinstance(v, str) for v in value):
            paths[key] = tuple(value)
        else:
            logger.warning("Ignoring alias %s: unsupported value %r", key, value)
    return paths
