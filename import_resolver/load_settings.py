"""Logic for loading tool settings and building configuration sources."""

import copy
from pathlib import Path
from typing import Any

import yaml

from import_resolver.config_source import ConfigSource
from import_resolver.deep_merge import deep_merge
from import_resolver.tsconfig_source import TSCONFIG_FILENAME, TsConfigSource
from import_resolver.webpack_config_source import (
    WEBPACK_CONFIG_FILENAME,
    WebpackConfigSource,
)

DEFAULT_SETTINGS: dict[str, Any] = {
    "tsconfig": {
        "enabled": True,
        "filename": TSCONFIG_FILENAME,
    },
    "webpack": {
        "enabled": True,
        "filename": WEBPACK_CONFIG_FILENAME,
        "node": "node",
    },
}


def load_settings(path: str | Path | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults."""
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if path:
        p = Path(path)
        if p.exists():
            user_settings = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            settings = deep_merge(settings, user_settings)
    return settings


def build_config_sources(
    settings: dict[str, Any], cwd: str | Path | None = None
) -> list[ConfigSource]:
    """Create configuration sources, lowest precedence first."""
    sources: list[ConfigSource] = []

    webpack = settings.get("webpack", {})
    sources.append(
        WebpackConfigSource(
            cwd,
            filename=webpack.get("filename", WEBPACK_CONFIG_FILENAME),
            node=webpack.get("node", "node"),
            enabled=bool(webpack.get("enabled", True)),
        )
    )

    tsconfig = settings.get("tsconfig", {})
    if tsconfig.get("enabled", True):
        sources.append(
            TsConfigSource(cwd, filename=tsconfig.get("filename", TSCONFIG_FILENAME))
        )

    return sources
