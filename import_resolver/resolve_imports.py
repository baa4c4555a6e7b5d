"""Resolve JavaScript/TypeScript import specifiers from the command line.

Reads ``tsconfig.json`` and ``webpack.config.js`` from the project directory,
then prints where each specifier points, relative to that directory.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from import_resolver.config_cache import ConfigCache
from import_resolver.load_settings import build_config_sources, load_settings
from import_resolver.resolve_import_path import resolve_import_path

if TYPE_CHECKING:
    from import_resolver.resolved_import import ResolvedImport

UNRESOLVED = "(unresolved)"


def format_results(
    results: list[tuple[str, ResolvedImport | None]], *, as_json: bool = False
) -> str:
    """Render resolution results as text lines or a JSON array."""
    if as_json:
        payload = [
            {
                "import": spec,
                "resolved_path": res.resolved_path if res else None,
                "relative_path": res.relative_path if res else None,
            }
            for spec, res in results
        ]
        return json.dumps(payload, indent=2)

    lines = []
    for spec, res in results:
        target = res.relative_path if res else UNRESOLVED
        lines.append(f"{spec} -> {target}")
    return "\n".join(lines)


def run_resolution(args: argparse.Namespace) -> int:
    """Resolve every specifier given on the command line."""
    project_dir = args.project_dir.resolve()
    settings = load_settings(args.settings)
    cache = ConfigCache(build_config_sources(settings, cwd=project_dir))
    config = cache.get()

    results = [
        (spec, resolve_import_path(spec, config, cwd=project_dir))
        for spec in args.specifiers
    ]
    print(format_results(results, as_json=args.json))

    if args.strict and any(res is None for _, res in results):
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line resolver."""
    ap = argparse.ArgumentParser(
        description="Resolve import specifiers using tsconfig and webpack aliases.",
    )
    ap.add_argument(
        "specifiers",
        nargs="+",
        help="Import specifiers to resolve, e.g. @app/utils or ./foo",
    )
    ap.add_argument(
        "--project-dir",
        type=Path,
        default=Path(),
        help="Directory holding the project configuration (default: cwd)",
    )
    ap.add_argument(
        "--settings",
        type=Path,
        help="YAML file overriding which configuration sources are read",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON array",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any specifier is unresolved",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log which rule resolved each specifier",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
