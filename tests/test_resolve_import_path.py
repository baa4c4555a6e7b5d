"""Tests for resolving import specifiers against configuration."""

import os
from pathlib import Path

import pytest

from import_resolver.resolve_import_path import resolve_import_path
from import_resolver.resolver_config import ResolverConfig

PROJECT = os.path.abspath("/proj")


def test_relative_import_resolves_against_cwd() -> None:
    """Verify that ./ specifiers resolve against the working directory."""
    res = resolve_import_path("./foo", ResolverConfig(), cwd=PROJECT)

    assert res is not None
    assert res.resolved_path == os.path.join(PROJECT, "foo")
    assert res.relative_path == "foo"


def test_parent_relative_import_is_normalized() -> None:
    """Verify that ../ segments are collapsed in the resolved path."""
    res = resolve_import_path("../shared/./lib", None, cwd=PROJECT)

    assert res is not None
    assert res.resolved_path == os.path.abspath("/shared/lib")
    assert res.relative_path == os.path.join("..", "shared", "lib")


def test_absolute_import_ignores_config() -> None:
    """Verify that absolute specifiers win over baseUrl and aliases."""
    config = ResolverConfig(base_url="src", paths={"/": ("./nope",)})
    res = resolve_import_path("/proj/lib/x", config, cwd=PROJECT)

    assert res is not None
    assert res.resolved_path == os.path.abspath("/proj/lib/x")
    assert res.relative_path == os.path.join("lib", "x")


def test_current_directory_has_empty_relative_path() -> None:
    """Verify that resolving the working directory itself gives an empty path."""
    res = resolve_import_path(".", None, cwd=PROJECT)

    assert res is not None
    assert res.resolved_path == PROJECT
    assert res.relative_path == ""


def test_base_url_joins_specifier() -> None:
    """Verify that baseUrl is joined with bare specifiers."""
    config = ResolverConfig(base_url="./src")
    res = resolve_import_path("components/Button", config, cwd=PROJECT)

    assert res is not None
    assert res.resolved_path == os.path.join(PROJECT, "src", "components", "Button")
    assert res.relative_path == os.path.join("src", "components", "Button")


def test_base_url_takes_precedence_over_aliases() -> None:
    """Verify that a set baseUrl is used before any alias is considered."""
    config = ResolverConfig(base_url="lib", paths={"@app": ("./src",)})
    res = resolve_import_path("@app/utils", config, cwd=PROJECT)

    assert res is not None
    assert res.relative_path == os.path.join("lib", "@app", "utils")


def test_empty_base_url_falls_through_to_aliases() -> None:
    """Verify that an empty baseUrl counts as unset."""
    config = ResolverConfig(base_url="", paths={"@app": ("./src",)})
    res = resolve_import_path("@app/utils", config, cwd=PROJECT)

    assert res is not None
    assert res.relative_path == os.path.join("src", "utils")


def test_alias_substitutes_first_replacement() -> None:
    """Verify that the alias text is replaced by its first target."""
    config = ResolverConfig(paths={"@app": ("./src", "./fallback")})
    res = resolve_import_path("@app/utils", config, cwd=PROJECT)

    assert res is not None
    rewritten = "@app/utils".replace("@app", "./src")
    expected = os.path.normpath(os.path.join(PROJECT, rewritten))
    assert res.resolved_path == expected
    assert res.resolved_path == os.path.join(PROJECT, "src", "utils")
    assert res.relative_path == os.path.join("src", "utils")


def test_alias_replaces_only_first_occurrence() -> None:
    """Verify the literal single replace when the alias recurs in the path."""
    config = ResolverConfig(paths={"lib": ("./vendor/lib",)})
    res = resolve_import_path("lib/lib/index", config, cwd=PROJECT)

    assert res is not None
    assert res.relative_path == os.path.join("vendor", "lib", "lib", "index")


def test_alias_is_plain_string_prefix() -> None:
    """Verify that prefix matching is not segment aware."""
    config = ResolverConfig(paths={"@app": ("./src",)})
    res = resolve_import_path("@application/x", config, cwd=PROJECT)

    assert res is not None
    assert res.relative_path == os.path.join("srclication", "x")


def test_first_matching_alias_in_order_wins() -> None:
    """Verify that aliases are scanned in their stored order."""
    config = ResolverConfig(paths={"@": ("./root",), "@app": ("./src",)})
    res = resolve_import_path("@app/utils", config, cwd=PROJECT)

    assert res is not None
    assert res.relative_path == os.path.join("rootapp", "utils")


def test_alias_without_targets_is_skipped() -> None:
    """Verify that an alias with an empty target list does not match."""
    config = ResolverConfig(paths={"@app": (), "@ap": ("./src",)})
    res = resolve_import_path("@app/utils", config, cwd=PROJECT)

    assert res is not None
    assert res.relative_path == os.path.join("srcp", "utils")


@pytest.mark.parametrize(
    "config",
    [
        None,
        ResolverConfig(),
        ResolverConfig(paths={}),
        ResolverConfig(paths={"@app": ("./src",)}),
    ],
)
def test_bare_package_import_is_unresolved(config: ResolverConfig | None) -> None:
    """Verify that bare package imports produce no result."""
    assert resolve_import_path("react", config, cwd=PROJECT) is None


def test_defaults_to_process_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that the process working directory is used when none is given."""
    monkeypatch.chdir(tmp_path)
    res = resolve_import_path("./foo", None)

    assert res is not None
    assert res.resolved_path == os.path.join(os.getcwd(), "foo")
    assert res.relative_path == "foo"
