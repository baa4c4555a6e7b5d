"""Data model for the merged project resolution configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolverConfig:
    """Base directory and alias mapping used to resolve import specifiers."""

    base_url: str | None = None
    # alias prefix -> replacement paths, scanned in insertion order
    paths: dict[str, tuple[str, ...]] | None = None
