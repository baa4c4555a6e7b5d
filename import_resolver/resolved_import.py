"""Data model for a resolved import specifier."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedImport:
    """Represents the outcome of resolving an import specifier to a file path."""

    resolved_path: str  # Absolute, normalized
    relative_path: str  # Relative to the working directory
