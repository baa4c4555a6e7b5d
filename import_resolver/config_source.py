"""Interface shared by every configuration source."""

from typing import Protocol

from import_resolver.resolver_config import ResolverConfig


class ConfigSource(Protocol):
    """A named, optional provider of resolution configuration.

    ``load`` returns ``None`` when the source is absent. Missing or malformed
    input is logged by the source and reported as absence, never raised.
    """

    name: str

    def load(self) -> ResolverConfig | None:
        """Read the source and return its configuration, if any."""
        ...
