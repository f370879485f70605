"""A hostname kept apart from plain strings so that it is not mistaken for an address."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Hostname:
    """A named host, ordered and compared by its text."""

    hostname: str = ""

    def data(self) -> str:
        """The hostname text."""
        return self.hostname