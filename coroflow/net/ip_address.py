"""IPv4 and IPv6 addresses held in binary form."""

from __future__ import annotations

import functools
import socket
from enum import IntEnum
from typing import Any


class Domain(IntEnum):
    """Address family of an :class:`IpAddress`."""

    IPV4 = socket.AF_INET
    IPV6 = socket.AF_INET6


_IPV4_LEN = 4
_IPV6_LEN = 16


@functools.total_ordering
class IpAddress:
    """A binary IP address together with its domain."""

    ipv4_len = _IPV4_LEN
    ipv6_len = _IPV6_LEN

    def __init__(self, binary_address: bytes = b"", domain: Domain = Domain.IPV4) -> None:
        raw = bytes(binary_address)
        self._domain = Domain(domain)
        if self._domain is Domain.IPV4 and len(raw) > _IPV4_LEN:
            raise ValueError("provided binary ip address is too long")
        if len(raw) > _IPV6_LEN:
            raise ValueError("provided binary ip address is too long")
        self._data = raw + bytes(_IPV6_LEN - len(raw))

    def domain(self) -> Domain:
        """The address family."""
        return self._domain

    def data(self) -> bytes:
        """The address bytes: 4 for IPv4, 16 for IPv6."""
        if self._domain is Domain.IPV4:
            return self._data[:_IPV4_LEN]
        return self._data

    @classmethod
    def from_string(cls, address: str, domain: Domain = Domain.IPV4) -> "IpAddress":
        """Parse a textual address of the given domain."""
        domain = Domain(domain)
        try:
            packed = socket.inet_pton(int(domain), address)
        except (OSError, ValueError, TypeError) as exc:
            raise ValueError(f"failed to convert {address!r} from string") from exc
        return cls(packed, domain)

    def to_string(self) -> str:
        """Render the address in its standard textual form."""
        try:
            return socket.inet_ntop(int(self._domain), self.data())
        except (OSError, ValueError) as exc:
            raise ValueError("failed to convert to string representation") from exc

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"IpAddress({self.to_string()!r}, {self._domain.name})"

    def _key(self) -> tuple:
        return (int(self._domain), self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IpAddress):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, IpAddress):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())