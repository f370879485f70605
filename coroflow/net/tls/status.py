"""Result codes for TLS connections, receives and sends."""

from __future__ import annotations

from enum import Enum, IntEnum

# OpenSSL SSL_get_error() result codes.
_SSL_ERROR_NONE = 0
_SSL_ERROR_SSL = 1
_SSL_ERROR_WANT_READ = 2
_SSL_ERROR_WANT_WRITE = 3
_SSL_ERROR_WANT_X509_LOOKUP = 4
_SSL_ERROR_SYSCALL = 5
_SSL_ERROR_ZERO_RETURN = 6
_SSL_ERROR_WANT_CONNECT = 7
_SSL_ERROR_WANT_ACCEPT = 8


class ConnectionStatus(Enum):
    """Outcome of establishing a TLS connection and its handshake."""

    CONNECTED = "connected"
    NOT_CONNECTED = "not_connected"
    CONTEXT_REQUIRED = "context_required"
    RESOURCE_ALLOCATION_FAILED = "resource_allocation_failed"
    SET_FD_FAILURE = "set_fd_failure"
    HANDSHAKE_FAILED = "handshake_failed"
    TIMEOUT = "timeout"
    POLL_ERROR = "poll_error"
    UNEXPECTED_CLOSE = "unexpected_close"
    INVALID_IP_ADDRESS = "invalid_ip_address"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class TlsRecvStatus(IntEnum):
    """Outcome of a TLS receive."""

    OK = _SSL_ERROR_NONE
    BUFFER_IS_EMPTY = -3
    TIMEOUT = -4
    CLOSED = _SSL_ERROR_ZERO_RETURN
    ERROR = _SSL_ERROR_SSL
    WANT_READ = _SSL_ERROR_WANT_READ
    WANT_WRITE = _SSL_ERROR_WANT_WRITE
    WANT_CONNECT = _SSL_ERROR_WANT_CONNECT
    WANT_ACCEPT = _SSL_ERROR_WANT_ACCEPT
    WANT_X509_LOOKUP = _SSL_ERROR_WANT_X509_LOOKUP
    ERROR_SYSCALL = _SSL_ERROR_SYSCALL

    def __str__(self) -> str:
        return self.name.lower()


class TlsSendStatus(IntEnum):
    """Outcome of a TLS send."""

    OK = _SSL_ERROR_NONE
    BUFFER_IS_EMPTY = -3
    TIMEOUT = -4
    CLOSED = _SSL_ERROR_ZERO_RETURN
    ERROR = _SSL_ERROR_SSL
    WANT_READ = _SSL_ERROR_WANT_READ
    WANT_WRITE = _SSL_ERROR_WANT_WRITE
    WANT_CONNECT = _SSL_ERROR_WANT_CONNECT
    WANT_ACCEPT = _SSL_ERROR_WANT_ACCEPT
    WANT_X509_LOOKUP = _SSL_ERROR_WANT_X509_LOOKUP
    ERROR_SYSCALL = _SSL_ERROR_SYSCALL

    def __str__(self) -> str:
        return self.name.lower()