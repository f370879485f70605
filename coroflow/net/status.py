"""Result codes for connecting, receiving and sending on plain sockets."""

from __future__ import annotations

import errno
from enum import Enum, IntEnum


class ConnectStatus(Enum):
    """Outcome of a connection attempt."""

    CONNECTED = "connected"
    INVALID_IP_ADDRESS = "invalid_ip_address"
    TIMEOUT = "timeout"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class RecvStatus(IntEnum):
    """Outcome of a receive; positive values are the system errno."""

    OK = 0
    CLOSED = -1
    UDP_NOT_BOUND = -2
    TRY_AGAIN = errno.EAGAIN
    WOULD_BLOCK = errno.EWOULDBLOCK
    BAD_FILE_DESCRIPTOR = errno.EBADF
    CONNECTION_REFUSED = errno.ECONNREFUSED
    MEMORY_FAULT = errno.EFAULT
    INTERRUPTED = errno.EINTR
    INVALID_ARGUMENT = errno.EINVAL
    NO_MEMORY = errno.ENOMEM
    NOT_CONNECTED = errno.ENOTCONN
    NOT_A_SOCKET = errno.ENOTSOCK
    CONNECTION_RESET_BY_PEER = errno.ECONNRESET

    def __str__(self) -> str:
        return self.name.lower()


class SendStatus(IntEnum):
    """Outcome of a send; positive values are the system errno."""

    OK = 0
    CLOSED = -1
    PERMISSION_DENIED = errno.EACCES
    TRY_AGAIN = errno.EAGAIN
    WOULD_BLOCK = errno.EWOULDBLOCK
    ALREADY_IN_PROGRESS = errno.EALREADY
    BAD_FILE_DESCRIPTOR = errno.EBADF
    CONNECTION_RESET = errno.ECONNRESET
    NO_PEER_ADDRESS = errno.EDESTADDRREQ
    MEMORY_FAULT = errno.EFAULT
    INTERRUPTED = errno.EINTR
    IS_CONNECTION = errno.EISCONN
    MESSAGE_SIZE = errno.EMSGSIZE
    OUTPUT_QUEUE_FULL = errno.ENOBUFS
    NO_MEMORY = errno.ENOMEM
    NOT_CONNECTED = errno.ENOTCONN
    NOT_A_SOCKET = errno.ENOTSOCK
    OPERATION_NOT_SUPPORTED = errno.EOPNOTSUPP
    PIPE_CLOSED = errno.EPIPE

    def __str__(self) -> str:
        return self.name.lower()