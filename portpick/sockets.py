from __future__ import annotations
import socket
from typing import Collection, List

import psutil

from .models import Protocol, SocketRecord

DEFAULT_FAMILIES = frozenset({socket.AF_INET, socket.AF_INET6})
DEFAULT_PROTOCOLS = frozenset({Protocol.TCP, Protocol.UDP})

_SOCK_TYPES = {
    socket.SOCK_STREAM: Protocol.TCP,
    socket.SOCK_DGRAM: Protocol.UDP,
}


class SocketSourceError(RuntimeError):
    """The socket table could not be read."""


def list_sockets(
    families: Collection[int] = DEFAULT_FAMILIES,
    protocols: Collection[Protocol] = DEFAULT_PROTOCOLS,
) -> List[SocketRecord]:
    try:
        conns = psutil.net_connections(kind="inet")
    except (psutil.Error, OSError) as e:
        raise SocketSourceError(str(e) or e.__class__.__name__) from e

    records: List[SocketRecord] = []
    for c in conns:
        if c.family not in families:
            continue
        proto = _SOCK_TYPES.get(c.type)
        if proto is None or proto not in protocols:
            continue
        if not c.laddr:
            continue
        port = c.laddr.port if hasattr(c.laddr, "port") else c.laddr[1]
        records.append(SocketRecord(
            local_port=port,
            associated_pids=[c.pid] if c.pid else [],
            protocol=proto,
            state=str(c.status) if proto is Protocol.TCP else None,
        ))
    return records
