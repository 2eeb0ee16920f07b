from __future__ import annotations
from typing import Dict, Iterable, List, Mapping

from .models import PortEntry, ProcessInfo, Protocol, Snapshot, SocketRecord, UDP_STATE


def _index(index: Dict[int, List[int]], key: int, pos: int) -> None:
    bucket = index.get(key)
    if bucket is None:
        index[key] = [pos]
    else:
        bucket.append(pos)


def build(sockets: Iterable[SocketRecord], processes: Mapping[int, ProcessInfo]) -> Snapshot:
    """Join the socket table with the process table.

    One entry is produced per (socket, associated pid) pair whose pid is
    present in ``processes``; pids that vanished between the two reads are
    dropped. Entry order follows the order of ``sockets`` and of each
    socket's pid list.
    """
    entries: List[PortEntry] = []
    by_port: Dict[int, List[int]] = {}
    by_pid: Dict[int, List[int]] = {}

    for sock in sockets:
        for pid in sock.associated_pids:
            proc = processes.get(pid)
            if proc is None:
                continue

            if sock.protocol is Protocol.TCP:
                state = sock.state or ""
            else:
                state = UDP_STATE

            pos = len(entries)
            entries.append(PortEntry(
                port_number=sock.local_port,
                owning_pid=pid,
                process_name=proc.name,
                protocol=sock.protocol,
                connection_state=state,
            ))
            _index(by_port, sock.local_port, pos)
            _index(by_pid, pid, pos)

    return Snapshot(entries=tuple(entries), by_port=by_port, by_pid=by_pid)
