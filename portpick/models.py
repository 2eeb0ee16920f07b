from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

UDP_STATE = "N/A"


class Protocol(Enum):
    TCP = "TCP"
    UDP = "UDP"


class Action(Enum):
    KILL = "Kill"
    VIEW_DETAILS = "View Details"

    def __str__(self) -> str:
        return self.value


@dataclass
class SocketRecord:
    local_port: int
    associated_pids: List[int] = field(default_factory=list)
    protocol: Protocol = Protocol.TCP
    state: Optional[str] = None  # TCP only


@dataclass
class ProcessInfo:
    pid: int
    name: str = ""
    cpu_usage: float = 0.0
    memory: int = 0               # resident set size, bytes
    run_time: int = 0             # seconds since start
    start_time: float = 0.0       # unix timestamp
    cmd: List[str] = field(default_factory=list)
    disk_usage: Optional[Tuple[int, int]] = None  # (read_bytes, write_bytes)


@dataclass(frozen=True)
class PortEntry:
    port_number: int
    owning_pid: int
    process_name: str
    protocol: Protocol
    connection_state: str


@dataclass(frozen=True)
class Snapshot:
    entries: Tuple[PortEntry, ...] = ()
    by_port: Dict[int, List[int]] = field(default_factory=dict)
    by_pid: Dict[int, List[int]] = field(default_factory=dict)

    def entries_for_port(self, port: int) -> List[PortEntry]:
        return [self.entries[i] for i in self.by_port.get(port, [])]

    def entries_for_pid(self, pid: int) -> List[PortEntry]:
        return [self.entries[i] for i in self.by_pid.get(pid, [])]

    def __len__(self) -> int:
        return len(self.entries)
