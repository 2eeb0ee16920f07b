"""
portpick — list open TCP/UDP ports with their owning processes,
pick one, then kill the process or inspect it.

CLI entry: portpick (see pyproject.toml)
"""

from .models import Action, PortEntry, ProcessInfo, Protocol, Snapshot, SocketRecord
from .correlate import build
from .actions import dispatch, kill_by_port
from .proc import ProcessSource
from .sockets import SocketSourceError, list_sockets

__all__ = [
    "Action",
    "PortEntry",
    "ProcessInfo",
    "Protocol",
    "Snapshot",
    "SocketRecord",
    "build",
    "dispatch",
    "kill_by_port",
    "ProcessSource",
    "SocketSourceError",
    "list_sockets",
]

__version__ = "1.0.0"
