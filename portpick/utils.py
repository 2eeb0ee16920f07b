from __future__ import annotations
import datetime as dt

from .models import PortEntry


class C:
    CODES = {
        "RESET": "\033[0m",
        "RED": "\033[31m",
        "GREEN": "\033[32m",
        "YELLOW": "\033[33m",
        "CYAN": "\033[36m",
        "GRAY": "\033[90m",
    }
    RESET = CODES["RESET"]
    RED = CODES["RED"]
    GREEN = CODES["GREEN"]
    YELLOW = CODES["YELLOW"]
    CYAN = CODES["CYAN"]
    GRAY = CODES["GRAY"]

    @classmethod
    def use_color(cls, enabled: bool) -> None:
        for name, code in cls.CODES.items():
            setattr(cls, name, code if enabled else "")


def format_entry(entry: PortEntry) -> str:
    """One-line menu label: ``pid:port -- name Status: state -- Protocol: proto``."""
    return (
        f"{entry.owning_pid}:{entry.port_number} -- {entry.process_name} "
        f"Status: {entry.connection_state} -- Protocol: {entry.protocol.value}"
    )


def human_duration(secs: int) -> str:
    days, rem = divmod(int(secs), 86400)
    hours, rem = divmod(rem, 3600)
    minutes, seconds = divmod(rem, 60)
    if days:
        return f"{days}d {hours}h {minutes}m {seconds}s"
    if hours:
        return f"{hours}h {minutes}m {seconds}s"
    if minutes:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"


def local_time(ts: float) -> dt.datetime:
    return dt.datetime.fromtimestamp(ts, dt.timezone.utc).astimezone()
