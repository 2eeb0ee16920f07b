from __future__ import annotations
import time
from typing import Callable, Dict, Optional, TypeVar

import psutil

from .models import ProcessInfo

T = TypeVar("T")

CPU_SAMPLE_INTERVAL = 0.1


def _read(fn: Callable[[], T], default: T) -> T:
    try:
        return fn()
    except psutil.AccessDenied:
        return default


class ProcessSource:
    """Handle on the host process table.

    ``refresh_all`` takes the table used for correlation; ``lookup`` always
    goes back to the OS so actions see the process as it is now.
    """

    def __init__(self) -> None:
        self.processes: Dict[int, ProcessInfo] = {}

    def refresh_all(self) -> Dict[int, ProcessInfo]:
        table: Dict[int, ProcessInfo] = {}
        for p in psutil.process_iter(["pid", "name"]):
            table[p.info["pid"]] = ProcessInfo(pid=p.info["pid"], name=p.info["name"] or "")
        self.processes = table
        return table

    def lookup(self, pid: int, sample_cpu: bool = False) -> Optional[ProcessInfo]:
        """Live read of ``pid``; None if it has exited.

        ``sample_cpu`` blocks for CPU_SAMPLE_INTERVAL to get a real cpu figure,
        otherwise cpu_usage is left at 0.0.
        """
        try:
            p = psutil.Process(pid)
            with p.oneshot():
                created = _read(p.create_time, 0.0)
                io = getattr(p, "io_counters", None)
                disk = _read(io, None) if io else None
                mem = _read(p.memory_info, None)
                info = ProcessInfo(
                    pid=pid,
                    name=_read(p.name, ""),
                    memory=mem.rss if mem else 0,
                    start_time=created,
                    run_time=max(int(time.time() - created), 0) if created else 0,
                    cmd=_read(p.cmdline, []),
                    disk_usage=(disk.read_bytes, disk.write_bytes) if disk else None,
                )
            if sample_cpu:
                info.cpu_usage = _read(lambda: p.cpu_percent(interval=CPU_SAMPLE_INTERVAL), 0.0)
            return info
        except psutil.NoSuchProcess:
            return None

    def terminate(self, pid: int) -> bool:
        try:
            psutil.Process(pid).kill()
            return True
        except psutil.Error:
            return False
