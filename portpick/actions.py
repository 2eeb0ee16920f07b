from __future__ import annotations
from dataclasses import dataclass
import sys
from typing import Dict, List, Optional

from .models import Action, PortEntry, ProcessInfo, Snapshot
from .proc import ProcessSource
from .utils import C, human_duration, local_time


@dataclass
class Outcome:
    action: Action
    pid: int
    ok: bool


def kill_process(pid: int, info: ProcessInfo, source: ProcessSource) -> bool:
    print("found process to kill:")
    print(f"  process: {C.CYAN}{info.name}{C.RESET}")
    print(f"  pid: {pid}")
    print(f"  run time: {human_duration(info.run_time)}")
    if info.disk_usage is not None:
        read_b, write_b = info.disk_usage
        print(f"  disk usage: read {read_b} bytes, written {write_b} bytes")
    return source.terminate(pid)


def show_details(entry: PortEntry, info: ProcessInfo) -> None:
    started = local_time(info.start_time) if info.start_time else None
    print(f"{C.CYAN}{entry.process_name}{C.RESET}")
    print(f"Port number: {entry.port_number}")
    print(f"Protocol: {entry.protocol.value}")
    print(f"Port status: {entry.connection_state}")
    print(f"Memory Usage: {info.memory} bytes")
    print(f"CPU Usage: {info.cpu_usage:.1f}%")
    print(f"Run time: {human_duration(info.run_time)}")
    print(f"Start time: {started.strftime('%Y-%m-%d %H:%M:%S %Z') if started else 'N/A'}")
    print(f"Command: {' '.join(info.cmd) if info.cmd else C.GRAY + '(unavailable)' + C.RESET}")


def dispatch(action: Action, entry: PortEntry, source: ProcessSource) -> Optional[Outcome]:
    """Run ``action`` against the live process behind ``entry``.

    Returns None without doing anything when the pid no longer exists.
    """
    info = source.lookup(entry.owning_pid, sample_cpu=action is Action.VIEW_DETAILS)
    if info is None:
        return None

    if action is Action.KILL:
        ok = kill_process(entry.owning_pid, info, source)
        if ok:
            print(f"{C.GREEN}kill: {entry.process_name}{C.RESET}")
        else:
            print(f"{C.RED}failed to send kill signal for pid: {entry.owning_pid} ({entry.process_name}){C.RESET}",
                  file=sys.stderr)
        return Outcome(action, entry.owning_pid, ok)

    show_details(entry, info)
    return Outcome(action, entry.owning_pid, True)


def kill_by_port(port: int, snapshot: Snapshot, source: ProcessSource) -> Dict[int, bool]:
    """Kill every distinct process that owned ``port`` in ``snapshot``.

    Every pid is attempted even if an earlier one fails. Unknown ports are a
    no-op.
    """
    pids: List[int] = []
    seen = set()
    for entry in snapshot.entries_for_port(port):
        if entry.owning_pid not in seen:
            seen.add(entry.owning_pid)
            pids.append(entry.owning_pid)

    results: Dict[int, bool] = {}
    for pid in pids:
        info = source.lookup(pid)
        if info is None:
            results[pid] = False
            continue
        results[pid] = kill_process(pid, info, source)
        if not results[pid]:
            print(f"{C.RED}failed to send kill signal for pid: {pid} ({info.name}){C.RESET}", file=sys.stderr)
    return results
