from __future__ import annotations
import argparse
import sys
from typing import Callable, List, Optional

from .actions import dispatch
from .config import load_config
from .correlate import build
from .menu import choose
from .models import Action, SocketRecord
from .proc import ProcessSource
from .sockets import SocketSourceError, list_sockets
from .utils import C, format_entry

ENTRY_PROMPT = "List of processes:\nPid:Port -- Name -- Status -- Protocol"
ACTIONS = [Action.KILL, Action.VIEW_DETAILS]


def run_session(
    sockets: List[SocketRecord],
    source: ProcessSource,
    read: Callable[[str], str] = input,
) -> int:
    snapshot = build(sockets, source.refresh_all())
    if not snapshot.entries:
        print("No open sockets found.")
        return 0

    picked = choose(ENTRY_PROMPT, snapshot.entries, label=format_entry, read=read)
    if picked is None:
        print("No entry selected, nothing to do.")
        return 0

    action = choose(
        f"What would you like to do with {picked.process_name!r}:{picked.port_number}?",
        ACTIONS,
        read=read,
    )
    if action is None:
        print("No action selected, nothing to do.")
        return 0

    dispatch(action, picked, source)
    return 0


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="portpick",
        description="Pick an open port, then kill or inspect the process that owns it",
    )


def main(argv: Optional[List[str]] = None) -> int:
    build_parser().parse_args(argv)
    cfg = load_config()
    C.use_color(bool(cfg.get("color", True)) and sys.stdout.isatty())

    try:
        sockets = list_sockets()
    except SocketSourceError as e:
        print(f"error getting socket info: {e}", file=sys.stderr)
        return 1

    return run_session(sockets, ProcessSource())
