from __future__ import annotations
from typing import Callable, Optional, Sequence, TypeVar

from .utils import C

T = TypeVar("T")


def choose(
    prompt: str,
    options: Sequence[T],
    label: Callable[[T], str] = str,
    read: Callable[[str], str] = input,
) -> Optional[T]:
    """Numbered terminal menu. Returns the picked option, or None on cancel.

    An empty answer, EOF or Ctrl-C cancels; anything else that is not a valid
    number asks again.
    """
    if not options:
        return None
    print(prompt)
    width = len(str(len(options)))
    for idx, opt in enumerate(options, 1):
        print(f"{C.GRAY}{idx:>{width}}){C.RESET} {label(opt)}")

    while True:
        try:
            raw = read("Select # (empty to cancel): ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        if not raw:
            return None
        if raw.isdecimal() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        print(f"{C.YELLOW}Invalid selection.{C.RESET}")
