"""Simple command parsing utilities for the path-finding CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ...core.coordinate import Coordinate


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None

    cmd = parts[0].lower()

    if cmd == "scenario":
        return CLICommand(name="scenario", args=parts[1:2])

    return CLICommand(name=cmd, args=parts[1:])


def parse_coordinate(text: str) -> Coordinate:
    """Parse ``x,y`` (optionally wrapped in ``()`` or ``{}``) into a :class:`Coordinate`."""
    raw = text.strip().strip("(){}")
    pieces = raw.split(",")
    if len(pieces) != 2:
        raise ValueError(f"Invalid coordinate '{text}', expected x,y")
    try:
        x, y = (int(p.strip()) for p in pieces)
    except ValueError:
        raise ValueError(f"Invalid coordinate '{text}', components must be integers") from None
    return Coordinate(x, y)


__all__ = ["CLICommand", "parse_command", "parse_coordinate"]
