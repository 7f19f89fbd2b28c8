"""Towers of Hanoi solved recursively over three stacks of disks."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from arborlab.stack import Stack


@dataclass
class Tower:
    """A numbered peg holding a stack of disk weights."""

    number: int
    disks: Stack[int] = field(default_factory=Stack)


@dataclass(frozen=True)
class Move:
    """One disk moved from one tower to another."""

    number: int
    disk: int
    source: int
    destination: int

    def __str__(self) -> str:
        return (
            f"Move {self.number}: Weight #{self.disk} "
            f"from {self.source} to {self.destination}"
        )


def _moves(
    n: int, source: Tower, destination: Tower, auxiliary: Tower, counter: list[int]
) -> Iterator[Move]:
    if n <= 0:
        return
    yield from _moves(n - 1, source, auxiliary, destination, counter)
    disk = source.disks.pop()
    destination.disks.push(disk)
    counter[0] += 1
    yield Move(counter[0], disk, source.number, destination.number)
    yield from _moves(n - 1, auxiliary, destination, source, counter)


def solve_hanoi(n: int) -> list[Move]:
    """Return the moves that carry ``n`` disks from tower 1 to tower 2 via tower 3."""
    first, second, third = Tower(1), Tower(2), Tower(3)
    for disk in range(n, 0, -1):
        first.disks.push(disk)
    return list(_moves(n, first, second, third, [0]))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the moves for the number of disks given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Incorrect number of inputs")
        return 1
    try:
        count = int(args[0])
    except ValueError:
        print(f"Invalid number of disks: {args[0]}")
        return 1
    for move in solve_hanoi(count):
        print(move)
    return 0


if __name__ == "__main__":
    sys.exit(main())