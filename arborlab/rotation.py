"""Rotate a list of integers left or right through a singly linked list."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from arborlab.linked_list import SinglyLinkedList


def rotate_values(values: Iterable[int], rotations: int, direction: str) -> list[int]:
    """Rotate ``values`` by ``rotations`` places; ``"R"`` rotates right, anything else left."""
    if rotations < 0:
        raise ValueError("rotations must not be negative")
    items = SinglyLinkedList(values)
    length = len(items)
    if length == 0:
        raise ValueError("can't rotate an empty list")
    if rotations > length:
        rotations %= length
    if direction == "R":
        rotations = abs(length - rotations)
    items.rotate(rotations)
    return list(items)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return token


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Interactively read lists from standard input and print their rotations."""
    tokens = _tokens(sys.stdin)
    try:
        again = "y"
        while again == "y":
            print("-" * 71)
            print("Enter the length, number of rotations, and the direction (L/R).")
            print("e.g.: length = 5, number of rotations = 4, and the direction is left...")
            print("Then the desired input is: 5 4 L")
            print("Enter your values: ", end="")
            length = int(_next_token(tokens))
            rotations = int(_next_token(tokens))
            direction = _next_token(tokens)[0]
            print(
                f"User entered: Length = {length}, NumRotations = {rotations}, "
                f"and will rotate in {direction} direction."
            )
            print(f"Please enter {length} integers: ", end="")
            values = [int(_next_token(tokens)) for _ in range(length)]
            print(f"Initial List: {SinglyLinkedList(values)}")
            try:
                rotated = rotate_values(values, rotations, direction)
            except ValueError as error:
                print(error)
                rotated = values
            print(f"Rotated List: {SinglyLinkedList(rotated)}")
            print("Continue? Enter y/n: ", end="")
            again = _next_token(tokens)
    except (EOFError, ValueError) as error:
        print(f"\nInvalid input: {error}")
        return 1
    print("...Exiting Program ...")
    return 0


if __name__ == "__main__":
    sys.exit(main())