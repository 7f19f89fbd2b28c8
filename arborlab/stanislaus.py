"""Evaluate prefix propositional formulas with per-level stacks."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional, Sequence

from arborlab.stack import Stack

DEFAULT_LEVELS = 9

EXAMPLE_ONE = ("CI1N0IN10", (1, 2, 3, 3, 4, 2, 3, 4, 3))
EXAMPLE_TWO = (
    "NDICDIN11ICN1C1D1111CDIN1N11DI11CD1N1DN11",
    (
        1, 2, 3, 4, 5, 6, 7, 8, 7,
        6, 7, 8, 8, 9, 7, 8, 8, 9, 9, 5, 6,
        3, 4, 5, 6, 7, 6, 7, 4,
        4, 5, 6, 6,
        5, 6, 7, 7, 8,
        6, 7, 8, 7,
    ),
)


class Stanislaus:
    """A stack machine evaluating formulas over the symbols 0, 1, N, I, C and D.

    Each symbol is pushed with the nesting level at which it occurs; the
    machine then evaluates symbols in the reverse order of pushing, taking
    each from the stack of its level.  Unknown symbols are skipped.
    """

    def __init__(self, levels: int = DEFAULT_LEVELS) -> None:
        self._levels: list[Stack[str]] = [Stack() for _ in range(levels)]
        self._order: Stack[int] = Stack()
        self._values: Stack[bool] = Stack()

    def push(self, symbol: str, level: int) -> None:
        """Record ``symbol`` at nesting ``level`` (0-based)."""
        if not 0 <= level < len(self._levels):
            raise IndexError(f"level {level} is out of range")
        self._levels[level].push(symbol)
        self._order.push(level)

    def _negation(self) -> None:
        self._values.replace_top(not self._values.top())

    def _binary(self, operation: Callable[[bool, bool], bool]) -> None:
        p = self._values.pop()
        q = self._values.pop()
        self._values.push(operation(p, q))

    def run(self) -> bool:
        """Evaluate every pushed symbol and return the resulting truth value."""
        while self._order:
            level = self._order.top()
            symbol = self._levels[level].top()
            if symbol == "0":
                self._values.push(False)
            elif symbol == "1":
                self._values.push(True)
            elif symbol == "N":
                self._negation()
            elif symbol == "I":
                self._binary(lambda p, q: (not p) or q)
            elif symbol == "C":
                self._binary(lambda p, q: p and q)
            elif symbol == "D":
                self._binary(lambda p, q: p or q)
            self._order.pop()
            self._levels[level].pop()
        if not self._values:
            raise ValueError("the formula produced no value")
        return self._values.pop()


def solve(symbols: Iterable[str], arities: Iterable[int]) -> bool:
    """Evaluate a formula given its symbols and their 1-based nesting levels."""
    machine = Stanislaus()
    for symbol, arity in zip(symbols, arities, strict=True):
        machine.push(symbol, arity - 1)
    return machine.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate the two built-in example formulas and print their results."""
    for number, (symbols, arities) in enumerate((EXAMPLE_ONE, EXAMPLE_TWO), start=1):
        print("-------------------------------------")
        print(f"Test {number}...")
        print(f"The final solution is {int(solve(symbols, arities))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())