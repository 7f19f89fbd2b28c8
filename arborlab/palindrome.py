"""Check whether a word reads the same forwards and backwards."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` equals its reverse."""
    first, last = 0, len(text) - 1
    while first < last:
        if text[first] != text[last]:
            return False
        first += 1
        last -= 1
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Report whether the single argument is a palindrome, and its length."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Need exactly 2 inputs")
        return 1
    text = args[0]
    print("True" if is_palindrome(text) else "False")
    print(f"{text} has a length of {len(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())