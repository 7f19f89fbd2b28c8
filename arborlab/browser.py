"""Browser history records read four lines at a time and printed back."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Site:
    """One visited web page."""

    url: str = ""
    title: str = ""
    time: str = ""
    date: str = ""

    def __str__(self) -> str:
        return (
            f"\nURL: {self.url}\n"
            f"Website Title: {self.title}\n"
            f"Time Accessed: {self.time}\n"
            f"Date Accessed: {self.date}\n"
        )


def read_sites(stream: Iterable[str]) -> list[Site]:
    """Read sites as groups of URL, title, time and date lines.

    A final incomplete group is padded with empty fields.
    """
    lines = iter(line.rstrip("\r\n") for line in stream)
    return [Site(*group) for group in zip_longest(lines, lines, lines, lines, fillvalue="")]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every site in the history file named by the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Incorrect number of inputs")
        return 1
    try:
        with open(args[0], encoding="utf-8") as stream:
            sites = read_sites(stream)
    except OSError:
        print(f"Input File Name {args[0]} does not exist")
        return 1
    for site in sites:
        print(site, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())