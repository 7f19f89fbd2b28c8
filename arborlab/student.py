"""Student records stored in a B-tree keyed by student ID."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

from arborlab.btree import BTree

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(order=True)
class Student:
    """A student; comparisons and equality use the ID alone."""

    student_id: int = 0
    first: str = field(default="", compare=False)
    last: str = field(default="", compare=False)
    email: str = field(default="", compare=False)
    major: str = field(default="", compare=False)

    def __str__(self) -> str:
        return (
            f"{self.student_id}: {self.last}, {self.first}. "
            f"{self.email}, {self.major}. {self.major}\n"
        )


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_student(line: str) -> Student:
    """Parse ``id,first,last,email,major``; missing fields are empty, a bad ID is 0."""
    fields = line.rstrip("\r\n").split(",")
    fields += [""] * (5 - len(fields))
    identifier, first, last, email, major = fields[:5]
    return Student(_leading_int(identifier), first, last, email, major)


def load_students(path: str, order: int = 4) -> BTree:
    """Read one student per non-blank line of ``path`` into a B-tree."""
    tree = BTree(order)
    with open(path, encoding="utf-8") as stream:
        for line in stream:
            if line.strip():
                tree.insert(parse_student(line))
    return tree


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the student file given as the only argument and seek IDs 86 and 10."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Incorrect Number of Inputs")
        return 1
    try:
        tree = load_students(args[0])
    except OSError:
        print(f"Invalid File: {args[0]}")
        return 1
    print(tree.describe_search(Student(86)), end="")
    print("----------")
    print(tree.describe_search(Student(10)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())