"""Command-line driver: build two sets from input and apply one operation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import Optional

from intsets.intset import IntSet

_HEADER = "\ninsercoes feitas!\n"


def _reader(text: str):
    tokens: Iterator[str] = iter(text.split())

    def read() -> int:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        return int(token)

    return read


def run(text: str) -> str:
    """Process whitespace-separated input and return the text to print.

    Input: structure type (0 tree, 1 list), the sizes of A and B, their
    elements, an operation code (1 membership, 2 union, 3 intersection,
    4 removal from A) and, for 1 and 4, the key it applies to.
    """
    read = _reader(text)
    kind = read()
    n_a, n_b = read(), read()
    a = IntSet(kind, n_a)
    b = IntSet(kind, n_b)
    for _ in range(n_a):
        a.insert(read())
    for _ in range(n_b):
        b.insert(read())

    out = [_HEADER, a.format(), "\n", "\n", b.format(), "\n", "\n"]

    op = read()
    if op == 1:
        out.append("Pertence." if read() in a else "Nao pertence.")
    elif op == 2:
        out.append(a.union(b).format() + "\n")
    elif op == 3:
        out.append(a.intersection(b).format() + "\n")
    elif op == 4:
        if not a.remove(read()):
            out.append("elemento nao esta no conjunto\n")
        out.append(a.format() + "\n")
    return "".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the problem from standard input and print the result."""
    parser = argparse.ArgumentParser(
        prog="intsets",
        description="Build two integer sets from standard input and apply an operation.",
    )
    parser.parse_args(argv)
    try:
        sys.stdout.write(run(sys.stdin.read()))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())