"""Convert a distance in furlongs to kilometres."""

from __future__ import annotations

import re
import sys

FACTOR = 0.201168

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_INSTRUCTIONS = (
    "Welcome to the distance conversion program.\n"
    "You will be asked to enter a distance in furlongs, i.e. 3.12.4,\n"
    "then I will compute and display the converted distance in kilometers.\n"
)


def greeting() -> str:
    """Return the classic first-program greeting."""
    return "Hello World"


def to_kilometres(furlongs: float) -> float:
    """Convert furlongs to kilometres."""
    return furlongs * FACTOR


def parse_furlongs(text: str) -> float:
    """Read the number at the start of ``text``; trailing text is ignored."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def main(argv: list[str] | None = None) -> int:
    """Ask for a distance on standard input and print it in kilometres."""
    print(_INSTRUCTIONS)
    while True:
        sys.stdout.write("Please enter a distance in furlongs: ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return 1
        try:
            furlongs = parse_furlongs(line)
        except ValueError:
            print("Invalid number, please try again")
            continue
        break
    kilometres = to_kilometres(furlongs)
    print(f"{furlongs:g} furlong(s) is approx. {kilometres:g} kilometers.")
    return 0


if __name__ == "__main__":
    sys.exit(main())