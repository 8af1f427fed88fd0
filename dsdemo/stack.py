"""An integer stack and an interactive command session around it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

FIRST_MENU = (
    "Enter commands: \n 1 -- Enter Element \n 2 -- Pop Element \n"
    " 3 -- View Top Element \n 4 -- Exit \n"
)
MENU = (
    "Enter commands: \n 1 -- Enter Element \n 2 -- Pop Element \n"
    " 3 -- View Top Element 4 -- Exit \n"
)


class Stack:
    """Last-in, first-out store of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Place a value on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class _IntReader:
    """Reads whitespace-separated integers; after a bad or missing token every read gives 0."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._tokens = (token for line in lines for token in line.split())
        self._failed = False

    def read(self) -> int:
        if self._failed:
            return 0
        token = next(self._tokens, None)
        try:
            return int(token)
        except (TypeError, ValueError):
            self._failed = True
            return 0


def run_session(lines: Iterable[str], out: TextIO) -> Stack:
    """Drive a stack with menu commands read from ``lines``; return the stack."""
    stack = Stack()
    reader = _IntReader(lines)
    print("Stack Implementation Test", end="", file=out)
    print(FIRST_MENU, end="", file=out)
    command = reader.read()
    while 1 <= command <= 3:
        if command == 1:
            print("Enter the value to add to the stack ", file=out)
            stack.push(reader.read())
        elif command == 2:
            print("Popping out an element out of stack", file=out)
            try:
                value = stack.pop()
            except IndexError:
                value = -1
            print(value, file=out)
        else:
            try:
                value = stack.top()
            except IndexError:
                value = -1
            print(f"Top Element: \t{value}", file=out)
        print(MENU, end="", file=out)
        command = reader.read()
    print("exiting the program", file=out)
    return stack


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive stack session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsdemo-stack", description="Interactive stack session."
    )
    parser.parse_args(argv)
    run_session(sys.stdin, sys.stdout)
    return 0