"""A singly linked list of integers and a scripted demonstration."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Node:
    """One link of the list."""

    value: int
    next: Node | None = None


class LinkedList:
    """Singly linked list holding integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"index {index} out of range")

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: int) -> None:
        """Insert a value before the current head."""
        self.head = Node(value, self.head)

    def append(self, value: int) -> None:
        """Add a value after the last node."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert(self, index: int, value: int) -> None:
        """Insert a value so that it ends up at ``index`` (index 0 is refused)."""
        if index == 0:
            raise ValueError("use push_front() to insert at index 0")
        previous = self._node_at(index - 1)
        previous.next = Node(value, previous.next)

    def pop_front(self) -> int:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        value = self.head.value
        self.head = self.head.next
        return value

    def delete_at(self, index: int) -> int:
        """Remove the node at ``index`` (index 0 is refused) and return its value."""
        if index == 0:
            raise ValueError("use pop_front() to delete the first node")
        previous = self._node_at(index - 1)
        target = previous.next
        if target is None:
            raise IndexError(f"index {index} out of range")
        previous.next = target.next
        return target.value

    def index_of(self, value: int) -> int:
        """Return the position of the first node holding ``value``, or -1."""
        for position, item in enumerate(self):
            if item == value:
                return position
        return -1

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def middle(self) -> int:
        """Return the middle value; the second of the two middles for even lengths."""
        if self.head is None:
            raise IndexError("middle of empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.value

    def sort(self) -> None:
        """Sort the values in place with a bubble sort over the links."""
        for passes in range(len(self) - 1, 0, -1):
            node = self.head
            for _ in range(passes):
                following = node.next
                if node.value > following.value:
                    node.value, following.value = following.value, node.value
                node = following


def _print_values(values: LinkedList, out: TextIO) -> None:
    for value in values:
        print(value, file=out)


def run_demo(out: TextIO) -> LinkedList:
    """Run the scripted sequence of list operations, reporting to ``out``."""
    say = lambda text: print(text, file=out)  # noqa: E731

    values = LinkedList([2])
    say(
        "Welcome to singly linked list demo. "
        "Inserting elements 2,3,5 manually into linked list"
    )
    values.append(3)
    values.append(5)

    say("Printing the nodes")
    _print_values(values, out)

    say("Inserting data at the front using in-built function")
    values.push_front(1)
    _print_values(values, out)

    say("Inserting few elements at back")
    for value in (6, 7, 8):
        values.append(value)
    _print_values(values, out)

    say("Inserting element at index 7")
    values.insert(7, 99)
    _print_values(values, out)

    say("deleting first node")
    values.pop_front()
    _print_values(values, out)

    say("deleting node at index 2")
    values.delete_at(2)
    _print_values(values, out)

    for target in (99, 80):
        say(f"Searching for value {target}")
        say("Value: (-1 if not found): ")
        say(values.index_of(target))

    say("finding the length of the list")
    say(len(values))

    say("Reversing the list")
    values.reverse()
    _print_values(values, out)

    say("Finding the middle node")
    say(values.middle())

    say("Sorting the linked list")
    say(f"length of head node:{len(values)}")
    values.sort()
    _print_values(values, out)
    return values


def _read_option(stream) -> int:
    for line in stream:
        tokens = line.split()
        if tokens:
            try:
                return int(tokens[0])
            except ValueError:
                return 0
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Show the menu and run the demonstration when option 1 is chosen."""
    parser = argparse.ArgumentParser(
        prog="dsdemo-linked-list", description="Linked list demonstration."
    )
    parser.add_argument(
        "option", nargs="?", type=int, help="menu number; read from stdin if omitted"
    )
    args = parser.parse_args(argv)

    print("Welcome to Linked List Demonstration\n ", end="")
    print("Select an option: ")
    print("-----------------------------------")
    print("Perform Predefined Operation - 1 ")
    option = args.option if args.option is not None else _read_option(sys.stdin)
    if option == 1:
        run_demo(sys.stdout)
    return 0