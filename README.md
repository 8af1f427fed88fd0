# dsdemo

Small, readable implementations of classic data structures and algorithms,
each with a command-line demonstration:

- `dsdemo.sorting`: bubble, selection, insertion, merge and quick sort.
- `dsdemo.linked_list`: a singly linked list of integers.
- `dsdemo.stack`: a simple stack of integers.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line demonstrations

### Sorting

```
dsdemo-sort [CHOICE]
```

This prints a menu. The choice is taken from the optional `CHOICE` argument,
or else read from standard input:

| Choice | Algorithm      |
|--------|----------------|
| 1      | Bubble sort    |
| 2      | Selection sort |
| 3      | Insertion sort |
| 4      | Merge sort     |
| 5      | Quick sort     |

It then sorts the fixed array `2 1 4 3 1 22 199 12 21` with that algorithm and
prints the array before and after. Any other choice prints
`Select valid options` and an empty sorted array.

### Linked list

```
dsdemo-linked-list [OPTION]
```

Option `1` (given as an argument or entered on standard input) runs a scripted
sequence of operations: appending, inserting at the front and at an index,
deleting, searching, measuring the length, reversing, finding the middle and
sorting. The list is printed after each step. Any other option just exits.

### Stack

```
dsdemo-stack
```

Enter commands on standard input:

- `1` then a number: push that number
- `2`: pop the top element and print it
- `3`: print the top element
- anything else (including end of input or a non-number): exit

In the session, popping or looking at the top of an empty stack prints `-1`.

## Using the library

```python
from dsdemo.sorting import merge_sort, quick_sort, format_values
from dsdemo.linked_list import LinkedList
from dsdemo.stack import Stack

merge_sort([3, 1, 2])          # [1, 2, 3]
format_values([1, 2, 3])       # "1 2 3"

items = LinkedList([2, 3, 5])
items.push_front(1)            # [1, 2, 3, 5]
items.append(6)                # [1, 2, 3, 5, 6]
items.insert(2, 99)            # [1, 2, 99, 3, 5, 6]
items.index_of(99)             # 2
items.index_of(80)             # -1
items.delete_at(2)             # returns 99
items.pop_front()              # returns 1
items.reverse()                # [6, 5, 3, 2]
items.middle()                 # 3 (the second middle for even lengths)
items.sort()                   # [2, 3, 5, 6]
len(items)                     # 4

stack = Stack()
stack.push(4)
stack.top()                    # 4
stack.pop()                    # 4
stack.is_empty()               # True
```

Each sorting function accepts any iterable of integers and returns a new
sorted list. `LinkedList` supports `len()` and iteration; its `sort()` and
`reverse()` work in place.

Errors are raised rather than signalled by return values:

- `LinkedList.insert(0, ...)` and `LinkedList.delete_at(0)` raise `ValueError`;
  use `push_front()` and `pop_front()` for the first position.
- An index past the end, `pop_front()` on an empty list and `middle()` of an
  empty list raise `IndexError`.
- `Stack.pop()` and `Stack.top()` on an empty stack raise `IndexError`.

## What it does not do

Each demonstration works on fixed data or on numbers typed in one session;
nothing is saved between runs. There is no heap, counting or radix sort, and
no queue: the stack module provides a stack only.