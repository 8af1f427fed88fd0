"""Sorting algorithms, a singly linked list and a stack, with console demos."""

__version__ = "0.1.0"
__all__ = ["sorting", "linked_list", "stack"]