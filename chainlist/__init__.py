"""A singly linked list of integers, its nodes, and a printed demonstration."""

__version__ = "0.1.0"
__all__ = ["demo", "linked_list", "node"]