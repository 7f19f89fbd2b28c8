"""Search trees, stacks and linked lists, with small programs that use them."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "browser",
    "btree",
    "hanoi",
    "linked_list",
    "palindrome",
    "rbtree",
    "rotation",
    "splay",
    "stack",
    "stanislaus",
    "student",
]