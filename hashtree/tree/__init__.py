from .node import HashNode
from .rb_tree import HashRBTree, GREATER, LOWER, SAME
from .validation import black_height, validate_tree

__all__ = [
    "HashNode",
    "HashRBTree",
    "GREATER",
    "LOWER",
    "SAME",
    "black_height",
    "validate_tree",
]
