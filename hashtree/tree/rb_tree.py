"""Red-black tree ordered by key hash.

Only the tree structure lives here: lookups by hash, attaching new nodes,
detaching nodes and the rotations/recoloring that keep the tree balanced.
What a node stores besides its hash is handled by :mod:`hashtree.hash_map`.
"""

import logging

from .node import HashNode

logger = logging.getLogger(__name__)

GREATER = 1
SAME = 0
LOWER = -1


class HashRBTree:
    """Red-black tree whose sort key is ``HashNode.key_hash``."""

    def __init__(self):
        self.NIL = HashNode(red=False)  # shared black sentinel for every missing child
        self.root = self.NIL

    def is_empty(self) -> bool:
        return self.root is self.NIL

    def new_node(self, key_hash, key, value) -> HashNode:
        return HashNode(key_hash, key, value, left=self.NIL, right=self.NIL, red=True)

    # —— Basic rotations ——
    def rotate_left(self, node: HashNode) -> None:
        pivot = node.right
        if pivot is self.NIL:
            return
        node.right = pivot.left
        if pivot.left is not self.NIL:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self.root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def rotate_right(self, node: HashNode) -> None:
        pivot = node.left
        if pivot is self.NIL:
            return
        node.left = pivot.right
        if pivot.right is not self.NIL:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self.root = pivot
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot

    # —— Search ——
    def find(self, key_hash):
        """Return the node holding ``key_hash`` or ``None``."""
        node = self.root
        while node is not self.NIL:
            if key_hash > node.key_hash:
                node = node.right
            elif key_hash < node.key_hash:
                node = node.left
            else:
                return node
        return None

    def find_insertion_parent(self, key_hash):
        """Return ``(node, position)`` where ``key_hash`` belongs.

        ``position`` is ``SAME`` when ``node`` already holds ``key_hash``,
        otherwise the side of ``node`` where a new child must be attached.
        The tree must not be empty.
        """
        node = self.root
        while True:
            if key_hash > node.key_hash:
                if node.right is self.NIL:
                    return node, GREATER
                node = node.right
            elif key_hash < node.key_hash:
                if node.left is self.NIL:
                    return node, LOWER
                node = node.left
            else:
                return node, SAME

    # —— Insertion ——
    def attach(self, parent, position, node: HashNode) -> None:
        """Link ``node`` below ``parent`` (or as root) and rebalance."""
        node.parent = parent
        if parent is None:
            self.root = node
        elif position == GREATER:
            parent.right = node
        elif position == LOWER:
            parent.left = node
        else:
            raise ValueError(f"cannot attach at position {position}")
        logger.debug("attached node with hash %s", node.key_hash)
        self._insert_fix(node)

    def _insert_fix(self, node: HashNode) -> None:
        while True:
            parent = node.parent
            if parent is None:  # Case 1
                node.red = False
                return
            if not parent.red:  # Case 2
                return
            grandparent = parent.parent
            uncle = grandparent.right if parent is grandparent.left else grandparent.left
            if uncle.red:  # Case 3
                parent.red = False
                uncle.red = False
                grandparent.red = True
                node = grandparent
                continue
            # Case 4
            if node is parent.right and parent is grandparent.left:
                self.rotate_left(parent)
                node = node.left
            elif node is parent.left and parent is grandparent.right:
                self.rotate_right(parent)
                node = node.right
            # Case 5
            parent = node.parent
            grandparent = parent.parent
            parent.red = False
            grandparent.red = True
            if node is parent.left:
                self.rotate_right(grandparent)
            else:
                self.rotate_left(grandparent)
            return

    # —— Deletion ——
    def _leftmost(self, node: HashNode) -> HashNode:
        while node.left is not self.NIL:
            node = node.left
        return node

    def _rightmost(self, node: HashNode) -> HashNode:
        while node.right is not self.NIL:
            node = node.right
        return node

    def replacement_for(self, node: HashNode) -> HashNode:
        """Return the node that is physically unlinked when ``node`` goes away."""
        if node.right is not self.NIL:
            return self._leftmost(node.right)
        if node.left is not self.NIL:
            return self._rightmost(node.left)
        return node

    def detach(self, node: HashNode) -> None:
        """Remove ``node``'s entry from the tree and rebalance.

        The in-order neighbour's payload is moved into ``node`` and the
        neighbour is unlinked instead, so ``node`` may stay in the tree
        carrying a different hash afterwards.
        """
        replacement = self.replacement_for(node)
        node.copy_payload_from(replacement)

        child = replacement.right
        if child is self.NIL:
            child = replacement.left

        parent = replacement.parent
        child.parent = parent
        if parent is None:
            self.root = child
        elif replacement is parent.left:
            parent.left = child
        else:
            parent.right = child
        logger.debug("detached node, hash %s moved into its slot", node.key_hash)

        if not replacement.red:
            if child.red:
                child.red = False
            else:
                self._delete_fix(child)

        if self.root is not self.NIL:
            self.root.parent = None
        self.NIL.parent = None

    def _sibling(self, node: HashNode) -> HashNode:
        parent = node.parent
        return parent.right if node is parent.left else parent.left

    def _delete_fix(self, node: HashNode) -> None:
        while node.parent is not None:  # Case 1 ends the loop at the root
            parent = node.parent
            sibling = self._sibling(node)

            # Case 2
            if sibling.red:
                parent.red = True
                sibling.red = False
                if node is parent.left:
                    self.rotate_left(parent)
                else:
                    self.rotate_right(parent)
                sibling = self._sibling(node)

            nephews_black = not sibling.left.red and not sibling.right.red
            # Case 3
            if not parent.red and not sibling.red and nephews_black:
                sibling.red = True
                node = parent
                continue

            # Case 4
            if parent.red and not sibling.red and nephews_black:
                sibling.red = True
                parent.red = False
                return

            # Case 5
            if not sibling.red:
                if node is parent.left and not sibling.right.red and sibling.left.red:
                    sibling.red = True
                    sibling.left.red = False
                    self.rotate_right(sibling)
                elif node is parent.right and not sibling.left.red and sibling.right.red:
                    sibling.red = True
                    sibling.right.red = False
                    self.rotate_left(sibling)
                sibling = self._sibling(node)

            # Case 6
            sibling.red = parent.red
            parent.red = False
            if node is parent.left:
                sibling.right.red = False
                self.rotate_left(parent)
            else:
                sibling.left.red = False
                self.rotate_right(parent)
            return
