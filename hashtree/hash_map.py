import logging

from .tree.rb_tree import HashRBTree, SAME

logger = logging.getLogger(__name__)


class HashTreeMap:
    """Key/value map stored in a red-black tree ordered by ``hash_func(key)``.

    Distinct keys with the same hash share one tree node: the first one is the
    node's primary entry, the others go to the node's ``collisions`` dict.
    Not thread-safe; callers sharing an instance must lock around it.
    """

    def __init__(self, hash_func) -> None:
        if not callable(hash_func):
            raise TypeError("hash_func must be callable")
        self.hash_func = hash_func
        self._tree = HashRBTree()
        self._size = 0

    def insert(self, key, value) -> None:
        """Insert ``key`` or overwrite its current value."""
        key_hash = self.hash_func(key)
        if self._tree.is_empty():
            self._tree.attach(None, SAME, self._tree.new_node(key_hash, key, value))
            self._size += 1
            return

        parent, position = self._tree.find_insertion_parent(key_hash)
        if position != SAME:
            self._tree.attach(parent, position, self._tree.new_node(key_hash, key, value))
            self._size += 1
            return

        if key == parent.key:
            parent.value = value
            return
        if key not in parent.collisions:
            self._size += 1
            logger.debug("hash collision on %s, bucket grows to %d", key_hash, len(parent.collisions) + 2)
        parent.collisions[key] = value

    def get(self, key):
        """Return ``(value, found)``; ``value`` is ``None`` when not found."""
        if self._tree.is_empty():
            return None, False
        node = self._tree.find(self.hash_func(key))
        if node is None:
            return None, False
        if key == node.key:
            return node.value, True
        if key in node.collisions:
            return node.collisions[key], True
        return None, False

    def remove(self, key) -> bool:
        """Remove ``key``; return ``False`` when it was not stored."""
        if self._tree.is_empty():
            return False
        node = self._tree.find(self.hash_func(key))
        if node is None:
            return False

        if node.collisions:
            if key == node.key:
                node.key, node.value = node.collisions.popitem()
            elif key in node.collisions:
                del node.collisions[key]
            else:
                return False
            self._size -= 1
            return True

        if key != node.key:
            return False
        self._tree.detach(node)
        self._size -= 1
        return True

    def is_empty(self) -> bool:
        return self._tree.is_empty()

    def __contains__(self, key) -> bool:
        return self.get(key)[1]

    def __len__(self) -> int:
        return self._size
