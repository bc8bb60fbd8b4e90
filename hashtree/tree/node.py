class HashNode:
    """Red-black tree node keyed by the hash of its primary key.

    Keys that share ``key_hash`` with the primary key live in ``collisions``.
    """

    __slots__ = ("key_hash", "key", "value", "collisions", "left", "right", "parent", "red")

    def __init__(self, key_hash=0, key=None, value=None, left=None, right=None, parent=None, red=True):
        self.key_hash = key_hash
        self.key = key
        self.value = value
        self.collisions = {}
        self.left = left
        self.right = right
        self.parent = parent
        self.red = red  # True = RED, False = BLACK

    def copy_payload_from(self, other: "HashNode") -> None:
        """Take over key, value, hash and collisions of ``other``."""
        self.key = other.key
        self.key_hash = other.key_hash
        self.value = other.value
        self.collisions = other.collisions

    def __repr__(self):
        color = "R" if self.red else "B"
        return f"HashNode({self.key_hash}, {self.key!r}, {color})"
