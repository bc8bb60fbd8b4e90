"""Consistency checks for :class:`HashRBTree`, used by the test-suite."""

from .rb_tree import HashRBTree


def black_height(tree: HashRBTree) -> int:
    """Return the number of black nodes from the root down to a sentinel."""
    height = 0
    node = tree.root
    while node is not tree.NIL:
        if not node.red:
            height += 1
        node = node.left
    return height


def validate_tree(tree: HashRBTree) -> list[str]:
    """Return a list describing every broken invariant (empty when valid)."""
    errors = []
    if tree.is_empty():
        return errors
    if tree.root.red:
        errors.append("root is red")
    if tree.root.parent is not None:
        errors.append("root has a parent")
    if tree.NIL.red:
        errors.append("sentinel is red")

    seen_hashes = set()

    def _walk(node, low, high):
        """Return the black-height of ``node``'s subtree."""
        if node is tree.NIL:
            return 0
        if node.key_hash in seen_hashes:
            errors.append(f"hash {node.key_hash} stored in more than one node")
        seen_hashes.add(node.key_hash)
        if (low is not None and node.key_hash <= low) or (
            high is not None and node.key_hash >= high
        ):
            errors.append(f"hash {node.key_hash} out of order")
        if node.key in node.collisions:
            errors.append(f"key {node.key!r} duplicated in collisions")
        for child in (node.left, node.right):
            if child is not tree.NIL and child.parent is not node:
                errors.append(f"broken parent link below hash {node.key_hash}")
            if node.red and child.red:
                errors.append(f"red node {node.key_hash} has a red child")
        left = _walk(node.left, low, node.key_hash)
        right = _walk(node.right, node.key_hash, high)
        if left != right:
            errors.append(f"black-height mismatch at hash {node.key_hash}")
        return left + (0 if node.red else 1)

    _walk(tree.root, None, None)
    return errors
