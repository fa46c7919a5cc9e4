"""
AVL tree nodes. Every mutating operation returns the new root of the subtree it
was called on so the caller can reattach it, e.g. `node.left =
node.left.store(key, value)`. Rebalancing happens on the way back up the
recursion, one level at a time, so a balance factor never exceeds 2.

Empty subtrees are represented by the `EMPTY` singleton instead of `None`,
which lets every operation recurse without checking for missing children.
"""
import io
import logging

from . import settings

logger = logging.getLogger(__name__)


class TreeCorruption(Exception):
    pass


class UnbalancedTree(TreeCorruption):
    pass


class HeightMismatch(TreeCorruption):
    pass


class EmptyNode:
    """
    An empty subtree. Holds no state so a single instance is shared by every
    tree.
    """

    empty = True
    height = 0
    size = 0
    value = None

    def __iter__(self):
        return iter(())

    def __repr__(self):
        return "EMPTY"

    def store(self, key, value):
        return Node(key, value)

    def retrieve(self, key):
        raise KeyError(key)

    def delete(self, key):
        # nothing removed, nothing changed
        return self, self

    def rotate(self):
        return self

    def update_height(self):
        pass

    def dump_tree(self, out, indent=""):
        pass

    def dump_sexp(self):
        return None

    def check_height(self):
        pass


EMPTY = EmptyNode()


class Node:
    empty = False

    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.height = 1
        self.left = EMPTY
        self.right = EMPTY

    def __repr__(self):
        return f"Node({self.key!r}, {self.value!r}, height={self.height})"

    @property
    def size(self):
        return self.left.size + 1 + self.right.size

    def __iter__(self):
        """
        Inorder traversal, yields `(key, value)` pairs in ascending key order.
        """
        yield from self.left
        yield self.key, self.value
        yield from self.right

    def keys(self):
        return [k for k, _ in self]

    def values(self):
        return [v for _, v in self]

    def store(self, key, value):
        if key < self.key:
            self.left = self.left.store(key, value)
        elif key > self.key:
            self.right = self.right.store(key, value)
        else:
            self.value = value

        return self.rotate()

    def retrieve(self, key):
        if key < self.key:
            return self.left.retrieve(key)
        elif key > self.key:
            return self.right.retrieve(key)
        return self.value

    def delete(self, key):
        """
        Returns a `(deleted_node, new_root)` tuple. `deleted_node` is `EMPTY`
        when the key isn't in the subtree.
        """
        if key < self.key:
            deleted, self.left = self.left.delete(key)
            return deleted, self.rotate()
        elif key > self.key:
            deleted, self.right = self.right.delete(key)
            return deleted, self.rotate()
        return self, self._delete_self().rotate()

    def delete_min(self):
        if self.left.empty:
            return self, self._delete_self()

        deleted, self.left = self.left.delete_min()
        return deleted, self.rotate()

    def delete_max(self):
        if self.right.empty:
            return self, self._delete_self()

        deleted, self.right = self.right.delete_max()
        return deleted, self.rotate()

    def _delete_self(self):
        """
        Unlinks this node and returns the subtree that takes its place. The
        max of the left subtree (or min of the right, whichever side is
        taller) is moved into this position, keeping its own key and value.
        """
        if self.left.empty and self.right.empty:
            replacement = EMPTY
        elif self.right.height < self.left.height:
            replacement, new_left = self.left.delete_max()
            replacement.left, replacement.right = new_left, self.right
        else:
            replacement, new_right = self.right.delete_min()
            replacement.left, replacement.right = self.left, new_right

        self.left = self.right = EMPTY
        return replacement

    def update_height(self):
        self.height = max(self.left.height, self.right.height) + 1

    def rotate(self):
        """
        Restores the balance of this node, assuming both subtrees are already
        balanced, and returns the new subtree root with its height updated.
        """
        balance = self.left.height - self.right.height

        if balance == 2:
            if self.left.left.height >= self.left.right.height:
                root = self._rotate_right()
            else:
                root = self._rotate_left_right()
        elif balance == -2:
            if self.right.left.height <= self.right.right.height:
                root = self._rotate_left()
            else:
                root = self._rotate_right_left()
        else:
            root = self

        root.update_height()
        return root

    def _rotate_left(self):
        """
        Single rotation for a right-right heavy subtree.

          B              D
         / \\            / \\
        a   D    ->    B   E
           / \\        / \\
          c   E      a   c
        """
        root = self.right
        self.right = root.left
        root.left = self
        self.update_height()
        return root

    def _rotate_right(self):
        """
        Inverse of `_rotate_left`, for a left-left heavy subtree.

            D          B
           / \\        / \\
          B   e  ->  A   D
         / \\            / \\
        A   c          c   e
        """
        root = self.left
        self.left = root.right
        root.right = self
        self.update_height()
        return root

    def _rotate_right_left(self):
        """
        Double rotation for a right-left heavy subtree.

          B               D
         / \\            /   \\
        a   F    ->    B     F
           / \\        / \\   / \\
          D   g      a   c e   g
         / \\
        c   e
        """
        other = self.right
        root = other.left
        self.right = root.left
        other.left = root.right
        root.left = self
        root.right = other
        other.update_height()
        self.update_height()
        return root

    def _rotate_left_right(self):
        """
        Double rotation for a left-right heavy subtree.

            F             D
           / \\          /   \\
          B   g  ->    B     F
         / \\          / \\   / \\
        a   D        a   c e   g
           / \\
          c   e
        """
        other = self.left
        root = other.right
        self.left = root.right
        other.right = root.left
        root.right = self
        root.left = other
        other.update_height()
        self.update_height()
        return root

    def dump_tree(self, out, indent=""):
        # right subtree first so the output reads like the tree rotated 90 degrees
        self.right.dump_tree(out, indent + settings.DUMP_INDENT)
        out.write(
            f"{indent}#<{type(self).__name__}:0x{id(self):010x} {self.height} "
            f"{self.key!r}> => {self.value!r}\n"
        )
        self.left.dump_tree(out, indent + settings.DUMP_INDENT)

    def dump_sexp(self):
        left = self.left.dump_sexp()
        right = self.right.dump_sexp()

        if left is None and right is None:
            return str(self.key)

        parts = [str(self.key), left if left is not None else "-"]
        if right is not None:
            parts.append(right)
        return "(" + " ".join(parts) + ")"

    def check_height(self):
        self.left.check_height()
        self.right.check_height()

        left_height = self.left.height
        right_height = self.right.height

        if abs(left_height - right_height) > 1:
            self._log_dump()
            raise UnbalancedTree(
                f"height unbalanced: {left_height} {self.height} {right_height}"
            )
        if max(left_height, right_height) + 1 != self.height:
            self._log_dump()
            raise HeightMismatch(
                f"height calc failure: {left_height} {self.height} {right_height}"
            )

    def _log_dump(self):
        out = io.StringIO()
        self.dump_tree(out)
        logger.error("invalid subtree at key %r:\n%s", self.key, out.getvalue())
