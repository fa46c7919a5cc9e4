import io
import logging

from . import settings
from .node import EMPTY

logger = logging.getLogger(__name__)

_UNSET = object()


class ConfigurationError(ValueError):
    pass


class AVLTree:
    """
    A sorted map on top of an AVL tree. Keys are normalised with `key` (`str`
    unless `settings.COERCE_KEYS` is off) before they reach the tree.

    Missing keys resolve to `default` if one was given, otherwise to a fresh
    `default_factory()` result, otherwise to None. Unlike `defaultdict` the
    resolved default is never inserted.
    """

    def __init__(self, default=_UNSET, default_factory=None, key=_UNSET):
        if default is not _UNSET and default_factory is not None:
            raise ConfigurationError("default and default_factory are exclusive")

        if key is _UNSET:
            key = str if settings.COERCE_KEYS else None

        self.root = EMPTY
        self._default = default
        self._default_factory = default_factory
        self._key = key

    @property
    def default(self):
        if self._default is _UNSET:
            return None
        return self._default

    @default.setter
    def default(self, value):
        self._default = value

    @property
    def default_factory(self):
        return self._default_factory

    def __repr__(self):
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{pairs}}})"

    def __len__(self):
        return self.root.size

    @property
    def size(self):
        return len(self)

    def is_empty(self):
        return self.root is EMPTY

    def __bool__(self):
        return not self.is_empty()

    def _normalize(self, key):
        if self._key is None:
            return key
        return self._key(key)

    def _default_value(self):
        if self._default is not _UNSET:
            return self._default
        if self._default_factory is not None:
            return self._default_factory()
        return None

    def _checked(self):
        if settings.CHECK_INVARIANTS:
            logger.debug("checking tree invariants, size=%d", len(self))
            self.check()

    def __setitem__(self, key, value):
        self.root = self.root.store(self._normalize(key), value)
        self._checked()

    store = __setitem__

    def __getitem__(self, key):
        try:
            return self.root.retrieve(self._normalize(key))
        except KeyError:
            return self._default_value()

    def get(self, key, default=_UNSET):
        """
        Like `tree[key]`, but a `default` given here wins over the tree's own
        default policy.
        """
        if default is _UNSET:
            return self[key]
        try:
            return self.root.retrieve(self._normalize(key))
        except KeyError:
            return default

    def __contains__(self, key):
        try:
            self.root.retrieve(self._normalize(key))
        except KeyError:
            return False
        return True

    has_key = __contains__

    def delete(self, key):
        """
        Removes `key` and returns its value, or None if it wasn't there.
        """
        deleted, self.root = self.root.delete(self._normalize(key))
        self._checked()
        return deleted.value

    def __delitem__(self, key):
        self.delete(key)

    def clear(self):
        self.root = EMPTY

    def __iter__(self):
        for k, _ in self.root:
            yield k

    def items(self):
        return iter(self.root)

    def keys(self):
        return iter(self)

    def values(self):
        for _, v in self.root:
            yield v

    def each(self, func=None):
        """
        Calls `func(key, value)` for every pair in key order and returns the
        tree. Without `func` a generator of the pairs is returned instead.
        """
        if func is None:
            return self.items()

        for k, v in self.root:
            func(k, v)
        return self

    def each_key(self, func=None):
        if func is None:
            return self.keys()

        for k in self:
            func(k)
        return self

    def each_value(self, func=None):
        if func is None:
            return self.values()

        for v in self.values():
            func(v)
        return self

    def to_dict(self):
        return dict(self.items())

    def dump_tree(self, out=None):
        """
        Writes the shape of the tree to `out`, right subtrees above left ones.
        Returns the rendering as a string when no `out` is given.
        """
        if out is None:
            buf = io.StringIO()
            self.root.dump_tree(buf)
            buf.write("\n")
            return buf.getvalue()

        self.root.dump_tree(out)
        out.write("\n")
        return out

    def dump_sexp(self):
        return self.root.dump_sexp() or ""

    def check(self):
        self.root.check_height()

    @property
    def height(self):
        return self.root.height
