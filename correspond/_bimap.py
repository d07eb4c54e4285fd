import collections.abc

_MISSING = object()


class BiMap(collections.abc.Mapping):
    """Read-only one-to-one mapping.

    Every value is the image of exactly one key, so the mapping can be looked
    up in both directions. The inverse direction is available as `inverse`,
    which is again a `BiMap`.
    """

    def __init__(self, pairs=()):
        if isinstance(pairs, collections.abc.Mapping):
            pairs = pairs.items()

        self._forward = {}
        self._backward = {}
        for key, value in pairs:
            if key in self._forward:
                raise ValueError(f"Duplicate key: {key!r}")
            if value in self._backward:
                raise ValueError(f"Duplicate value: {value!r}")
            self._forward[key] = value
            self._backward[value] = key

    @classmethod
    def _from_tables(cls, forward, backward):
        obj = cls.__new__(cls)
        obj._forward = forward
        obj._backward = backward
        return obj

    @property
    def inverse(self):
        return BiMap._from_tables(self._backward, self._forward)

    def __getitem__(self, key):
        return self._forward[key]

    def __iter__(self):
        return iter(self._forward)

    def __len__(self):
        return len(self._forward)

    def __repr__(self):
        return f"{type(self).__name__}({self._forward!r})"


class MutableBiMap(BiMap):
    """`BiMap` which can be updated with `force_put()`.

    The forward and inverse table are only changed together, so they can't get
    out of sync.
    """

    def force_put(self, key, value):
        """Pair `key` with `value`.

        Any previous partner of `key` and any previous partner of `value` lose
        their pairing.
        """
        old_value = self._forward.pop(key, _MISSING)
        if old_value is not _MISSING:
            del self._backward[old_value]

        old_key = self._backward.pop(value, _MISSING)
        if old_key is not _MISSING:
            del self._forward[old_key]

        self._forward[key] = value
        self._backward[value] = key

    def frozen(self):
        return BiMap._from_tables(dict(self._forward), dict(self._backward))
