from typing import Dict, Generic, Iterable, KeysView, Tuple, TypeVar

KeyT = TypeVar("KeyT")
ValueT = TypeVar("ValueT")

LeftKeyT = TypeVar("LeftKeyT")
RightKeyT = TypeVar("RightKeyT")


class ManyToManyDict(Generic[LeftKeyT, RightKeyT]):
    """A many-to-many relation readable from both sides.

    A key is only kept while it is linked to at least one key of the other side. Looking up or removing unknown keys
    or pairs is a no-op that returns an empty collection. Linked keys are returned as live views, iterated in insertion
    order; copy them before mutating the relation.
    """

    def __init__(self):
        self._left_key_to_right_key_set: _KeyValueDictSet[LeftKeyT, RightKeyT] = _KeyValueDictSet()
        self._right_key_to_left_key_set: _KeyValueDictSet[RightKeyT, LeftKeyT] = _KeyValueDictSet()

    def left_keys(self) -> KeysView[LeftKeyT]:
        return self._left_key_to_right_key_set.keys()

    def right_keys(self) -> KeysView[RightKeyT]:
        return self._right_key_to_left_key_set.keys()

    def n_pairs(self) -> int:
        return sum(len(right_keys) for _, right_keys in self.left_key_items())

    def clear(self):
        self._left_key_to_right_key_set.clear()
        self._right_key_to_left_key_set.clear()

    def add(self, left_key: LeftKeyT, right_key: RightKeyT):
        self._left_key_to_right_key_set.add(left_key, right_key)
        self._right_key_to_left_key_set.add(right_key, left_key)

    def remove(self, left_key: LeftKeyT, right_key: RightKeyT):
        self._left_key_to_right_key_set.remove_value(left_key, right_key)
        self._right_key_to_left_key_set.remove_value(right_key, left_key)

    def has_left_key(self, left_key: LeftKeyT) -> bool:
        return left_key in self._left_key_to_right_key_set

    def has_right_key(self, right_key: RightKeyT) -> bool:
        return right_key in self._right_key_to_left_key_set

    def has_key_pair(self, left_key: LeftKeyT, right_key: RightKeyT) -> bool:
        return right_key in self._left_key_to_right_key_set.get_values(left_key)

    def left_key_items(self) -> Iterable[Tuple[LeftKeyT, KeysView[RightKeyT]]]:
        return self._left_key_to_right_key_set.items()

    def right_key_items(self) -> Iterable[Tuple[RightKeyT, KeysView[LeftKeyT]]]:
        return self._right_key_to_left_key_set.items()

    def get_left_items(self, right_key: RightKeyT) -> KeysView[LeftKeyT]:
        return self._right_key_to_left_key_set.get_values(right_key)

    def get_right_items(self, left_key: LeftKeyT) -> KeysView[RightKeyT]:
        return self._left_key_to_right_key_set.get_values(left_key)

    def remove_left_key(self, left_key: LeftKeyT) -> KeysView[RightKeyT]:
        right_keys = self._left_key_to_right_key_set.remove_key(left_key)
        for right_key in right_keys:
            self._right_key_to_left_key_set.remove_value(right_key, left_key)

        return right_keys

    def remove_right_key(self, right_key: RightKeyT) -> KeysView[LeftKeyT]:
        left_keys = self._right_key_to_left_key_set.remove_key(right_key)
        for left_key in left_keys:
            self._left_key_to_right_key_set.remove_value(left_key, right_key)

        return left_keys


class _KeyValueDictSet(Generic[KeyT, ValueT]):
    # value sets are dicts with None values so members keep their insertion order
    def __init__(self):
        self._key_to_value_set: Dict[KeyT, Dict[ValueT, None]] = dict()

    def __contains__(self, key) -> bool:
        return key in self._key_to_value_set

    def keys(self) -> KeysView[KeyT]:
        return self._key_to_value_set.keys()

    def items(self) -> Iterable[Tuple[KeyT, KeysView[ValueT]]]:
        return ((key, value_set.keys()) for key, value_set in self._key_to_value_set.items())

    def clear(self):
        self._key_to_value_set.clear()

    def add(self, key: KeyT, value: ValueT):
        if key not in self._key_to_value_set:
            self._key_to_value_set[key] = dict()

        self._key_to_value_set[key][value] = None

    def get_values(self, key: KeyT) -> KeysView[ValueT]:
        if key not in self._key_to_value_set:
            return dict().keys()

        return self._key_to_value_set[key].keys()

    def remove_key(self, key: KeyT) -> KeysView[ValueT]:
        return self._key_to_value_set.pop(key, dict()).keys()

    def remove_value(self, key: KeyT, value: ValueT):
        value_set = self._key_to_value_set.get(key)
        if value_set is None or value not in value_set:
            return

        value_set.pop(value)
        if not value_set:
            self._key_to_value_set.pop(key)
