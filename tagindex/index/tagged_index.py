from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

from tagindex.utility.many_to_many_dict import ManyToManyDict

TagT = TypeVar("TagT", bound=Hashable)
ValueT = TypeVar("ValueT", bound=Hashable)


class TaggedIndex(Generic[TagT, ValueT]):
    """Associates values with tags, and finds values by tag combination and tags by value.

    Tags and values are compared by equality and hashed, they are never copied. A tag is registered while at least one
    value carries it, and a value while it carries at least one tag. Unknown tags behave as tags without values and
    unknown values as values without tags, so no operation raises for them.

    Tag arguments are iterables, duplicated tags count once. Queries return new lists, ordered by insertion.
    """

    def __init__(self):
        self._tag_to_values: ManyToManyDict[TagT, ValueT] = ManyToManyDict()

    def __contains__(self, value) -> bool:
        return self._tag_to_values.has_right_key(value)

    def __len__(self) -> int:
        return len(self._tag_to_values.right_keys())

    def assign(self, value: ValueT, tags: Iterable[TagT]):
        """Replaces every tag of `value` with `tags`, an empty `tags` unregisters the value"""

        new_tags = dict.fromkeys(tags)
        stale_tags = [tag for tag in self._tag_to_values.get_left_items(value) if tag not in new_tags]

        # link first, so a value that keeps at least one tag is never unregistered in between
        for tag in new_tags:
            self._tag_to_values.add(tag, value)

        for tag in stale_tags:
            self._tag_to_values.remove(tag, value)

    def add(self, value: ValueT, tags: Iterable[TagT]):
        for tag in _unique(tags):
            self._tag_to_values.add(tag, value)

    def remove(self, value: ValueT, tags: Iterable[TagT]):
        for tag in _unique(tags):
            self._tag_to_values.remove(tag, value)

    def delete_tag(self, tags: Iterable[TagT]):
        """Removes `tags` from every value carrying them, values left without any tag are unregistered"""

        for tag in _unique(tags):
            self._tag_to_values.remove_left_key(tag)

    def clear(self):
        self._tag_to_values.clear()

    def tags_of(self, value: ValueT) -> List[TagT]:
        return list(self._tag_to_values.get_left_items(value))

    def values_of(self, tag: TagT) -> List[ValueT]:
        return list(self._tag_to_values.get_right_items(tag))

    def has_tag(self, tag: TagT) -> bool:
        return self._tag_to_values.has_left_key(tag)

    def has_tags(self, value: ValueT, tags: Iterable[TagT]) -> bool:
        value_tags = self._tag_to_values.get_left_items(value)
        return all(tag in value_tags for tag in tags)

    def all_tags(self) -> List[TagT]:
        return list(self._tag_to_values.left_keys())

    def all_values(self) -> List[ValueT]:
        return list(self._tag_to_values.right_keys())

    def intersect(self, tags: Iterable[TagT]) -> List[ValueT]:
        """Returns values carrying all of `tags`, no tag matches no value"""

        tags = _unique(tags)
        if not tags:
            return []

        values = self.values_of(tags[0])
        for tag in tags[1:]:
            tag_values = self._tag_to_values.get_right_items(tag)
            values = [value for value in values if value in tag_values]

        return values

    def union(self, tags: Iterable[TagT]) -> List[ValueT]:
        """Returns values carrying any of `tags`"""

        values: Dict[ValueT, None] = dict()
        for tag in _unique(tags):
            values.update(dict.fromkeys(self._tag_to_values.get_right_items(tag)))

        return list(values)

    def exact(self, tags: Iterable[TagT]) -> List[ValueT]:
        """Returns values carrying all of `tags` and nothing else"""

        tags = _unique(tags)
        return [value for value in self.intersect(tags) if len(self._tag_to_values.get_left_items(value)) == len(tags)]

    def difference(self, from_tag: TagT, excluding: Iterable[TagT]) -> List[ValueT]:
        """Returns values carrying `from_tag` but none of `excluding`"""

        excluding = _unique(excluding)
        return [
            value
            for value in self._tag_to_values.get_right_items(from_tag)
            if not any(self._tag_to_values.has_key_pair(tag, value) for tag in excluding)
        ]

    def complement(self, from_tag: TagT) -> List[ValueT]:
        """Returns every registered value not carrying `from_tag`"""

        from_values = self._tag_to_values.get_right_items(from_tag)
        return [value for value in self._tag_to_values.right_keys() if value not in from_values]

    def symmetric_difference(self, tags: Iterable[TagT]) -> List[ValueT]:
        """Returns values carrying exactly one of `tags`, tags outside of `tags` are not considered"""

        tags = _unique(tags)

        values: Dict[ValueT, None] = dict()
        for tag in tags:
            other_tags = [other_tag for other_tag in tags if other_tag != tag]
            values.update(dict.fromkeys(self.difference(tag, other_tags)))

        return list(values)

    def statistics(self) -> Dict:
        return {
            "tags": len(self._tag_to_values.left_keys()),
            "values": len(self._tag_to_values.right_keys()),
            "links": self._tag_to_values.n_pairs(),
        }


def _unique(tags: Iterable[TagT]) -> List[TagT]:
    return list(dict.fromkeys(tags))
