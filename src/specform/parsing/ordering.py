"""Deterministic ordering of sibling fields.

Rules, applied in turn:

1. Fields with an explicit ``order`` come first, ascending by that value.
2. Among fields without ``order``, required fields come before optional ones.
3. Remaining ties are broken by the field's own key (last path segment),
   compared case-insensitively, then by the raw key.

Sorting never mutates its input; every function returns a new tuple.
"""

from typing import Any, Iterable, List, Tuple


def field_sort_key(field) -> tuple:
    if field.order is not None:
        return (0, field.order)
    name = field.path[-1] if field.path else ""
    return (1, 0 if field.required else 1, name.casefold(), name)


def compare_fields(a, b) -> int:
    """Comparator form of the ordering rules.

    Fields tagged with different union values compare equal, so a stable
    sort keeps the variants in encounter order.
    """
    if not same_value(a.parent_value, b.parent_value):
        return 0
    key_a, key_b = field_sort_key(a), field_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_fields(fields: Iterable) -> tuple:
    return tuple(sorted(fields, key=field_sort_key))


def sort_by_parent_value(fields: Iterable) -> tuple:
    """Sort union subfields within each ``parent_value`` group.

    Each group is sorted on its own and written back into the positions the
    group occupied, so fields of different variants are never reordered
    relative to each other.
    """
    fields = list(fields)
    groups: List[Tuple[Any, List[int]]] = []
    for index, field in enumerate(fields):
        for value, indices in groups:
            if same_value(value, field.parent_value):
                indices.append(index)
                break
        else:
            groups.append((field.parent_value, [index]))

    ordered = list(fields)
    for _value, indices in groups:
        for slot, field in zip(indices, sort_fields(fields[i] for i in indices)):
            ordered[slot] = field
    return tuple(ordered)


def same_value(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b
