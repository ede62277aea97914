"""Flatten nested translation documents into addressable message records."""

from __future__ import annotations

import re
from typing import Any, Iterator, List, Optional, Tuple

from .models import ArrayRef, MessageRecord

_PARAM_PATTERN = re.compile(r"\{(\w+)\}")


def extract_params(value: Any) -> Tuple[str, ...]:
    """Return the distinct ``{name}`` placeholders in ``value``, in first-seen order."""
    if not isinstance(value, str):
        return ()
    seen: dict[str, None] = {}
    for match in _PARAM_PATTERN.finditer(value):
        seen.setdefault(match.group(1), None)
    return tuple(seen)


def flatten(tree: Any, prefix: str = "") -> List[MessageRecord]:
    """Walk ``tree`` depth-first and return one record per leaf and per array.

    Arrays are represented twice: a root record carrying the whole array, then
    one record (or sub-tree, for object elements) per element. Element records
    carry an :class:`ArrayRef` to the array they were found in.
    """
    return list(_walk(tree, prefix, None))


def _walk(value: Any, path: str, parent: Optional[ArrayRef]) -> Iterator[MessageRecord]:
    if isinstance(value, dict):
        for key, child in value.items():
            yield from _walk(child, _join(path, str(key)), parent)
        return

    if isinstance(value, list):
        yield MessageRecord(
            path=path,
            value=value,
            params=_element_params(value),
            is_array_root=True,
            parent=parent,
        )
        for index, item in enumerate(value):
            item_path = f"{path}[{index}]"
            ref = ArrayRef(root=path, index=index)
            if isinstance(item, dict):
                for key, child in item.items():
                    yield from _walk(child, _join(item_path, str(key)), ref)
            else:
                yield from _walk(item, item_path, ref)
        return

    yield MessageRecord(path=path, value=value, params=extract_params(value), parent=parent)


def _element_params(items: List[Any]) -> Tuple[str, ...]:
    seen: dict[str, None] = {}
    for item in items:
        for name in extract_params(item):
            seen.setdefault(name, None)
    return tuple(seen)


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


__all__ = ["extract_params", "flatten"]
