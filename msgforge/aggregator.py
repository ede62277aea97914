"""Merge per-locale flattened records into one canonical map keyed by path."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from .models import MessageData, MessageRecord


def aggregate(per_locale: Mapping[str, Sequence[MessageRecord]]) -> Dict[str, MessageData]:
    """Return ``path -> MessageData`` across every locale in ``per_locale``.

    No completeness checking happens here; a path missing from some locale is
    simply absent from that entry's ``values``.
    """
    messages: Dict[str, MessageData] = {}
    for locale, records in per_locale.items():
        for record in records:
            data = messages.get(record.path)
            if data is None:
                data = MessageData(
                    params=record.params,
                    is_array_root=record.is_array_root,
                    parent=record.parent,
                )
                messages[record.path] = data
            elif record.params:
                merged = dict.fromkeys(data.params)
                merged.update(dict.fromkeys(record.params))
                data.params = tuple(merged)
            data.values[locale] = record.value
    return messages


def find_duplicate_paths(
    per_locale: Mapping[str, Sequence[MessageRecord]]
) -> Dict[str, List[str]]:
    """Return ``locale -> paths`` emitted more than once within that locale's records.

    ``{"a.b": ..., "a": {"b": ...}}`` and ``{"list": [...], "list[0]": ...}`` both
    produce such paths; aggregating them would keep only the last value.
    """
    duplicates: Dict[str, List[str]] = {}
    for locale, records in per_locale.items():
        seen: set[str] = set()
        repeated: Dict[str, None] = {}
        for record in records:
            if record.path in seen:
                repeated.setdefault(record.path, None)
            seen.add(record.path)
        if repeated:
            duplicates[locale] = list(repeated)
    return duplicates


__all__ = ["aggregate", "find_duplicate_paths"]
