"""Deterministic accessor names for message paths."""

from __future__ import annotations

import keyword
import re
from typing import Dict, Iterable, List, Mapping

_INDEX_SEGMENT = re.compile(r"\[(\d+)\]")
_GROUP_SEPARATORS = re.compile(r"[/\\-]")

ROOT_NAMESPACE = "namespace"


def identifier_for(path: str, group_prefix: str = "") -> str:
    """Return the accessor name for ``path`` inside the group ``group_prefix``.

    ``list[2].label`` becomes ``list_2_label``; with the prefix ``dashboard/stats``
    it becomes ``dashboard_stats_list_2_label``. Distinct paths may normalise to
    the same name (``a.b`` and ``a_b``); see :func:`find_collisions`.
    """
    base = _INDEX_SEGMENT.sub(r"_\1", path).replace(".", "_")
    if group_prefix:
        base = f"{_GROUP_SEPARATORS.sub('_', group_prefix)}_{base}"
    return pythonize(base)


def group_identifier(group: str) -> str:
    """Return the name a group's namespace is exported under."""
    if not group:
        return ROOT_NAMESPACE
    return pythonize(_GROUP_SEPARATORS.sub("_", group))


def module_segments(group: str) -> List[str]:
    """Return the package path segments a group's module is written under."""
    if not group:
        return []
    return [pythonize(part) for part in group.replace("\\", "/").split("/") if part]


def pythonize(name: str) -> str:
    """Coerce ``name`` into a valid, non-keyword Python identifier."""
    cleaned = "".join(char if f"_{char}".isidentifier() else "_" for char in name)
    if not cleaned:
        return "_"
    if not cleaned[0].isidentifier():
        cleaned = f"_{cleaned}"
    if keyword.iskeyword(cleaned):
        cleaned = f"{cleaned}_"
    return cleaned


def assign_identifiers(paths: Iterable[str], group_prefix: str = "") -> Dict[str, str]:
    """Map every path to its accessor name, preserving path order."""
    return {path: identifier_for(path, group_prefix) for path in paths}


def find_collisions(
    identifiers: Mapping[str, str], reserved: Iterable[str] = ()
) -> Dict[str, List[str]]:
    """Return ``identifier -> paths`` for names claimed twice or clashing with ``reserved``.

    Dunder names (``__all__``, ``__doc__``, ...) are always reserved; a generated
    module or package binds them itself.
    """
    claimed: Dict[str, List[str]] = {}
    for path, name in identifiers.items():
        claimed.setdefault(name, []).append(path)
    reserved_names = set(reserved)
    return {
        name: paths
        for name, paths in claimed.items()
        if len(paths) > 1 or name in reserved_names or _is_dunder(name)
    }


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


__all__ = [
    "ROOT_NAMESPACE",
    "assign_identifiers",
    "find_collisions",
    "group_identifier",
    "identifier_for",
    "module_segments",
    "pythonize",
]
