"""Rebuild a nested namespace tree over generated accessors."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .identifiers import identifier_for
from .models import ArrayNode, Branch, Leaf, MessageData, NamespaceNode

_Entry = Tuple[str, MessageData]


class NamespaceError(RuntimeError):
    """Raised when message paths cannot be arranged into a single tree."""


def build_namespace(
    messages: Mapping[str, MessageData],
    group_prefix: str = "",
    default_locale: Optional[str] = None,
) -> Branch:
    """Return the root :class:`Branch` for ``messages``.

    Records tagged with an :class:`~msgforge.models.ArrayRef` are never placed in
    a branch directly; they only appear as items of the array that owns them.
    """
    builder = _NamespaceBuilder(messages, group_prefix, default_locale)
    return builder.build()


class _NamespaceBuilder:
    def __init__(
        self,
        messages: Mapping[str, MessageData],
        group_prefix: str,
        default_locale: Optional[str],
    ) -> None:
        self._messages = messages
        self._prefix = group_prefix
        self._default_locale = default_locale
        self._top_level: List[_Entry] = []
        self._elements: Dict[Tuple[str, int], List[_Entry]] = {}
        for path, data in messages.items():
            if data.parent is None:
                self._top_level.append((path, data))
            else:
                key = (data.parent.root, data.parent.index)
                self._elements.setdefault(key, []).append((path, data))

    def build(self) -> Branch:
        root = Branch()
        self._populate(root, self._top_level, base="")
        return root

    def _populate(self, branch: Branch, entries: Sequence[_Entry], base: str) -> None:
        for path, data in entries:
            relative = path[len(base) + 1 :] if base else path
            segments = relative.split(".")
            current = branch
            for segment in segments[:-1]:
                child = current.children.get(segment)
                if child is None:
                    child = Branch()
                    current.children[segment] = child
                elif not isinstance(child, Branch):
                    raise NamespaceError(
                        f"'{path}' needs '{segment}' to be a group, but it is already a message"
                    )
                current = child

            last = segments[-1]
            if last in current.children:
                raise NamespaceError(f"'{path}' conflicts with an existing namespace entry")
            current.children[last] = self._node_for(path, data)

    def _node_for(self, path: str, data: MessageData) -> NamespaceNode:
        if data.is_array_root:
            return self._array_node(path, data)
        return Leaf(identifier=identifier_for(path, self._prefix), samples=dict(data.values))

    def _array_node(self, path: str, data: MessageData) -> ArrayNode:
        reference = self._reference_array(data)
        items: List[NamespaceNode] = []
        for index, element in enumerate(reference):
            item_path = f"{path}[{index}]"
            if isinstance(element, dict):
                element_branch = Branch()
                self._populate(
                    element_branch,
                    self._elements.get((path, index), []),
                    base=item_path,
                )
                items.append(element_branch)
                continue
            item_data = self._messages.get(item_path)
            if item_data is None:
                raise NamespaceError(f"Array element '{item_path}' has no message record")
            items.append(self._node_for(item_path, item_data))
        return ArrayNode(items=items, samples=dict(data.values))

    def _reference_array(self, data: MessageData) -> List[Any]:
        if self._default_locale is not None and self._default_locale in data.values:
            value = data.values[self._default_locale]
        elif data.values:
            value = next(iter(data.values.values()))
        else:
            value = []
        return value if isinstance(value, list) else []


__all__ = ["NamespaceError", "build_namespace"]
