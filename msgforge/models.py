"""Core data models shared across msgforge components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class ArrayRef:
    """Points a record at its nearest enclosing array and the element it belongs to."""

    root: str
    index: int


@dataclass(frozen=True)
class MessageRecord:
    """One leaf or array-root value found while flattening a locale document."""

    path: str
    value: Any
    params: Tuple[str, ...] = ()
    is_array_root: bool = False
    parent: Optional[ArrayRef] = None


@dataclass
class MessageData:
    """Locale-merged view of a single message path."""

    params: Tuple[str, ...] = ()
    is_array_root: bool = False
    values: Dict[str, Any] = field(default_factory=dict)
    parent: Optional[ArrayRef] = None


@dataclass(frozen=True)
class Leaf:
    """Namespace entry referencing one generated accessor."""

    identifier: str
    samples: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Branch:
    """Nested namespace grouping, children kept in first-seen order."""

    children: Dict[str, "NamespaceNode"] = field(default_factory=dict)


@dataclass
class ArrayNode:
    """Reconstructed array; each item is a Leaf, Branch or nested ArrayNode."""

    items: List["NamespaceNode"] = field(default_factory=list)
    samples: Dict[str, Any] = field(default_factory=dict)


NamespaceNode = Union[Leaf, Branch, ArrayNode]


@dataclass
class ExportEntry:
    """Describes what one message group contributes to the combined entry point."""

    group: str
    import_path: str
    functions: List[str]
    namespace: Optional[str] = None


@dataclass
class GroupOutput:
    """Rendered artifacts for a single message group."""

    group: str
    module_path: Path
    source: str
    export: ExportEntry


@dataclass
class CompileResult:
    """Summary of a compile run."""

    output_dir: Path
    groups: List[GroupOutput]
    exports: List[ExportEntry]
    runtime_path: Path
    index_path: Path
