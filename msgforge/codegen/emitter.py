"""Renders accessor modules, the locale runtime and the combined entry point."""

from __future__ import annotations

import json
import pprint
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import ArrayNode, Branch, ExportEntry, Leaf, MessageData, NamespaceNode
from .constants import NAMESPACE_NAME, RUNTIME_EXPORTS, RUNTIME_MODULE

_INDENT = "    "
_LITERAL_WIDTH = 88

# Characters json.dumps leaves alone that Python would still treat as line breaks.
_LINE_BREAKS = str.maketrans({"\u0085": "\\u0085", "\u2028": "\\u2028", "\u2029": "\\u2029"})


def py_literal(value: Any) -> str:
    """Return Python source for a JSON-like value."""
    return pprint.pformat(value, width=_LITERAL_WIDTH, sort_dicts=False)


def json_literal(value: Any) -> str:
    """Return a single-line JSON rendering that is safe inside comments and docstrings."""
    return json.dumps(value, ensure_ascii=False).translate(_LINE_BREAKS)


class AccessorEmitter:
    """Turns aggregated messages and namespace trees into Python source text."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = self._create_env(self.templates_dir)

    def render_accessor(self, identifier: str, path: str, data: MessageData) -> str:
        """Return the source of one accessor function."""
        template = self._env.get_template("accessor.py.j2")
        return template.render(
            identifier=identifier,
            path=path,
            translations=dict(data.values),
            params=tuple(data.params),
            substitute="interpolate_items" if data.is_array_root else "interpolate",
        ).rstrip()

    def render_group_module(
        self,
        *,
        group: str,
        messages: Mapping[str, MessageData],
        identifiers: Mapping[str, str],
        runtime_import: str,
        namespace: Optional[Branch] = None,
    ) -> str:
        """Return the full module holding every accessor of one message group."""
        accessors = [
            self.render_accessor(identifiers[path], path, data)
            for path, data in messages.items()
        ]
        exports: List[str] = [identifiers[path] for path in messages]
        if namespace is not None:
            exports.append(NAMESPACE_NAME)
        template = self._env.get_template("group_module.py.j2")
        return (
            template.render(
                group=group,
                runtime_import=runtime_import,
                exports=exports,
                accessors=accessors,
                namespace=self.render_namespace(namespace) if namespace is not None else None,
                namespace_name=NAMESPACE_NAME,
            ).strip()
            + "\n"
        )

    def render_namespace(self, root: Branch) -> str:
        """Return a nested ``SimpleNamespace`` literal mirroring ``root``."""
        return self._render_node(root, 0)

    def render_runtime(self, locales: Sequence[str], default_locale: str) -> str:
        template = self._env.get_template("runtime.py.j2")
        return (
            template.render(locales=tuple(locales), default_locale=default_locale).strip()
            + "\n"
        )

    def render_index(self, exports: Sequence[ExportEntry]) -> str:
        names: List[str] = list(RUNTIME_EXPORTS)
        for entry in exports:
            names.extend(entry.functions)
            if entry.namespace:
                names.append(entry.namespace)
        template = self._env.get_template("index.py.j2")
        return (
            template.render(
                exports=exports,
                names=names,
                runtime_module=RUNTIME_MODULE,
                runtime_exports=RUNTIME_EXPORTS,
                namespace_name=NAMESPACE_NAME,
            ).strip()
            + "\n"
        )

    def _render_node(self, node: NamespaceNode, depth: int) -> str:
        if isinstance(node, Leaf):
            return node.identifier

        pad = _INDENT * (depth + 1)
        closing = _INDENT * depth
        if isinstance(node, ArrayNode):
            if not node.items:
                return "[]"
            lines = ["["]
            for item in node.items:
                lines.extend(self._annotations(item, pad))
                lines.append(f"{pad}{self._render_node(item, depth + 1)},")
            lines.append(f"{closing}]")
            return "\n".join(lines)

        if not node.children:
            return "_SimpleNamespace()"
        lines = ["_SimpleNamespace(**{"]
        for key, child in node.children.items():
            lines.extend(self._annotations(child, pad))
            lines.append(f"{pad}{key!r}: {self._render_node(child, depth + 1)},")
        lines.append(f"{closing}}})")
        return "\n".join(lines)

    @staticmethod
    def _annotations(node: NamespaceNode, pad: str) -> List[str]:
        if isinstance(node, Branch):
            return []
        return [f"{pad}# {locale}: {json_literal(value)}" for locale, value in node.samples.items()]

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        directories: List[str] = [str(templates_dir)]
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["pyliteral"] = py_literal
        env.filters["jsonliteral"] = json_literal
        return env


__all__ = ["AccessorEmitter", "json_literal", "py_literal"]
