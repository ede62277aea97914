"""Tests for the accessor emitter templates."""

from __future__ import annotations

from msgforge.codegen import AccessorEmitter, json_literal, py_literal
from msgforge.models import ArrayNode, Branch, ExportEntry, Leaf, MessageData


def _compiles(source: str) -> None:
    compile(source, "<generated>", "exec")


def test_render_accessor_with_params_interpolates() -> None:
    source = AccessorEmitter().render_accessor(
        "greeting",
        "greeting",
        MessageData(params=("name",), values={"en": "Hello {name}", "es": "Hola {name}"}),
    )

    assert source.startswith("def greeting(\n")
    assert "locale_getter: _runtime.LocaleGetter = _runtime.get_locale," in source
    assert '"""Return the message at "greeting"."""' in source
    assert "translations = {'en': 'Hello {name}', 'es': 'Hola {name}'}" in source
    assert "if params is None:\n        return value" in source
    assert source.endswith("return _runtime.interpolate(value, params, ('name',))")
    _compiles(source)


def test_render_accessor_without_params_returns_value() -> None:
    source = AccessorEmitter().render_accessor(
        "count", "stats.count", MessageData(values={"en": 3, "es": None})
    )

    assert "translations = {'en': 3, 'es': None}" in source
    assert "interpolate" not in source
    assert source.endswith("    return value")
    _compiles(source)


def test_render_accessor_for_array_root_uses_item_interpolation() -> None:
    source = AccessorEmitter().render_accessor(
        "items",
        "items",
        MessageData(params=("n",), is_array_root=True, values={"en": ["a", "b {n}"]}),
    )

    assert "return _runtime.interpolate_items(value, params, ('n',))" in source
    _compiles(source)


def test_render_namespace_annotates_leaves_with_samples() -> None:
    root = Branch(
        children={
            "greeting": Leaf(identifier="greeting", samples={"en": "Hi", "es": "Hola"}),
        }
    )

    assert AccessorEmitter().render_namespace(root) == (
        "_SimpleNamespace(**{\n"
        '    # en: "Hi"\n'
        '    # es: "Hola"\n'
        "    'greeting': greeting,\n"
        "})"
    )


def test_render_namespace_nests_arrays_and_branches() -> None:
    root = Branch(
        children={
            "items": ArrayNode(
                items=[
                    Leaf(identifier="items_0", samples={"en": "a"}),
                    Branch(children={"label": Leaf(identifier="items_1_label", samples={})}),
                ],
                samples={"en": ["a", {"label": "b"}]},
            ),
            "empty": ArrayNode(items=[], samples={"en": []}),
            "group": Branch(),
        }
    )

    rendered = AccessorEmitter().render_namespace(root)

    assert rendered == (
        "_SimpleNamespace(**{\n"
        '    # en: ["a", {"label": "b"}]\n'
        "    'items': [\n"
        '        # en: "a"\n'
        "        items_0,\n"
        "        _SimpleNamespace(**{\n"
        "            'label': items_1_label,\n"
        "        }),\n"
        "    ],\n"
        '    # en: []\n'
        "    'empty': [],\n"
        "    'group': _SimpleNamespace(),\n"
        "})"
    )


def test_render_group_module_is_valid_python() -> None:
    emitter = AccessorEmitter()
    messages = {
        "title": MessageData(values={"en": 'Say "hi"\nplease', "es": "Di\u2028hola"}),
        "list": MessageData(is_array_root=True, values={"en": ["x"]}),
        "list[0]": MessageData(values={"en": "x"}),
    }
    identifiers = {"title": "dash_title", "list": "dash_list", "list[0]": "dash_list_0"}
    namespace = Branch(
        children={
            "title": Leaf(identifier="dash_title", samples=dict(messages["title"].values)),
            "list": ArrayNode(
                items=[Leaf(identifier="dash_list_0", samples={"en": "x"})],
                samples={"en": ["x"]},
            ),
        }
    )

    source = emitter.render_group_module(
        group="dash",
        messages=messages,
        identifiers=identifiers,
        runtime_import="...",
        namespace=namespace,
    )

    assert source.startswith('"""Generated message accessors for "dash".')
    assert "from ... import _runtime" in source
    assert "from types import SimpleNamespace as _SimpleNamespace" in source
    assert "    'dash_title',\n    'dash_list',\n    'dash_list_0',\n    'NAMESPACE',\n" in source
    assert "NAMESPACE = _SimpleNamespace(**{" in source
    assert '# es: "Di\\u2028hola"' in source
    assert source.endswith("})\n")
    _compiles(source)


def test_render_group_module_without_namespace() -> None:
    source = AccessorEmitter().render_group_module(
        group="(root)",
        messages={"a": MessageData(values={"en": "A"})},
        identifiers={"a": "a"},
        runtime_import="..",
    )

    assert "SimpleNamespace" not in source
    assert "NAMESPACE" not in source
    _compiles(source)


def test_render_runtime_embeds_locales() -> None:
    source = AccessorEmitter().render_runtime(["en", "es"], "en")

    assert "LOCALES: tuple[str, ...] = ('en', 'es')" in source
    assert "DEFAULT_LOCALE = 'en'" in source
    _compiles(source)


def test_render_index_reexports_groups() -> None:
    exports = [
        ExportEntry(
            group="(root)",
            import_path=".messages.messages",
            functions=["greeting"],
            namespace="namespace",
        ),
        ExportEntry(
            group="dashboard",
            import_path=".messages.dashboard.messages",
            functions=["dashboard_title"],
            namespace=None,
        ),
        ExportEntry(group="empty", import_path=".messages.empty.messages", functions=[]),
    ]

    source = AccessorEmitter().render_index(exports)

    assert "from ._runtime import DEFAULT_LOCALE, LOCALES, get_locale, set_locale" in source
    assert "from .messages.messages import (\n    greeting,\n)" in source
    assert "from .messages.messages import NAMESPACE as namespace" in source
    assert "from .messages.dashboard.messages import (\n    dashboard_title,\n)" in source
    assert ".messages.empty.messages" not in source
    assert "'namespace',\n" in source
    _compiles(source)


def test_literals() -> None:
    assert py_literal({"b": 1, "a": [None, True]}) == "{'b': 1, 'a': [None, True]}"
    assert json_literal("héllo\u2029") == '"héllo\\u2029"'
    assert json_literal({"k": "line\nbreak"}) == '{"k": "line\\nbreak"}'
