"""Names shared by the emitter, the compiler and the generated package."""

from __future__ import annotations

MESSAGES_PACKAGE = "messages"
GROUP_MODULE = "messages"
RUNTIME_MODULE = "_runtime"
NAMESPACE_NAME = "NAMESPACE"

# Module-level names every generated group module binds itself.
MODULE_RESERVED_NAMES: frozenset[str] = frozenset(
    {RUNTIME_MODULE, NAMESPACE_NAME, "_t", "_SimpleNamespace"}
)

RUNTIME_EXPORTS: tuple[str, ...] = ("DEFAULT_LOCALE", "LOCALES", "get_locale", "set_locale")

# Names the generated entry point binds besides accessors and namespaces.
INDEX_RESERVED_NAMES: frozenset[str] = frozenset(
    {*RUNTIME_EXPORTS, RUNTIME_MODULE, MESSAGES_PACKAGE}
)


__all__ = [
    "GROUP_MODULE",
    "INDEX_RESERVED_NAMES",
    "MESSAGES_PACKAGE",
    "MODULE_RESERVED_NAMES",
    "NAMESPACE_NAME",
    "RUNTIME_EXPORTS",
    "RUNTIME_MODULE",
]
