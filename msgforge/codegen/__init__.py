"""Code generation for accessor modules, the runtime and the entry point."""

from .emitter import AccessorEmitter, json_literal, py_literal

__all__ = ["AccessorEmitter", "json_literal", "py_literal"]
