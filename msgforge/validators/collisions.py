"""Rejects message paths whose accessor names would clash."""

from __future__ import annotations

from typing import Iterable, List

from ..identifiers import find_collisions
from .base import IdentifierCollisionError, ValidationContext, ValidationIssue, Validator


class IdentifierCollisionValidator(Validator):
    """Flags identifiers generated by more than one path or shadowing a reserved name."""

    name = "identifier_collisions"

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._reserved = frozenset(reserved)

    def validate(self, context: ValidationContext) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        for name, paths in find_collisions(context.identifiers, self._reserved).items():
            for path in paths:
                issues.append(
                    ValidationIssue(group=context.group, path=path, detail=f"collides on {name}")
                )
        return issues

    def enforce(self, context: ValidationContext) -> None:
        collisions = find_collisions(context.identifiers, self._reserved)
        if collisions:
            raise IdentifierCollisionError(context.group, collisions)
