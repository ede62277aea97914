"""Core validation data structures and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Protocol, Sequence

from ..models import MessageData


@dataclass
class ValidationIssue:
    """A single problem found in one message group."""

    group: str
    path: str
    detail: str
    locale: Optional[str] = None


class ValidationError(RuntimeError):
    """Raised when validation fails for one or more messages."""

    def __init__(self, message: str, issues: Sequence[ValidationIssue]) -> None:
        super().__init__(message)
        self.issues = list(issues)


class MissingLocaleFileError(ValidationError):
    """A configured locale has no file at all for a message group."""

    def __init__(
        self,
        group: str,
        locale: str,
        *,
        expected: Sequence[str],
        found: Sequence[str],
    ) -> None:
        self.group = group
        self.locale = locale
        self.expected = list(expected)
        self.found = list(found)
        message = (
            f'Missing locale file "{locale}.json" in {group}\n'
            f"   Expected locales: {', '.join(self.expected)}\n"
            f"   Found locales: {', '.join(self.found) or '(none)'}"
        )
        issue = ValidationIssue(
            group=group,
            path=f"{locale}.json",
            detail="locale file not found",
            locale=locale,
        )
        super().__init__(message, [issue])


class MissingTranslationsError(ValidationError):
    """One or more messages are absent from one or more locales."""

    def __init__(self, group: str, by_locale: Mapping[str, Sequence[str]]) -> None:
        self.group = group
        self.by_locale: Dict[str, List[str]] = {
            locale: list(paths) for locale, paths in by_locale.items()
        }
        lines = [f"Missing translations in {group}:"]
        issues: List[ValidationIssue] = []
        for locale, paths in self.by_locale.items():
            lines.append(f'   Locale "{locale}" is missing {len(paths)} translation(s):')
            for path in paths:
                lines.append(f"      - {path}")
                issues.append(
                    ValidationIssue(
                        group=group,
                        path=path,
                        detail="translation missing",
                        locale=locale,
                    )
                )
        lines.append("Add the missing translations to the corresponding JSON file.")
        super().__init__("\n".join(lines), issues)


class DuplicatePathError(ValidationError):
    """Two keys of one locale document flatten to the same message path."""

    def __init__(self, group: str, by_locale: Mapping[str, Sequence[str]]) -> None:
        self.group = group
        self.by_locale: Dict[str, List[str]] = {
            locale: list(paths) for locale, paths in by_locale.items()
        }
        lines = [f"Duplicate message paths in {group}:"]
        issues: List[ValidationIssue] = []
        for locale, paths in self.by_locale.items():
            lines.append(f'   Locale "{locale}" defines {len(paths)} path(s) more than once:')
            for path in paths:
                lines.append(f"      - {path}")
                issues.append(
                    ValidationIssue(
                        group=group,
                        path=path,
                        detail="path defined more than once",
                        locale=locale,
                    )
                )
        lines.append("Keep one spelling of each key; dotted keys and nested objects share paths.")
        super().__init__("\n".join(lines), issues)


class IdentifierCollisionError(ValidationError):
    """Distinct message paths would generate the same accessor name."""

    def __init__(self, group: str, collisions: Mapping[str, Sequence[str]]) -> None:
        self.group = group
        self.collisions: Dict[str, List[str]] = {
            name: list(paths) for name, paths in collisions.items()
        }
        lines = [f"Identifier collisions in {group}:"]
        issues: List[ValidationIssue] = []
        for name, paths in self.collisions.items():
            if len(paths) > 1:
                claimants = ", ".join(paths)
                detail = f"generated by {claimants}"
            else:
                claimants = paths[0]
                detail = f"reserved name, generated by {claimants}"
            lines.append(f"   {name}: {detail}")
            for path in paths:
                issues.append(ValidationIssue(group=group, path=path, detail=f"{name} {detail}"))
        lines.append("Rename one of the keys so every accessor name is unique.")
        super().__init__("\n".join(lines), issues)


@dataclass
class ValidationContext:
    """Everything validators need to know about one message group."""

    group: str
    locales: Sequence[str]
    default_locale: str
    loaded_locales: Sequence[str]
    messages: Mapping[str, MessageData]
    identifiers: Mapping[str, str] = field(default_factory=dict)


class Validator(Protocol):
    """Protocol implemented by message group validators."""

    name: str

    def validate(self, context: ValidationContext) -> List[ValidationIssue]:
        """Run validation and return any issues."""

    def enforce(self, context: ValidationContext) -> None:
        """Raise a :class:`ValidationError` when the group is not acceptable."""
