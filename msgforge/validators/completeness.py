"""Cross-locale completeness checks."""

from __future__ import annotations

from typing import Dict, List

from .base import (
    MissingLocaleFileError,
    MissingTranslationsError,
    ValidationContext,
    ValidationIssue,
    Validator,
)


class CompletenessValidator(Validator):
    """Ensures every configured locale provides every message of a group.

    Runs in two phases. A locale without any file for the group fails
    immediately; per-message gaps are collected across the whole group and
    reported together.
    """

    name = "completeness"

    def validate(self, context: ValidationContext) -> List[ValidationIssue]:
        self.check_files(context)
        issues: List[ValidationIssue] = []
        for locale in context.locales:
            for path, data in context.messages.items():
                if locale not in data.values:
                    issues.append(
                        ValidationIssue(
                            group=context.group,
                            path=path,
                            detail="translation missing",
                            locale=locale,
                        )
                    )
        return issues

    def enforce(self, context: ValidationContext) -> None:
        issues = self.validate(context)
        if not issues:
            return
        by_locale: Dict[str, List[str]] = {}
        for issue in issues:
            by_locale.setdefault(issue.locale or "", []).append(issue.path)
        raise MissingTranslationsError(context.group, by_locale)

    def check_files(self, context: ValidationContext) -> None:
        loaded = set(context.loaded_locales)
        for locale in context.locales:
            if locale not in loaded:
                raise MissingLocaleFileError(
                    context.group,
                    locale,
                    expected=context.locales,
                    found=context.loaded_locales,
                )
