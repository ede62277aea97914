"""Locale file discovery under the messages directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .logging import get_logger

# Tooling directories that never hold translations.
_SKIPPED_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".venv",
        "node_modules",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".idea",
    }
)

LOCALE_SUFFIX = ".json"

LocaleFiles = Dict[str, Path]


@dataclass(frozen=True)
class ExcludePattern:
    """One ``exclude_paths`` entry, matched against posix paths relative to the messages root.

    A trailing ``/`` limits the pattern to directories, a leading ``/`` anchors it
    to the root, and a pattern without any ``/`` matches a single path segment
    at any depth.
    """

    glob: str
    dirs_only: bool = False
    rooted: bool = False

    @classmethod
    def parse(cls, raw: str) -> Optional["ExcludePattern"]:
        text = raw.strip()
        dirs_only = text.endswith("/")
        text = text.rstrip("/")
        rooted = text.startswith("/")
        text = text.lstrip("/")
        if not text:
            return None
        return cls(glob=text, dirs_only=dirs_only, rooted=rooted or "/" in text)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.dirs_only and not is_dir:
            return False
        if self.rooted:
            return fnmatchcase(rel_path, self.glob)
        return any(fnmatchcase(segment, self.glob) for segment in rel_path.split("/"))


def parse_exclude_patterns(raw_patterns: Iterable[str]) -> List[ExcludePattern]:
    patterns = (ExcludePattern.parse(raw) for raw in raw_patterns)
    return [pattern for pattern in patterns if pattern is not None]


class LocaleFileScanner:
    """Finds ``<locale>.json`` files and groups them by the directory they live in."""

    def __init__(self, exclude_paths: Sequence[str] = ()) -> None:
        self._excludes = parse_exclude_patterns(exclude_paths)
        self.logger = get_logger("scanner")

    def scan(self, messages_dir: Path | str) -> Dict[str, LocaleFiles]:
        """Return ``group -> {locale: file}``. Files directly in the root form group ``""``."""
        root = Path(messages_dir).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Messages directory not found: {messages_dir}")
        if not root.is_dir():
            raise NotADirectoryError(f"Messages path is not a directory: {messages_dir}")

        groups: Dict[str, LocaleFiles] = {}
        for group, path in self._walk(root):
            groups.setdefault(group, {})[path.stem] = path
        return groups

    def _walk(self, root: Path) -> Iterator[tuple[str, Path]]:
        for dirpath, dirnames, filenames in os.walk(root):
            group = Path(dirpath).relative_to(root).as_posix()
            if group == ".":
                group = ""

            # Pruning in place keeps os.walk out of skipped subtrees.
            dirnames[:] = [
                name
                for name in sorted(dirnames)
                if name not in _SKIPPED_DIRS and not self._excluded(group, name, True)
            ]

            for filename in sorted(filenames):
                if filename.endswith(LOCALE_SUFFIX) and not self._excluded(group, filename, False):
                    yield group, Path(dirpath) / filename

    def _excluded(self, group: str, name: str, is_dir: bool) -> bool:
        rel_path = f"{group}/{name}" if group else name
        if any(pattern.matches(rel_path, is_dir) for pattern in self._excludes):
            self.logger.debug("Excluding %s", rel_path)
            return True
        return False


__all__ = ["ExcludePattern", "LOCALE_SUFFIX", "LocaleFileScanner", "parse_exclude_patterns"]
