"""
Parser for the output of ``git log --numstat`` with a ``> name <email>`` header.

The stream looks like::

    > ozh <ozh@ozh.org>
    625     1747    includes/geo/geoip.inc

    > Joe <em@i.l>
    2       0       .travis.yml
    -       -       logo.png
"""

import re
from typing import Dict, Iterable, Optional, Tuple

from gitscore.stats import AuthorStats, FileChange


COMMIT_MARKER = '>'

HEADER_RE = re.compile(r'^> (?P<name>.*) <(?P<email>[^<>]+)>$')
NUMSTAT_RE = re.compile(r'^(?P<added>-|\d+)\s+(?P<deleted>-|\d+)\s+(?P<path>.+)$')


class LogParseError(ValueError):
    """A commit header line could not be parsed."""

    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f"Malformed commit header on line {lineno}: {line!r}")
        self.lineno = lineno
        self.line = line


def parse_header(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(name, email)`` from a header line, or None if it is malformed."""
    match = HEADER_RE.match(line)
    if not match:
        return None
    return match.group('name'), match.group('email')


def parse_file_change(line: str) -> Optional[FileChange]:
    """Return the FileChange described by a numstat line, or None."""
    match = NUMSTAT_RE.match(line)
    if not match:
        return None
    return FileChange(
        added=_parse_count(match.group('added')),
        deleted=_parse_count(match.group('deleted')),
        path=match.group('path'),
    )


def _parse_count(value: str) -> Optional[int]:
    # git prints '-' instead of line counts for binary files
    if value == '-':
        return None
    return int(value)


class LogParser:
    """Accumulates per-author statistics from raw git log lines"""

    def __init__(self, per_commit: bool = False):
        """
        Args:
            per_commit: Count one commit per header instead of one per
                file-change line
        """
        self.per_commit = per_commit
        self.authors: Dict[str, AuthorStats] = {}
        self.skipped = 0
        self._current: Optional[AuthorStats] = None

    def get_or_create(self, name: str, email: str) -> AuthorStats:
        """Return the record for ``email``, creating an empty one if needed."""
        stats = self.authors.get(email)
        if stats is None:
            stats = AuthorStats(name=name, email=email)
            self.authors[email] = stats
        return stats

    def parse(self, lines: Iterable[str]) -> Dict[str, AuthorStats]:
        """
        Consume git log output in a single pass

        Args:
            lines: Raw output lines, in emission order

        Returns:
            Dict[str, AuthorStats]: Statistics keyed by email, first-seen order

        Raises:
            LogParseError: A line starts with the commit marker but is not a
                valid ``> name <email>`` header
        """
        for lineno, raw in enumerate(lines, 1):
            line = raw.strip()

            if line.startswith(COMMIT_MARKER):
                self._start_commit(lineno, line)
            elif line:
                self._add_file_change(line)

        return self.authors

    def _start_commit(self, lineno: int, line: str) -> None:
        author = parse_header(line)
        if author is None:
            raise LogParseError(lineno, line)

        name, email = author
        stats = self.get_or_create(name, email)
        # The most recently seen display name for an email wins
        stats.name = name
        if self.per_commit:
            stats.commits += 1
        self._current = stats

    def _add_file_change(self, line: str) -> None:
        change = parse_file_change(line)
        if change is None or self._current is None:
            self.skipped += 1
            return

        if not self.per_commit:
            self._current.commits += 1
        self._current.add_change(change)
