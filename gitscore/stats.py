"""
Per-author statistics and the aggregation step that turns them into a report.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


COLUMNS = ('name', 'commits', 'delta', '(+)', '(-)', 'files')


@dataclass
class FileChange:
    """One numstat entry. ``None`` counts mean git reported a binary file."""
    added: Optional[int]
    deleted: Optional[int]
    path: str


@dataclass
class AuthorStats:
    """Accumulated contribution statistics for one author email"""
    name: str
    email: str
    commits: int = 0
    added: int = 0
    deleted: int = 0
    delta: int = 0
    files: int = 0
    paths: Set[str] = field(default_factory=set, repr=False)

    def add_change(self, change: FileChange) -> None:
        """Add the line counts of a file change and remember its path."""
        self.added += change.added or 0
        self.deleted += change.deleted or 0
        self.paths.add(change.path)

    def finalize(self) -> None:
        """Compute the derived fields from the accumulated counters."""
        self.files = len(self.paths)
        self.delta = self.added - self.deleted

    def cells(self) -> Dict[str, str]:
        """Printed text of every display column, keyed by column label."""
        return {
            'name': self.name,
            'commits': str(self.commits),
            'delta': str(self.delta),
            '(+)': str(self.added),
            '(-)': str(self.deleted),
            'files': str(self.files),
        }


@dataclass
class ScoreReport:
    """Authors in display order plus the width of every column"""
    authors: List[AuthorStats]
    widths: Dict[str, int]


def build_report(authors: Dict[str, AuthorStats]) -> ScoreReport:
    """
    Finalize every author and prepare them for display

    Args:
        authors: Parsed statistics keyed by email, in first-seen order

    Returns:
        ScoreReport: Authors sorted by commits (descending, stable) and the
        widest printed value of each column, header labels included
    """
    widths = {key: len(key) for key in COLUMNS}

    for stats in authors.values():
        stats.finalize()
        for key, text in stats.cells().items():
            widths[key] = max(widths[key], len(text))

    # sorted() is stable with reverse=True, so ties keep first-seen order
    ordered = sorted(authors.values(), key=lambda s: s.commits, reverse=True)

    return ScoreReport(authors=ordered, widths=widths)
