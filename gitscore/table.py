"""
Plain text table output for a ScoreReport.
"""

from typing import Dict, List

from gitscore.stats import COLUMNS, ScoreReport


def format_line(cells: Dict[str, str], widths: Dict[str, int]) -> str:
    """
    Format one table row.

    The first cell is left aligned, the others are right aligned. Every cell
    is padded to its column width plus one and followed by a single space.
    """
    parts = []
    for i, key in enumerate(COLUMNS):
        width = widths[key] + 1
        text = cells[key]
        parts.append(text.ljust(width) if i == 0 else text.rjust(width))
        parts.append(' ')
    return ''.join(parts)


def render_table(report: ScoreReport) -> List[str]:
    """Return the header line followed by one line per author."""
    header = {key: key for key in COLUMNS}
    lines = [format_line(header, report.widths)]
    for stats in report.authors:
        lines.append(format_line(stats.cells(), report.widths))
    return lines
