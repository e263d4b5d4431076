"""
Main CLI entry point for git-score.

This module wires the history → parse → aggregate → render pipeline together
and configures `rich-click` for nicer, colorized help output.
"""

import shlex
from pathlib import Path
from typing import Tuple

import rich_click as click

from gitscore import __version__
from gitscore.history import HistoryFetchError, build_log_args, fetch_log_lines
from gitscore.parser import LogParseError, LogParser
from gitscore.stats import build_report
from gitscore.table import render_table


# Global rich-click configuration
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT = "dim"
click.rich_click.STYLE_OPTION = "bold cyan"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_METAVAR = "magenta"
click.rich_click.STYLE_USAGE = "bold"
click.rich_click.STYLE_HEADER_TEXT = "bold"
click.rich_click.STYLE_FOOTER_TEXT = "dim"
click.rich_click.MAX_WIDTH = 100


class GitLogCommand(click.RichCommand):
    """Command that hands a bare ``--`` and everything after it to git untouched."""

    def parse_args(self, ctx, args):
        tail = []
        if '--' in args:
            split = args.index('--')
            args, tail = args[:split], args[split:]
        rest = super().parse_args(ctx, args)
        ctx.params['git_args'] = tuple(ctx.params.get('git_args') or ()) + tuple(tail)
        return rest


@click.command(
    name="git-score",
    cls=GitLogCommand,
    context_settings=dict(ignore_unknown_options=True, allow_interspersed_args=False),
)
@click.version_option(version=__version__, prog_name="git-score")
@click.option('--repo', 'repo_path', default='.',
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Repository to analyze (default: current directory)')
@click.option('--per-commit', is_flag=True,
              help='Count each commit once instead of once per changed file')
@click.option('--verbose', is_flag=True,
              help='Print the git command and parser diagnostics to stderr')
@click.argument('git_args', nargs=-1)
def cli(repo_path: Path, per_commit: bool, verbose: bool, git_args: Tuple[str, ...]) -> None:
    """[bold]git-score[/bold] shows contribution scores per commit author.

    Prints a table of commits, net delta, added and deleted lines and
    distinct files touched for every author email in the history.
    Merge commits are ignored and .mailmap is honoured.

    Any argument not listed below is passed verbatim to [cyan]git log[/cyan].

    Examples:
      [dim]# Whole history of the current repository[/dim]
      git-score

      [dim]# Only the last year, only the src/ directory[/dim]
      git-score --since="1 year ago" src/

      [dim]# Files that no longer exist need the -- separator[/dim]
      git-score -- old/removed.py
    """
    if verbose:
        command = ' '.join(shlex.quote(arg) for arg in build_log_args(git_args))
        click.echo(f"🔍 Running: git log {command} (in {repo_path.absolute()})", err=True)

    try:
        lines = fetch_log_lines(git_args, repo_path=repo_path)
    except HistoryFetchError as e:
        click.echo(f"❌ Error reading history: {e}", err=True)
        raise SystemExit(e.status or 1)

    parser = LogParser(per_commit=per_commit)
    try:
        authors = parser.parse(lines)
    except LogParseError as e:
        click.echo(f"❌ {e}", err=True)
        raise SystemExit(1)

    if verbose:
        click.echo(f"👥 Authors: {len(authors)}", err=True)
        if parser.skipped:
            click.echo(f"⚠️ Skipped {parser.skipped} unrecognized lines", err=True)

    for line in render_table(build_report(authors)):
        click.echo(line)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
