"""
Fetches raw commit history from git.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from git import Repo
from git.exc import GitCommandError, GitError


GIT_LOG_ARGS = (
    '--use-mailmap',
    '--numstat',
    '--pretty=format:> %aN <%aE>',
    '--no-merges',
)


class HistoryFetchError(RuntimeError):
    """git could not be run or exited with an error.

    ``status`` is git's exit status when git ran and failed, otherwise None.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


def build_log_args(extra_args: Sequence[str] = ()) -> List[str]:
    """Base ``git log`` arguments followed by the caller's, unchanged."""
    return list(GIT_LOG_ARGS) + list(extra_args)


def fetch_log_lines(extra_args: Sequence[str] = (),
                    repo_path: Union[str, Path] = '.') -> List[str]:
    """
    Run ``git log`` and collect its output

    Args:
        extra_args: Extra ``git log`` arguments (revisions, paths, dates...)
        repo_path: Any directory inside the repository

    Returns:
        List[str]: Output lines in emission order, blank lines included

    Raises:
        HistoryFetchError: The repository cannot be opened, git is missing,
            or ``git log`` exits non-zero
    """
    try:
        repo = Repo(repo_path, search_parent_directories=True)
    except GitError as e:
        raise HistoryFetchError(f"Not a valid Git repository: {repo_path}") from e

    try:
        output = repo.git.log(*build_log_args(extra_args))
    except GitCommandError as e:
        # GitPython pre-formats stderr as "\n  stderr: '...'"
        status = e.status if isinstance(e.status, int) else None
        raise HistoryFetchError(f"git log exited with status {e.status}{e.stderr}", status) from e
    except GitError as e:
        raise HistoryFetchError(f"Cannot run git: {e}") from e
    finally:
        repo.close()

    return output.splitlines()
