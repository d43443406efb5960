"""Git repository operations."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from git import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)

# Probed in order when no target is given
DEFAULT_TARGETS = ("main", "master")
FALLBACK_TARGET = "main"

CURRENT_BRANCH_MARKER = "*"
# Branch checked out in another worktree
WORKTREE_MARKER = "+"


class GitError(Exception):
    """Git operation error."""


class VcsUnavailable(GitError):
    """Target branch not found or path is not a git repository."""


def filter_merged(lines: Iterable[str], target: str) -> list[str]:
    """Turn raw ``git branch --merged`` output into deletion candidates.

    Args:
        lines: Output lines, e.g. ``["* main", "  feature-a"]``
        target: Target branch name, never a candidate

    Returns:
        Branch names in listing order, without the current branch and the target
    """
    candidates = []
    for line in lines:
        name = line.strip()
        if not name:
            continue
        # Current checkout, also covers "* (HEAD detached at ...)"
        if name.startswith(CURRENT_BRANCH_MARKER):
            continue
        if name.startswith(WORKTREE_MARKER):
            name = name[len(WORKTREE_MARKER) :].strip()
        if name == target:
            continue
        candidates.append(name)
    return candidates


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Initialize repository.

        Raises:
            VcsUnavailable: If path is not inside a git work tree
        """
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as err:
            raise VcsUnavailable(f"Not a git repository: {path}") from err
        if self.repo.bare:
            raise VcsUnavailable("Cannot operate on bare repository")
        logger.debug("Opened repository at %s", self.repo.working_tree_dir)

    def branch_exists(self, name: str) -> bool:
        """Check whether a revision name resolves in this repository."""
        try:
            self.repo.git.rev_parse("--verify", "--quiet", name)
            return True
        except (GitCommandError, GitCommandNotFound):
            return False

    def resolve_target(self, target: Optional[str] = None) -> str:
        """Return the branch merged status is evaluated against.

        An explicit target is used as given. Otherwise the first existing of
        ``main`` and ``master`` wins, falling back to ``main`` unvalidated.
        """
        if target:
            return target
        for candidate in DEFAULT_TARGETS:
            if self.branch_exists(candidate):
                logger.debug("Detected target branch %s", candidate)
                return candidate
        logger.debug("Neither %s exists, falling back to %s", " nor ".join(DEFAULT_TARGETS), FALLBACK_TARGET)
        return FALLBACK_TARGET

    def list_merged(self, target: str) -> list[str]:
        """Get the raw ``git branch --merged`` listing for a target.

        Raises:
            VcsUnavailable: If git rejects the target or the repository
            GitError: If the git executable cannot be run
        """
        try:
            output = self.repo.git.branch("--no-color", "--merged", target)
        except GitCommandNotFound as err:
            raise GitError(f"Failed to execute git command: {err}") from err
        except GitCommandError as err:
            logger.debug("git branch --merged %s failed: %s", target, str(err.stderr).strip())
            raise VcsUnavailable(f"Failed to list branches merged into {target}") from err
        lines = output.splitlines()
        logger.debug("git listed %d branch(es) merged into %s", len(lines), target)
        return lines

    def merged_branches(self, target: str) -> list[str]:
        """Get branches that can be deleted because they are merged into target."""
        candidates = filter_merged(self.list_merged(target), target)
        logger.debug("Candidates: %s", ", ".join(candidates) or "none")
        return candidates

    def delete_branch(self, branch_name: str) -> bool:
        """Delete a single local branch without forcing. Returns True if successful.

        Git refuses branches that are not fully merged into the current checkout
        (or their upstream), which is reported as a failure.
        """
        try:
            self.repo.git.branch("-d", branch_name)
        except (GitCommandError, GitCommandNotFound) as err:
            logger.debug("git branch -d %s failed: %s", branch_name, str(err.stderr).strip())
            return False
        return True
