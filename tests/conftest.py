"""Test configuration and fixtures."""

from pathlib import Path

import pytest
from git import Actor, Repo

AUTHOR = Actor("Test User", "test@example.com")


def init_repo(path: Path, default_branch: str) -> Repo:
    """Create a repository with one commit on the given default branch."""
    path.mkdir()
    repo = Repo.init(path)

    # Set up git config
    repo.config_writer().set_value("user", "name", AUTHOR.name).release()
    repo.config_writer().set_value("user", "email", AUTHOR.email).release()
    repo.config_writer().set_value("commit", "gpgsign", "false").release()

    readme = path / "README.md"
    readme.write_text("# Test Repository")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit", author=AUTHOR, committer=AUTHOR)

    # Name the default branch regardless of init.defaultBranch
    repo.git.branch("-M", default_branch)
    return repo


def create_branch(repo: Repo, name: str, base: str, merge: bool = False) -> None:
    """Create a branch with one commit on top of base, optionally merging it back."""
    repo.git.checkout("-b", name, base)
    repo.git.commit("--allow-empty", "-m", f"Add {name}")
    repo.git.checkout(base)
    if merge:
        repo.git.merge(name, "--no-ff", "-m", f"Merge {name}")


@pytest.fixture
def test_env(tmp_path: Path) -> Path:
    """Create a repository on main with two merged branches and one unmerged branch.

    ``git branch --merged main`` lists ``feature-a``, ``feature-b`` and ``* main``.
    """
    repo = init_repo(tmp_path / "repo", "main")
    create_branch(repo, "feature-a", "main", merge=True)
    create_branch(repo, "feature-b", "main", merge=True)
    create_branch(repo, "feature/wip", "main")
    return tmp_path / "repo"


@pytest.fixture
def master_repo(tmp_path: Path) -> Path:
    """Create a repository whose default branch is master, with one merged branch."""
    repo = init_repo(tmp_path / "legacy", "master")
    create_branch(repo, "old-topic", "master", merge=True)
    return tmp_path / "legacy"


@pytest.fixture
def clean_repo(tmp_path: Path) -> Path:
    """Create a repository on main with nothing to clean up."""
    repo = init_repo(tmp_path / "clean", "main")
    create_branch(repo, "feature/wip", "main")
    return tmp_path / "clean"


@pytest.fixture
def trunk_repo(tmp_path: Path) -> Path:
    """Create a repository with neither main nor master."""
    init_repo(tmp_path / "trunk", "trunk")
    return tmp_path / "trunk"
