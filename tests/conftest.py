import logging
import subprocess
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


def git(repo: Path, *args: str) -> str:
    """Run a git command in ``repo`` and return its stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo, check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


def commit_file(repo: Path, name: str, content: str, message: str) -> str:
    """Write a file, commit it, and return the new commit id."""
    (repo / name).write_text(content)
    git(repo, "add", name)
    git(repo, "commit", "-m", message)
    return git(repo, "rev-parse", "HEAD")


@pytest.fixture(autouse=True)
def isolated_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep git from finding repositories above the test directory."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to streams from earlier CLI invocations."""
    yield
    logger = logging.getLogger("git_weave")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary git repository with a main branch."""
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init"], cwd=repo, check=True)
    subprocess.run(["git", "config", "user.name", "Test User"], cwd=repo, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"], cwd=repo, check=True
    )
    subprocess.run(["git", "config", "pull.rebase", "false"], cwd=repo, check=True)
    subprocess.run(["git", "config", "push.default", "simple"], cwd=repo, check=True)
    subprocess.run(
        ["git", "config", "push.autoSetupRemote", "false"], cwd=repo, check=True
    )

    (repo / "README.md").write_text("# Test Repo")
    subprocess.run(["git", "add", "."], cwd=repo, check=True)
    subprocess.run(["git", "commit", "-m", "Initial commit"], cwd=repo, check=True)

    cur = subprocess.run(
        ["git", "symbolic-ref", "--short", "HEAD"],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    ).stdout.strip()
    if cur != "main":
        subprocess.run(["git", "branch", "-m", cur, "main"], cwd=repo, check=True)

    yield repo


@pytest.fixture
def temp_git_repo_with_branches(
    temp_git_repo: Path,
) -> dict[str, Path | list[str]]:
    """Create a repo with feature branches b1..b3 forked from main."""
    branches = ["b1", "b2", "b3"]

    for branch in branches:
        git(temp_git_repo, "checkout", "-b", branch, "main")
        commit_file(temp_git_repo, f"{branch}.txt", f"Content for {branch}", f"Add {branch}")
    git(temp_git_repo, "checkout", "main")

    return {"repo": temp_git_repo, "branches": branches}


@pytest.fixture
def temp_dvlp_repo(temp_git_repo: Path) -> Path:
    """Create a repo with a dvlp branch and a feature branch forked from it."""
    git(temp_git_repo, "checkout", "-b", "dvlp")
    commit_file(temp_git_repo, "dvlp.txt", "dvlp work", "Start dvlp")
    git(temp_git_repo, "checkout", "-b", "feature")
    commit_file(temp_git_repo, "feature.txt", "feature work", "Add feature")
    commit_file(temp_git_repo, "README.md", "# Changed", "Touch readme")
    git(temp_git_repo, "checkout", "dvlp")
    commit_file(temp_git_repo, "later.txt", "later dvlp work", "Later dvlp work")
    return temp_git_repo


@pytest.fixture
def temp_git_repo_with_remote(temp_git_repo: Path) -> Path:
    """Create a repo whose main branch tracks a bare origin."""
    remote = temp_git_repo.parent / "remote.git"
    subprocess.run(["git", "init", "--bare", str(remote)], check=True)
    git(temp_git_repo, "remote", "add", "origin", str(remote))
    git(temp_git_repo, "push", "-u", "origin", "main")
    return temp_git_repo


@pytest.fixture
def not_a_repo(tmp_path: Path) -> Path:
    """A plain directory outside any git repository."""
    path = tmp_path / "plain"
    path.mkdir()
    return path


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()
