"""Pytest fixtures for git-tidy tests"""
import tempfile
from pathlib import Path
from threading import Lock
import pytest
import git

from git_tidy.config import Config
from git_tidy.exceptions import CommandExecutionError


class FakeRunner:
    """Stand-in for GitRunner that records invocations and replays canned output."""

    def __init__(self, outputs=None, failures=None):
        self.outputs = dict(outputs or {})
        self.failures = dict(failures or {})
        self.calls = []
        self._lock = Lock()

    def run(self, *args):
        with self._lock:
            self.calls.append(args)
        if args in self.failures:
            raise CommandExecutionError(" ".join(("git",) + args), 1, self.failures[args])
        return self.outputs.get(args, "")

    def count(self, *args):
        return self.calls.count(args)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'repo_path': '/fake/repo/path',
        'remote_name': 'origin',
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def config(mock_config):
    """Create a Config object."""
    return Config.from_dict(mock_config)


@pytest.fixture
def fake_runner():
    """Create an empty FakeRunner."""
    return FakeRunner()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo, temp_dir):
    """Create a repository with merged, unmerged and worktree branches.

    - feature-a: merged, checked out in the worktree at <temp_dir>/wt-a
    - feature-b: merged
    - feature-c: one commit ahead of main
    """
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.branch('feature-a')
    repo.git.branch('feature-b')

    repo.git.checkout('-b', 'feature-c')
    (repo_path / "feature.txt").write_text("Feature content\n")
    repo.index.add(["feature.txt"])
    repo.index.commit("Add feature")
    repo.git.checkout('main')

    repo.git.worktree('add', str(temp_dir / "wt-a"), 'feature-a')

    yield repo


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances with canned outputs and failures."""
    return FakeRunner
