"""
End to end tests against real git and rsync binaries.
"""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from mirror_deploy.api.exceptions import UnreachableRemoteError
from mirror_deploy.api.strategy import GitMirrorStrategy
from mirror_deploy.models.config import ScmConfig
from mirror_deploy.models.reference import RefKind
from mirror_deploy.models.result import MirrorAction

pytestmark = pytest.mark.skipif(
    shutil.which("git") is None or shutil.which("rsync") is None,
    reason="requires git and rsync"
)


def git(cwd, *args):
    result = subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com",
         "-c", "protocol.file.allow=always", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True
    )
    return result.stdout.strip()


def commit(repo, message):
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", message)
    return git(repo, "rev-parse", "HEAD")


@pytest.fixture
def origin(tmp_path):
    """Upstream repository with a symlink and a v1.0.0 tag behind main"""
    repo = tmp_path / "origin"
    (repo / "app").mkdir(parents=True)
    (repo / "shared").mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")

    (repo / "app" / "version.txt").write_text("1\n")
    (repo / "shared" / "data.txt").write_text("shared data\n")
    os.symlink("../shared/data.txt", repo / "app" / "data.txt")
    commit(repo, "first")
    git(repo, "tag", "v1.0.0")

    (repo / "app" / "version.txt").write_text("2\n")
    commit(repo, "second")
    return repo


@pytest.fixture
def make_config(tmp_path, origin):
    (tmp_path / "releases").mkdir()

    def factory(branch="main", release="1", **kwargs):
        return ScmConfig(
            repo_url=str(origin),
            repo_path=str(tmp_path / "mirror"),
            branch=branch,
            release_path=str(tmp_path / "releases" / release),
            tmp_dir=str(tmp_path),
            **kwargs
        )

    return factory


@pytest.fixture
def origin_with_submodule(tmp_path):
    """Upstream repository with a submodule and a symlink into it"""
    lib = tmp_path / "lib"
    lib.mkdir()
    git(lib, "init", "-q")
    (lib / "data.txt").write_text("library data\n")
    commit(lib, "library")

    repo = tmp_path / "origin-sub"
    (repo / "app").mkdir(parents=True)
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo, "submodule", "add", "-q", str(lib), "vendor/lib")
    (repo / "app" / "version.txt").write_text("1\n")
    os.symlink("../vendor/lib/data.txt", repo / "app" / "lib-data.txt")
    commit(repo, "with submodule")
    return repo


# Local submodule clones are refused by default since git 2.38.1
FILE_PROTOCOL_ENV = {
    "GIT_CONFIG_COUNT": "1",
    "GIT_CONFIG_KEY_0": "protocol.file.allow",
    "GIT_CONFIG_VALUE_0": "always",
}


class TestDeploy:
    """Full pipeline runs against a local upstream."""

    def test_branch_release(self, origin, make_config):
        config = make_config()

        result = GitMirrorStrategy(config).deploy()

        release = config.release_path
        assert result.mirror_action == MirrorAction.CLONED
        assert result.resolved.kind == RefKind.BRANCH
        assert result.revision == git(origin, "rev-parse", "main")
        assert Path(release, "app", "version.txt").read_text() == "2\n"
        assert not os.path.exists(os.path.join(release, ".git"))

    def test_links_are_dereferenced(self, make_config):
        config = make_config()

        GitMirrorStrategy(config).deploy()

        copied = os.path.join(config.release_path, "app", "data.txt")
        assert not os.path.islink(copied)
        assert Path(copied).read_text() == "shared data\n"

    def test_tag_release(self, origin, make_config):
        GitMirrorStrategy(make_config()).deploy()
        config = make_config(branch="v1.0.0", release="2")

        result = GitMirrorStrategy(config).deploy()

        assert result.mirror_action == MirrorAction.UPDATED
        assert result.resolved.kind == RefKind.FIXED_POINT
        assert result.revision == git(origin, "rev-parse", "v1.0.0^{commit}")
        assert Path(config.release_path, "app", "version.txt").read_text() == "1\n"

    def test_branch_follows_upstream(self, origin, make_config):
        GitMirrorStrategy(make_config()).deploy()
        (origin / "app" / "version.txt").write_text("3\n")
        head = commit(origin, "third")
        config = make_config(release="2")

        result = GitMirrorStrategy(config).deploy()

        assert result.revision == head
        assert Path(config.release_path, "app", "version.txt").read_text() == "3\n"

    def test_subtree_release(self, make_config):
        config = make_config(repo_tree="app")

        GitMirrorStrategy(config).deploy()

        assert sorted(os.listdir(config.release_path)) == ["data.txt", "version.txt"]

    def test_archive_release(self, make_config):
        config = make_config(export_strategy="archive")

        GitMirrorStrategy(config).deploy()

        assert Path(config.release_path, "app", "version.txt").read_text() == "2\n"
        assert os.path.islink(os.path.join(config.release_path, "app", "data.txt"))

    def test_existing_release_files_kept(self, make_config):
        config = make_config()
        os.makedirs(config.release_path)
        Path(config.release_path, "shared.log").write_text("keep me\n")
        Path(config.release_path, "app").mkdir()
        Path(config.release_path, "app", "version.txt").write_text("old\n")

        GitMirrorStrategy(config).deploy()
        GitMirrorStrategy(config).deploy()

        assert Path(config.release_path, "shared.log").read_text() == "keep me\n"
        assert Path(config.release_path, "app", "version.txt").read_text() == "2\n"

    def test_unreachable_remote(self, tmp_path):
        config = ScmConfig(
            repo_url=str(tmp_path / "missing"),
            repo_path=str(tmp_path / "mirror"),
            release_path=str(tmp_path / "release"),
        )

        with pytest.raises(UnreachableRemoteError):
            GitMirrorStrategy(config).deploy()

        assert not (tmp_path / "mirror").exists()


class TestSubmodules:
    """Releases of a repository carrying a submodule."""

    def make_config(self, tmp_path, origin, **kwargs):
        return ScmConfig(
            repo_url=str(origin),
            repo_path=str(tmp_path / "mirror-sub"),
            branch="main",
            release_path=str(tmp_path / "release-sub"),
            tmp_dir=str(tmp_path),
            git_environment=FILE_PROTOCOL_ENV,
            **kwargs
        )

    def test_submodule_content_released(self, tmp_path, origin_with_submodule):
        config = self.make_config(tmp_path, origin_with_submodule)

        GitMirrorStrategy(config).deploy()

        release = Path(config.release_path)
        assert (release / "vendor" / "lib" / "data.txt").read_text() == "library data\n"
        assert not (release / ".gitmodules").exists()
        assert not (release / "vendor" / "lib" / ".git").exists()

    def test_link_into_submodule_dereferenced(self, tmp_path, origin_with_submodule):
        config = self.make_config(tmp_path, origin_with_submodule, repo_tree="app")

        GitMirrorStrategy(config).deploy()

        copied = Path(config.release_path, "lib-data.txt")
        assert not copied.is_symlink()
        assert copied.read_text() == "library data\n"
