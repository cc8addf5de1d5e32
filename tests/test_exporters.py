"""
Tests for release export strategies.
"""

import pytest

from mirror_deploy.api.exceptions import ConfigError, ExportError
from mirror_deploy.exporters import (
    ExporterFactory,
    GitArchiveExporter,
    RsyncExporter,
    RsyncLinksExporter,
)
from mirror_deploy.models.config import ReleaseTarget


class TestRsyncExporter:
    """Tests for the dereferencing rsync export."""

    def test_whole_checkout(self, make_backend):
        backend = make_backend(dirs={"/m/"})

        RsyncExporter().export(backend, "/m", ReleaseTarget("/r"))

        assert backend.argvs("run") == [
            ["rsync", "-ar", "--copy-links", "--exclude=.git*", "/m/", "/r"],
        ]

    def test_subtree(self, make_backend):
        backend = make_backend(dirs={"/m/app/"})

        RsyncExporter().export(backend, "/m", ReleaseTarget("/r", "app"))

        assert backend.argvs("run") == [
            ["rsync", "-ar", "--copy-links", "--exclude=.git*", "/m/app/", "/r"],
        ]

    def test_source_checked_before_copy(self, make_backend):
        backend = make_backend(dirs={"/m/"})

        RsyncExporter().export(backend, "/m", ReleaseTarget("/r"))

        assert backend.argvs()[0] == ["test", "-d", "/m/"]

    def test_missing_subtree(self, make_backend):
        backend = make_backend(dirs={"/m/"})

        with pytest.raises(ExportError) as exc_info:
            RsyncExporter().export(backend, "/m", ReleaseTarget("/r", "missing"))

        assert "/m/missing/" in str(exc_info.value)
        assert backend.argvs("run") == []

    def test_copy_failure(self, make_backend):
        backend = make_backend(dirs={"/m/"}, failing=[("rsync",)])

        with pytest.raises(ExportError):
            RsyncExporter().export(backend, "/m", ReleaseTarget("/r"))

    def test_keeps_links(self, make_backend):
        backend = make_backend(dirs={"/m/"})

        RsyncLinksExporter().export(backend, "/m", ReleaseTarget("/r"))

        assert backend.argvs("run")[0][:3] == ["rsync", "-ar", "--links"]
        assert "--copy-links" not in backend.all_arguments()


class TestGitArchiveExporter:
    """Tests for the git archive export."""

    def test_export(self, make_backend, sha):
        backend = make_backend()
        exporter = GitArchiveExporter({"tmp_dir": "/tmp"})
        archive = f"/tmp/mirror-deploy-{sha}.tar"

        exporter.export(backend, "/m", ReleaseTarget("/r"), revision=sha, env={"GIT_ASKPASS": "/bin/echo"})

        assert backend.argvs() == [
            ["git", "archive", "--format=tar", f"--output={archive}", sha],
            ["mkdir", "-p", "/r"],
            ["tar", "-xf", archive, "-C", "/r"],
            ["rm", "-f", archive],
        ]
        assert backend.calls[0][2] == "/m"
        assert backend.calls[0][3] == {"GIT_ASKPASS": "/bin/echo"}

    def test_subtree(self, make_backend, sha):
        backend = make_backend()

        GitArchiveExporter().export(backend, "/m", ReleaseTarget("/r", "/app/"), revision=sha)

        assert backend.argvs()[0][-1] == f"{sha}:app"

    def test_requires_revision(self, make_backend):
        with pytest.raises(ExportError):
            GitArchiveExporter().export(make_backend(), "/m", ReleaseTarget("/r"))

    def test_archive_removed_on_failure(self, make_backend, sha):
        backend = make_backend(failing=[("tar",)])

        with pytest.raises(ExportError):
            GitArchiveExporter({"tmp_dir": "/tmp"}).export(backend, "/m", ReleaseTarget("/r"), revision=sha)

        assert backend.argvs()[-1] == ["rm", "-f", f"/tmp/mirror-deploy-{sha}.tar"]


class TestExporterFactory:
    """Tests for ExporterFactory."""

    @pytest.mark.parametrize("name,cls", [
        ("rsync", RsyncExporter),
        ("rsync-links", RsyncLinksExporter),
        ("archive", GitArchiveExporter),
    ])
    def test_create(self, name, cls):
        exporter = ExporterFactory.create(name, {"tmp_dir": "/tmp"})

        assert isinstance(exporter, cls)
        assert exporter.name == name
        assert exporter.config == {"tmp_dir": "/tmp"}

    def test_unknown(self):
        with pytest.raises(ConfigError) as exc_info:
            ExporterFactory.create("scp")

        assert "rsync" in str(exc_info.value)

    def test_supported(self):
        assert ExporterFactory.supported() == ["archive", "rsync", "rsync-links"]
        assert ExporterFactory.is_supported("rsync")
        assert not ExporterFactory.is_supported("scp")

    def test_register(self, monkeypatch):
        monkeypatch.setattr(ExporterFactory, "_strategies", dict(ExporterFactory._strategies))

        class CustomExporter(RsyncExporter):
            name = "custom"

        ExporterFactory.register("custom", CustomExporter)

        assert isinstance(ExporterFactory.create("custom"), CustomExporter)
