"""
Tests for display formatting helpers.
"""

import pytest

from mirror_deploy.models import MirrorAction, OperationStatus, RefKind, ReleaseResult, ResolvedReference
from mirror_deploy.utils.formatting import format_duration, format_path


@pytest.mark.parametrize("seconds,expected", [
    (None, "-"),
    (0.25, "250ms"),
    (1.5, "1.5s"),
    (65, "1m 5s"),
    (3720, "1h 2m"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_path_short():
    assert format_path("/var/app/releases/1") == "/var/app/releases/1"


def test_format_path_truncated():
    path = "/var/" + "deeply/" * 20 + "release"

    formatted = format_path(path, max_length=30)

    assert len(formatted) == 30
    assert formatted.startswith("/var/")
    assert formatted.endswith("release")
    assert "..." in formatted


def test_release_result_to_dict(sha):
    result = ReleaseResult(
        status=OperationStatus.IN_PROGRESS,
        repo_url="https://example.com/repo.git",
        mirror_action=MirrorAction.UPDATED,
        resolved=ResolvedReference(RefKind.BRANCH, "main", "origin/main", sha),
        export_strategy="rsync",
    )
    result.complete(OperationStatus.SUCCESS)

    data = result.to_dict()

    assert result.is_success
    assert result.revision == sha
    assert data["mirror_action"] == "updated"
    assert data["resolved"]["kind"] == "branch"
    assert data["duration"] is not None
