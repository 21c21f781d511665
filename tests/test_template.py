"""Tests for matching names against a naming template."""

import pytest

from filetimegen.common.template import MatchError, NamingTemplate
from filetimegen.common.timestamp import Timestamp


def test_placeholder_positions() -> None:
    """Every {now} is found, in order."""
    assert NamingTemplate("a{now}b{now}").positions == [1, 7]
    assert NamingTemplate("{now}").positions == [0]
    assert NamingTemplate("backup").positions == []
    assert not NamingTemplate("backup-{NOW}").has_placeholder


def test_stamp_replaces_every_placeholder() -> None:
    ts = Timestamp.parse("2024-01-02T05:00:00")
    template = NamingTemplate("{now}/db-{now}.sql")
    assert template.stamp(ts) == "2024-01-02T05:00:00/db-2024-01-02T05:00:00.sql"


@pytest.mark.parametrize(
    "spec, line, expected",
    [
        ("backup-{now}", "backup-2024-01-02T05:00:00", "2024-01-02T05:00:00"),
        ("backup-{now}.tar.gz", "backup-2024-01-02T05:00:00.tar.gz", "2024-01-02T05:00:00"),
        ("{now}", "2024-01-02T05:00:00", "2024-01-02T05:00:00"),
        ("{now}/db-{now}.sql", "2024-01-02T05:00:00/db-2023-06-07T08:09:10.sql", "2024-01-02T05:00:00"),
    ],
)
def test_extract_returns_first_placeholder(spec: str, line: str, expected: str) -> None:
    """The text at the first placeholder is the authoritative timestamp."""
    assert NamingTemplate(spec).extract(line) == expected


def test_extract_checks_width_only() -> None:
    """Placeholder content is not inspected by the matcher."""
    assert NamingTemplate("backup-{now}").extract("backup-XXXXXXXXXXXXXXXXXXX") == "X" * 19


@pytest.mark.parametrize(
    "spec, line",
    [
        ("backup-{now}", "snap-2024-01-01T00:00:00"),
        ("backup-{now}", "backup-2024-01-01T00:00:00.tar"),
        ("backup-{now}", "backup-2024-01-01T00:00"),
        ("backup-{now}", "backup-"),
        ("backup-{now}", "backu"),
        ("backup-{now}", ""),
        ("{now}", ""),
        ("backup-{now}.tar", "backup-2024-01-01T00:00:00.tgz"),
        ("{now}/db-{now}.sql", "2024-01-02T05:00:00/xx-2023-06-07T08:09:10.sql"),
        ("{now}/db-{now}.sql", "2024-01-02T05:00:00/db-2023-06-07T08:09"),
        ("backup", "backup"),
    ],
)
def test_extract_rejects_mismatch(spec: str, line: str) -> None:
    """Literal differences, wrong lengths and missing placeholders raise MatchError."""
    with pytest.raises(MatchError):
        NamingTemplate(spec).extract(line)
