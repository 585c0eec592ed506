"""Tests for pasting the copy list into a directory."""

from __future__ import annotations

import os
from concurrent.futures import Future
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from stagecopy.features.staging import (
    CommitEngine,
    CopyFailureError,
    EmptyPendingSetError,
    InvalidTargetError,
    PendingSet,
)
from stagecopy.features.staging.adapters import LocalFileSystemGateway

FIXED_MTIME = 1_600_000_000


class FakeListing:
    """Listing whose entries show up after a given number of lookups."""

    def __init__(self, *, visible_after: int = 1, signal: Future[None] | None = None) -> None:
        self.visible_after = visible_after
        self.signal = signal
        self.refreshed: list[Path] = []
        self.lookups: list[Path] = []
        self.cursor: Path | None = None

    def refresh(self, directory: Path) -> Future[None] | None:
        self.refreshed.append(directory)
        return self.signal

    def locate(self, path: Path) -> bool:
        self.lookups.append(path)
        if len(self.lookups) >= self.visible_after:
            self.cursor = path
            return True
        return False


class FailingGateway(LocalFileSystemGateway):
    """Local gateway that fails when asked to copy one specific source."""

    def __init__(self, failing: Path) -> None:
        self.failing = failing

    def copy_file(self, source: Path, destination: Path) -> None:
        if source == self.failing:
            raise PermissionError(13, "Permission denied", str(destination))
        super().copy_file(source, destination)


@pytest.fixture
def src(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    root.mkdir()
    return root


@pytest.fixture
def dst(tmp_path: Path) -> Path:
    root = tmp_path / "dst"
    root.mkdir()
    return root


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
    return path


def _engine(**kwargs: object) -> CommitEngine:
    sleeps: list[float] = []
    defaults: dict[str, object] = {
        "filesystem": LocalFileSystemGateway(),
        "poll_attempts": 30,
        "poll_interval": 0.1,
        "sleep": sleeps.append,
    }
    defaults.update(kwargs)
    return CommitEngine(**defaults)  # pyright: ignore[reportArgumentType]


def test_empty_commit_raises_without_touching_disk(dst: Path, mocker: MockerFixture) -> None:
    """An empty copy list should be reported before any filesystem access."""

    gateway = LocalFileSystemGateway()
    check = mocker.spy(gateway, "check_target")
    copy_file = mocker.spy(gateway, "copy_file")
    copy_tree = mocker.spy(gateway, "copy_tree")

    with pytest.raises(EmptyPendingSetError):
        _ = _engine(filesystem=gateway).commit(PendingSet(), dst)

    check.assert_not_called()
    copy_file.assert_not_called()
    copy_tree.assert_not_called()
    assert list(dst.iterdir()) == []


def test_single_file_result_shape(src: Path, dst: Path) -> None:
    report = _write(src / "report.txt", "fresh")
    pending = PendingSet([report])

    result = _engine().commit(pending, dst)

    assert result.copied_count == 1
    assert result.single_item is True
    assert result.last_basename == "report.txt"
    assert result.target_dir == dst
    assert result.cursor_target == dst / "report.txt"
    assert (dst / "report.txt").read_text(encoding="utf-8") == "fresh"
    assert pending.is_empty()


def test_multi_item_result_uses_last_inserted_basename(src: Path, dst: Path) -> None:
    """The cursor target is the last item in insertion order."""

    a = _write(src / "a.txt", "a")
    b = _write(src / "b.txt", "b")
    c = _write(src / "nested" / "c.txt", "c")
    pending = PendingSet()
    for item in (c, a, b):
        _ = pending.add_one(item)

    result = _engine().commit(pending, dst)

    assert result.copied_count == 3
    assert result.single_item is False
    assert result.last_basename == "b.txt"
    assert sorted(p.name for p in dst.iterdir()) == ["a.txt", "b.txt", "c.txt"]
    assert pending.is_empty()


def test_directory_copy_preserves_contents_and_mtimes(src: Path, dst: Path) -> None:
    project = src / "projA"
    x = _write(project / "x.txt", "x")
    y = _write(project / "sub" / "y.txt", "y")
    for path in (x, y):
        os.utime(path, (FIXED_MTIME, FIXED_MTIME))
    pending = PendingSet([project])

    result = _engine().commit(pending, dst)

    copied_x = dst / "projA" / "x.txt"
    copied_y = dst / "projA" / "sub" / "y.txt"
    assert copied_x.read_text(encoding="utf-8") == "x"
    assert copied_y.read_text(encoding="utf-8") == "y"
    assert copied_x.stat().st_mtime == FIXED_MTIME
    assert copied_y.stat().st_mtime == FIXED_MTIME
    assert pending.is_empty()
    assert (result.copied_count, result.single_item, result.last_basename) == (1, True, "projA")


def test_existing_file_is_overwritten_silently(src: Path, dst: Path) -> None:
    report = _write(src / "report.txt", "new content")
    _ = _write(dst / "report.txt", "stale content that differs")

    _ = _engine().commit(PendingSet([report]), dst)

    assert (dst / "report.txt").read_text(encoding="utf-8") == "new content"


def test_existing_directory_is_merged_and_overwritten(src: Path, dst: Path) -> None:
    project = src / "projA"
    _ = _write(project / "x.txt", "new")
    _ = _write(dst / "projA" / "x.txt", "old")
    _ = _write(dst / "projA" / "keep.txt", "untouched")

    _ = _engine().commit(PendingSet([project]), dst)

    assert (dst / "projA" / "x.txt").read_text(encoding="utf-8") == "new"
    assert (dst / "projA" / "keep.txt").read_text(encoding="utf-8") == "untouched"


def test_failure_aborts_remaining_items_and_keeps_list(src: Path, dst: Path) -> None:
    """A failing second item stops the paste and leaves the copy list intact."""

    first = _write(src / "first.txt", "1")
    second = _write(src / "second.txt", "2")
    third = _write(src / "third.txt", "3")
    pending = PendingSet([first, second, third])
    listing = FakeListing()

    with pytest.raises(CopyFailureError) as excinfo:
        _ = _engine(filesystem=FailingGateway(second), view=listing).commit(pending, dst)

    error = excinfo.value
    assert error.path == second
    assert error.copied_count == 1
    assert error.completed == (dst / "first.txt",)
    assert isinstance(error.cause, PermissionError)
    assert error.__cause__ is error.cause
    assert pending.snapshot() == (first, second, third)
    assert (dst / "first.txt").exists()
    assert not (dst / "third.txt").exists()
    assert listing.refreshed == []


def test_missing_source_surfaces_as_copy_failure(src: Path, dst: Path) -> None:
    vanished = src / "gone.txt"
    pending = PendingSet([vanished])

    with pytest.raises(CopyFailureError) as excinfo:
        _ = _engine().commit(pending, dst)

    assert excinfo.value.path == vanished
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert pending.snapshot() == (vanished,)


def test_missing_target_is_rejected_before_copying(src: Path, tmp_path: Path) -> None:
    report = _write(src / "report.txt", "r")
    pending = PendingSet([report])

    with pytest.raises(InvalidTargetError):
        _ = _engine().commit(pending, tmp_path / "missing")

    assert pending.snapshot() == (report,)


def test_file_target_is_rejected(src: Path, tmp_path: Path) -> None:
    report = _write(src / "report.txt", "r")
    not_a_dir = _write(tmp_path / "plain.txt", "")

    with pytest.raises(InvalidTargetError) as excinfo:
        _ = _engine().commit(PendingSet([report]), not_a_dir)

    assert excinfo.value.target == not_a_dir


def test_pasting_into_own_directory_is_a_copy_failure(src: Path) -> None:
    report = _write(src / "report.txt", "r")
    pending = PendingSet([report])

    with pytest.raises(CopyFailureError):
        _ = _engine().commit(pending, src)

    assert report.read_text(encoding="utf-8") == "r"
    assert not pending.is_empty()


def test_directory_into_its_own_subtree_is_a_copy_failure(src: Path) -> None:
    project = src / "projA"
    inner = project / "inner"
    inner.mkdir(parents=True)

    with pytest.raises(CopyFailureError) as excinfo:
        _ = _engine().commit(PendingSet([project]), inner)

    assert isinstance(excinfo.value.cause, ValueError)
    assert not (inner / "projA").exists()


def test_refresh_and_cursor_placement_after_paste(src: Path, dst: Path) -> None:
    a = _write(src / "a.txt", "a")
    b = _write(src / "b.txt", "b")
    listing = FakeListing(visible_after=3)
    sleeps: list[float] = []

    result = _engine(view=listing, sleep=sleeps.append).commit(PendingSet([a, b]), dst)

    assert listing.refreshed == [dst]
    assert listing.cursor == dst / "b.txt"
    assert result.cursor_placed is True
    assert sleeps == [0.1, 0.1]


def test_cursor_placement_gives_up_silently(src: Path, dst: Path) -> None:
    a = _write(src / "a.txt", "a")
    listing = FakeListing(visible_after=1000)
    sleeps: list[float] = []

    result = _engine(view=listing, sleep=sleeps.append, poll_attempts=30).commit(
        PendingSet([a]), dst
    )

    assert result.cursor_placed is False
    assert result.copied_count == 1
    assert len(listing.lookups) == 30
    assert len(sleeps) == 29


def test_feedback_pulses_copied_destinations(src: Path, dst: Path, mocker: MockerFixture) -> None:
    a = _write(src / "a.txt", "a")
    feedback = mocker.Mock()

    _ = _engine(feedback=feedback).commit(PendingSet([a]), dst)

    feedback.pulse.assert_called_once_with([dst / "a.txt"])


def test_file_onto_same_named_directory_is_a_copy_failure(src: Path, dst: Path) -> None:
    """A file never lands inside a directory that shares its name."""

    report = _write(src / "report", "r")
    (dst / "report").mkdir()
    pending = PendingSet([report])

    with pytest.raises(CopyFailureError) as excinfo:
        _ = _engine().commit(pending, dst)

    assert isinstance(excinfo.value.cause, IsADirectoryError)
    assert excinfo.value.copied_count == 0
    assert not (dst / "report" / "report").exists()
    assert pending.snapshot() == (report,)


class BrokenListing(FakeListing):
    """Listing whose lookups raise instead of answering."""

    def locate(self, path: Path) -> bool:
        raise RuntimeError("listing went away")


def test_view_errors_do_not_fail_a_finished_paste(src: Path, dst: Path) -> None:
    a = _write(src / "a.txt", "a")
    pending = PendingSet([a])

    result = _engine(view=BrokenListing()).commit(pending, dst)

    assert result.copied_count == 1
    assert result.cursor_placed is False
    assert pending.is_empty()
    assert (dst / "a.txt").exists()


def test_refresh_error_does_not_fail_a_finished_paste(
    src: Path, dst: Path, mocker: MockerFixture
) -> None:
    a = _write(src / "a.txt", "a")
    view = mocker.Mock()
    view.refresh.side_effect = OSError("listing unreadable")

    result = _engine(view=view).commit(PendingSet([a]), dst)

    assert result.cursor_placed is False
    view.locate.assert_not_called()


def test_feedback_error_does_not_fail_a_finished_paste(
    src: Path, dst: Path, mocker: MockerFixture
) -> None:
    a = _write(src / "a.txt", "a")
    feedback = mocker.Mock()
    feedback.pulse.side_effect = RuntimeError("terminal closed")

    result = _engine(feedback=feedback).commit(PendingSet([a]), dst)

    assert result.copied_count == 1
