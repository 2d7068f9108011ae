"""
Summary: Exercise the start/advance/is_done/current protocol and handle release.
Why: The scan handle must be released exactly once no matter how scanning ends.
"""

from __future__ import annotations

import gc
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from dirkit.features.scanning import (
    DirectoryContainer,
    DirectoryEntry,
    DirectoryIterator,
    DirectoryScanner,
    ScanState,
    ScanStateError,
)


@dataclass
class _FakeHandle:
    path: str
    records: Iterator[tuple[str, bool]]


@dataclass
class _RecordingScanner:
    """In-memory scanner that records every open and close."""

    listing: dict[str, list[tuple[str, bool]]]
    opened: list[_FakeHandle] = field(default_factory=list)
    closed: list[_FakeHandle] = field(default_factory=list)

    def open(self, path: str) -> _FakeHandle | None:
        if path not in self.listing:
            return None
        handle = _FakeHandle(path, iter(self.listing[path]))
        self.opened.append(handle)
        return handle

    def next(self, handle: _FakeHandle) -> tuple[str, bool] | None:
        return next(handle.records, None)

    def close(self, handle: _FakeHandle) -> None:
        self.closed.append(handle)

    def is_directory(self, record: tuple[str, bool]) -> bool:
        return record[1]

    def name(self, record: tuple[str, bool]) -> str:
        return record[0]


@pytest.fixture
def scanner() -> _RecordingScanner:
    return _RecordingScanner(
        listing={
            "/data": [("alpha.txt", False), ("nested", True), ("omega.bin", False)],
            "/empty": [],
            "/dots": [(".", True), ("..", True), ("file", False)],
        }
    )


def _drain(iterator: DirectoryIterator) -> list[DirectoryEntry]:
    entries: list[DirectoryEntry] = []
    iterator.start()
    while not iterator.is_done():
        entries.append(iterator.current())
        iterator.advance()
    return entries


def test_fake_scanner_satisfies_protocol(scanner: _RecordingScanner) -> None:
    assert isinstance(scanner, DirectoryScanner)


def test_canonical_loop_yields_entries_in_scanner_order(scanner: _RecordingScanner) -> None:
    """Entries come back once each, in the order the backend reports them."""

    entries = _drain(DirectoryContainer("/data").iterator(scanner))

    assert [(e.name(), e.is_directory()) for e in entries] == [
        ("alpha.txt", False),
        ("nested", True),
        ("omega.bin", False),
    ]


def test_canonical_loop_over_real_directory(tmp_path: Path) -> None:
    """The native scanner reports every child exactly once."""

    (tmp_path / "sub").mkdir()
    _ = (tmp_path / "a.txt").write_text("a")
    _ = (tmp_path / "b.txt").write_text("b")

    entries = _drain(DirectoryContainer(str(tmp_path)).iterator())
    names = [entry.name() for entry in entries]

    assert sorted(names) == ["a.txt", "b.txt", "sub"]
    assert {entry.name(): entry.is_directory() for entry in entries} == {
        "a.txt": False,
        "b.txt": False,
        "sub": True,
    }


@pytest.mark.parametrize("relative", ["empty", "missing"])
def test_empty_or_missing_directory_is_done_after_start(tmp_path: Path, relative: str) -> None:
    (tmp_path / "empty").mkdir()

    iterator = DirectoryContainer(str(tmp_path / relative)).iterator()
    iterator.start()

    assert iterator.is_done()
    assert iterator.opened is (relative == "empty")


def test_open_failure_is_not_an_error(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/nowhere").iterator(scanner)
    iterator.start()

    assert iterator.is_done()
    assert iterator.state is ScanState.DONE
    assert not iterator.opened
    iterator.close()
    assert scanner.closed == []


def test_is_done_before_start_is_a_contract_violation(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/data").iterator(scanner)

    with pytest.raises(ScanStateError):
        _ = iterator.is_done()
    with pytest.raises(ScanStateError):
        iterator.advance()


def test_current_when_done_is_a_contract_violation(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/empty").iterator(scanner)
    iterator.start()

    with pytest.raises(ScanStateError):
        _ = iterator.current()


def test_start_twice_is_rejected(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/data").iterator(scanner)
    iterator.start()

    with pytest.raises(ScanStateError):
        iterator.start()
    iterator.close()


def test_entry_snapshot_survives_advance(scanner: _RecordingScanner) -> None:
    """Entries are copies, so they stay readable after the cursor moves on."""

    iterator = DirectoryContainer("/data").iterator(scanner)
    iterator.start()
    first = iterator.current()
    iterator.advance()
    iterator.close()

    assert first.name() == "alpha.txt"
    assert not first.is_directory()


def test_special_entries_are_surfaced_unfiltered(scanner: _RecordingScanner) -> None:
    entries = _drain(DirectoryContainer("/dots").iterator(scanner))

    assert [entry.name() for entry in entries] == [".", "..", "file"]
    assert [entry.is_special() for entry in entries] == [True, True, False]


def test_handle_released_at_exhaustion(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/data").iterator(scanner)
    _ = _drain(iterator)

    assert len(scanner.closed) == 1
    iterator.close()
    assert len(scanner.closed) == 1


def test_close_mid_scan_releases_once(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/data").iterator(scanner)
    iterator.start()
    iterator.advance()

    iterator.close()
    iterator.close()

    assert scanner.closed == scanner.opened
    assert iterator.is_done()


def test_close_without_start_touches_nothing(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/data").iterator(scanner)
    iterator.close()

    assert scanner.opened == []
    assert scanner.closed == []


def test_collected_iterator_releases_handle(scanner: _RecordingScanner) -> None:
    iterator = DirectoryContainer("/data").iterator(scanner)
    iterator.start()

    del iterator
    _ = gc.collect()

    assert len(scanner.closed) == 1


def test_context_manager_releases_handle(scanner: _RecordingScanner) -> None:
    with DirectoryContainer("/data").iterator(scanner) as iterator:
        iterator.start()
        assert iterator.current().name() == "alpha.txt"

    assert len(scanner.closed) == 1


def test_python_iteration_closes_on_early_exit(scanner: _RecordingScanner) -> None:
    entries = iter(DirectoryContainer("/data").iterator(scanner))
    first = next(entries)
    entries.close()  # type: ignore[attr-defined]

    assert first.name() == "alpha.txt"
    assert len(scanner.closed) == 1


def test_container_produces_independent_iterators(scanner: _RecordingScanner) -> None:
    container = DirectoryContainer("/data")

    first = [entry.name() for entry in container.iterator(scanner)]
    second = [entry.name() for entry in container.iterator(scanner)]

    assert first == second == ["alpha.txt", "nested", "omega.bin"]
    assert len(scanner.opened) == 2
    assert len(scanner.closed) == 2


def test_container_accepts_path_objects(tmp_path: Path) -> None:
    container = DirectoryContainer(tmp_path)  # type: ignore[arg-type]

    assert container.path == str(tmp_path)
    assert list(container) == []
