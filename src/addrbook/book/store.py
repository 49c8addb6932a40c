"""Bounded, ordered address book store.

Entries are unique by ``(sur_name, first_name)`` and always iterate in
ascending key order. The store only touches the filesystem inside
``load()`` and ``save()``.
"""

from __future__ import annotations

import bisect
import logging
import os
import stat
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from addrbook.book import codec
from addrbook.book.errors import (
    CapacityExceededError,
    LoadError,
    LoadErrorKind,
    SaveError,
    SaveErrorKind,
)
from addrbook.book.types import Entry

logger = logging.getLogger(__name__)

# Maximum number of entries held at once
SIZE_LIMIT = 10


@dataclass
class LoadReport:
    """Outcome of merging a document into a book."""

    added: list[Entry] = field(default_factory=list)
    duplicates: list[Entry] = field(default_factory=list)
    dropped: list[Entry] = field(default_factory=list)

    @property
    def loaded(self) -> int:
        return len(self.added)

    @property
    def complete(self) -> bool:
        """True when no entry was dropped for lack of capacity."""
        return not self.dropped


class AddressBook:
    """In-memory address book with a fixed capacity."""

    def __init__(self, capacity: int = SIZE_LIMIT) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._entries: list[Entry] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.list())

    def __contains__(self, entry: object) -> bool:
        if not isinstance(entry, Entry):
            return False
        return self._index_of(entry) is not None

    def __str__(self) -> str:
        return "".join(f"{entry}\n" for entry in self._entries)

    # ------------------------------------------------------------------
    # Entry operations
    # ------------------------------------------------------------------

    def add(self, entry: Entry) -> bool:
        """Store a new entry.

        Returns:
            True if the entry was stored, False if an entry with the same
            name already exists (the existing entry is kept as is).

        Raises:
            CapacityExceededError: If the book is full.
        """
        if self.is_full:
            raise CapacityExceededError(self._capacity)

        pos = bisect.bisect_left(self._entries, entry.key, key=_entry_key)
        if pos < len(self._entries) and self._entries[pos].key == entry.key:
            return False

        self._entries.insert(pos, entry)
        logger.debug(
            "entry_added", extra={"entry": str(entry), "entry.position": pos}
        )
        return True

    def find(self, sur_name: str, first_name: str) -> Entry | None:
        """Look up an entry by name, or return None."""
        pos = self._index_of_key((sur_name, first_name))
        return self._entries[pos] if pos is not None else None

    def delete(self, entry: Entry) -> bool:
        """Remove the entry with the same name as ``entry``, if present."""
        pos = self._index_of(entry)
        if pos is None:
            return False
        removed = self._entries.pop(pos)
        logger.debug(
            "entry_deleted", extra={"entry": str(removed), "entry.position": pos}
        )
        return True

    def erase(self) -> int:
        """Remove all entries. Returns the number of entries removed."""
        removed = len(self._entries)
        self._entries.clear()
        return removed

    def list(self) -> tuple[Entry, ...]:
        """Return all entries in ascending (sur_name, first_name) order."""
        return tuple(self._entries)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self, path: Path) -> LoadReport:
        """Merge entries from an XML document into this book.

        The document is parsed completely before any entry is added, so a
        failing load leaves the book unchanged. Entries that do not fit are
        reported in ``LoadReport.dropped`` rather than raised.

        Raises:
            LoadError: If the file cannot be read or is not a valid document.
        """
        path = Path(path)
        try:
            with path.open("rb") as f:
                data = f.read()
        except FileNotFoundError as e:
            raise LoadError(
                LoadErrorKind.NOT_FOUND, f"Address book not found: {path}", path
            ) from e
        except OSError as e:
            raise LoadError(
                LoadErrorKind.IO_FAILURE, f"Cannot read {path}: {e}", path
            ) from e

        try:
            entries = codec.decode(data)
        except LoadError as e:
            e.path = path
            raise

        report = LoadReport()
        for entry in entries:
            try:
                if self.add(entry):
                    report.added.append(entry)
                else:
                    report.duplicates.append(entry)
            except CapacityExceededError:
                report.dropped.append(entry)

        if report.duplicates:
            logger.debug(
                "load_duplicates_skipped",
                extra={"count": len(report.duplicates), "file.path": str(path)},
            )
        if report.dropped:
            logger.warning(
                "load_capacity_reached",
                extra={
                    "count": len(report.dropped),
                    "entries": [str(entry) for entry in report.dropped],
                    "capacity": self._capacity,
                    "file.path": str(path),
                },
            )
        logger.info(
            "address_book_loaded",
            extra={"count": report.loaded, "file.path": str(path)},
        )
        return report

    def save(self, path: Path) -> None:
        """Write all entries to an XML document.

        The file is replaced atomically; on failure the previous content
        is left in place.

        Raises:
            SaveError: If the book cannot be serialized or written.
        """
        path = Path(path)
        try:
            data = codec.encode(self._entries)
        except SaveError as e:
            e.path = path
            raise

        try:
            _write_atomic(path, data)
        except OSError as e:
            raise SaveError(
                SaveErrorKind.IO_FAILURE, f"Cannot write {path}: {e}", path
            ) from e
        logger.info(
            "address_book_saved",
            extra={"count": len(self._entries), "file.path": str(path)},
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _index_of(self, entry: Entry) -> int | None:
        return self._index_of_key(entry.key)

    def _index_of_key(self, key: tuple[str, str]) -> int | None:
        pos = bisect.bisect_left(self._entries, key, key=_entry_key)
        if pos < len(self._entries) and self._entries[pos].key == key:
            return pos
        return None


def _entry_key(entry: Entry) -> tuple[str, str]:
    return entry.key


def _write_atomic(path: Path, data: bytes) -> None:
    """Write bytes atomically via tempfile + fsync + os.replace().

    An existing destination keeps its permission bits.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        try:
            os.chmod(tmp, stat.S_IMODE(path.stat().st_mode))
        except FileNotFoundError:
            pass
        Path(tmp).replace(path)
    except BaseException:
        try:
            Path(tmp).unlink()
        except OSError:
            pass
        raise
