"""Environment variables stored as ``KEY=VALUE`` entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _matches(entry: str, key: str) -> bool:
    return entry.startswith(key) and entry[len(key) : len(key) + 1] == "="


class Environment:
    """An ordered list of ``KEY=VALUE`` strings, as handed to new processes."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries = list(entries)

    def get(self, key: str) -> str | None:
        """Return the value of the first entry named ``key``, or None."""
        for entry in self._entries:
            if _matches(entry, key):
                return entry[len(key) + 1 :]
        return None

    def set(self, expr: str) -> None:
        """Add ``expr`` or replace every entry with the same key by it.

        The key is the part of ``expr`` before the first ``=``, or all of it.
        """
        key = expr.partition("=")[0]
        if self.get(key) is None:
            self._entries.append(expr)
        else:
            self._entries = [
                expr if _matches(entry, key) else entry for entry in self._entries
            ]

    def unset(self, key: str) -> None:
        """Remove every entry named ``key``."""
        self._entries = [entry for entry in self._entries if not _matches(entry, key)]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def as_dict(self) -> dict[str, str]:
        """Return a mapping of keys to values; the first entry of a key wins."""
        result: dict[str, str] = {}
        for entry in self._entries:
            key, sep, value = entry.partition("=")
            if sep:
                result.setdefault(key, value)
        return result

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"