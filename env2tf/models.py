"""Data model for parsed ``.env`` content.

- **EnvEntry** - one ``KEY=VALUE # description`` declaration.
- **EnvSet** - the read-only mapping of key to entry produced by a parse.

An EnvSet is built once and never mutated afterwards; renderers take it by
reference and ask it for entries in the order they need.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


class EntryOrder:
    """Names of the supported entry orderings."""

    SORTED = "sorted"
    FILE = "file"

    CHOICES = (SORTED, FILE)


@dataclass(frozen=True)
class EnvEntry:
    """A single variable declaration.

    Attributes:
        key: Variable name (never empty)
        value: Trimmed text between ``=`` and the first ``#``
        description: Trimmed text after the first ``#``, or None
    """

    key: str
    value: str
    description: str | None = None


class EnvSet(Mapping[str, EnvEntry]):
    """Immutable mapping of variable name to EnvEntry.

    Keys iterate in first-seen order. A duplicate key replaces the earlier
    entry's value and description but keeps its original position.
    """

    def __init__(self, entries: Mapping[str, EnvEntry] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_entries(cls, entries: Iterable[EnvEntry]) -> "EnvSet":
        """Build a set from entries, the last occurrence of a key wins."""
        collected: dict[str, EnvEntry] = {}
        for entry in entries:
            collected[entry.key] = entry
        return cls(collected)

    def __getitem__(self, key: str) -> EnvEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EnvSet({list(self._entries.values())!r})"

    def ordered(self, order: str = EntryOrder.SORTED) -> list[EnvEntry]:
        """Return entries in a deterministic order.

        Args:
            order: ``"sorted"`` for lexicographic by key, ``"file"`` for
                first-seen order

        Raises:
            ValueError: If *order* is not a known ordering
        """
        if order == EntryOrder.SORTED:
            return [self._entries[key] for key in sorted(self._entries)]
        if order == EntryOrder.FILE:
            return list(self._entries.values())
        raise ValueError(
            f"Unknown entry order '{order}' (expected one of: {', '.join(EntryOrder.CHOICES)})"
        )

    def variables(self) -> dict[str, str]:
        """Return the variables-only projection ``{key: value}``."""
        return {key: entry.value for key, entry in self._entries.items()}

    def descriptions(self) -> dict[str, str]:
        """Return ``{key: description}`` for entries that carry one."""
        return {
            key: entry.description
            for key, entry in self._entries.items()
            if entry.description
        }
