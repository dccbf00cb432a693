from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class CharRecord:
    """One character observed after a context, with its derived probabilities."""

    char: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.probability} {self.cumulative_probability})"


class FrequencyTable:
    """Next-character counts for a single context, in order of first appearance.

    Usage:
        table = FrequencyTable()
        for ch in "aab":
            table.record(ch)
        table.finalize()
        table.sample(0.9)  # -> "b"
    """

    def __init__(self) -> None:
        self._records: list[CharRecord] = []

    def record(self, char: str) -> None:
        """
        Count one occurrence of ``char`` after this context.

        Args:
            char: The observed next character; new characters are appended
                after those already seen
        """
        rec = self.get(char)
        if rec is not None:
            rec.count += 1
        else:
            self._records.append(CharRecord(char))

    def finalize(self) -> None:
        """Set probability and cumulative probability on every record.

        Must run once, after all observations and before any sampling.
        """

        total = self.total
        cumulative = 0.0
        for rec in self._records:
            rec.probability = rec.count / total
            cumulative += rec.probability
            rec.cumulative_probability = cumulative

    def sample(self, r: float) -> str:
        """Return the first character whose cumulative probability reaches ``r``.

        ``r`` is a uniform draw in [0, 1). If rounding leaves every threshold
        below ``r``, the first record is returned.
        """

        for rec in self._records:
            if r <= rec.cumulative_probability:
                return rec.char
        return self._records[0].char

    def get(self, char: str) -> CharRecord | None:
        """Return the record for ``char``, or None if it was never observed."""
        for rec in self._records:
            if rec.char == char:
                return rec
        return None

    @property
    def total(self) -> int:
        return sum(rec.count for rec in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CharRecord]:
        return iter(self._records)

    def __contains__(self, char: object) -> bool:
        return any(rec.char == char for rec in self._records)

    def __str__(self) -> str:
        return " ".join(str(rec) for rec in self._records)
