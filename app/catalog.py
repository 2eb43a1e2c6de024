# app/catalog.py
# The fixed language catalog and the queries the language pages run against it.
# Built once by the app factory and shared read-only between requests.
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

# Languages before this year are "old", from this year onwards "new".
PARTITION_YEAR = 1970


@dataclass(frozen=True)
class Language:
    name: str
    year: int


@dataclass(frozen=True)
class YearRange:
    """
    Optional inclusive lower bound and optional exclusive upper bound on `year`.
    With neither bound set the range accepts every language.
    """
    from_inclusive: int | None = None
    to_exclusive: int | None = None

    def matches(self, language: Language) -> bool:
        if self.from_inclusive is not None and language.year < self.from_inclusive:
            return False
        if self.to_exclusive is not None and language.year >= self.to_exclusive:
            return False
        return True

    def headline(self) -> str:
        """Human-readable label for the listing page."""
        lo, hi = self.from_inclusive, self.to_exclusive
        if lo is not None and hi is not None:
            return f"Languages from year {lo} (inclusive) to {hi} (exclusive)"
        if lo is not None:
            return f"Languages from year {lo} and onwards"
        if hi is not None:
            return f"Languages before year {hi}"
        return "Languages from any year"


@dataclass(frozen=True)
class Partition:
    old: tuple[Language, ...]
    new: tuple[Language, ...]


# --- default catalog, in declaration order ---
LANGUAGES: tuple[Language, ...] = (
    Language("FORTRAN", 1954),
    Language("LISP", 1958),
    Language("COBOL", 1959),
    Language("ALGOL 60", 1960),
    Language("Prolog", 1972),
    Language("ML", 1973),
)


class LanguageCatalog:
    """
    Read-only, ordered collection of languages.
    Every query preserves catalog order; an empty result is never an error.
    """

    def __init__(self, languages: Iterable[Language] = LANGUAGES):
        self._languages = tuple(languages)
        self._partition = Partition(
            old=tuple(lang for lang in self._languages if lang.year < PARTITION_YEAR),
            new=tuple(lang for lang in self._languages if lang.year >= PARTITION_YEAR),
        )

    def __len__(self) -> int:
        return len(self._languages)

    def all(self) -> tuple[Language, ...]:
        return self._languages

    def by_year(self, year: int) -> tuple[Language, ...]:
        return tuple(lang for lang in self._languages if lang.year == year)

    def by_range(self, year_range: YearRange) -> tuple[Language, ...]:
        # Inverted bounds (from >= to) simply match nothing.
        return tuple(lang for lang in self._languages if year_range.matches(lang))

    def partition(self) -> Partition:
        return self._partition
