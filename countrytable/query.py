import logging
import math
from typing import Iterable, List, Optional, Union

from countrytable.errors import ValidationError
from countrytable.records import DEFAULT_LANGUAGE, LANGUAGES, CountryRecord, ProjectedCountry

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _non_negative(value: Number, label: str) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValidationError(f"{label} must be finite, got {value}")
    if value < 0:
        raise ValidationError(f"{label} must be non-negative, got {value}")
    return value


class QueryEngine:
    """Read-only views over a fixed tuple of country records.

    Every query builds fresh ``ProjectedCountry`` values, so the records held
    in ``all`` are never modified. The filtering queries return matches in
    the reverse of dataset order: each match goes to the front of the result.
    """

    def __init__(self, records: Iterable[CountryRecord]):
        self.all = tuple(records)

    def __len__(self) -> int:
        return len(self.all)

    def by_language(self, language: Optional[str] = DEFAULT_LANGUAGE) -> List[ProjectedCountry]:
        # A falsy language keeps the whole name mapping on each row
        if language and language not in LANGUAGES:
            raise ValidationError(f"Unsupported language {language!r}. Supported: {', '.join(LANGUAGES)}")

        projected = [ProjectedCountry.from_record(record, language) for record in self.all]
        if language:
            untranslated = sum(1 for p in projected if p.name is None)
            if untranslated:
                logger.debug("%d of %d countries have no %s name", untranslated, len(projected), language)
        return projected

    def by_population(self, min_population: Number, max_population: Optional[Number] = None) -> List[ProjectedCountry]:
        _non_negative(min_population, "min_population")
        if max_population is not None:
            _non_negative(max_population, "max_population")

        # max_population of 0 counts as "no upper bound"
        if max_population:
            def keep(c: ProjectedCountry) -> bool:
                return min_population <= c.population <= max_population
        else:
            def keep(c: ProjectedCountry) -> bool:
                return c.population >= min_population

        matches = [c for c in self.by_language(DEFAULT_LANGUAGE) if keep(c)]
        matches.reverse()
        return matches

    def by_area_and_continent(self, continent: str, min_area: Number) -> List[ProjectedCountry]:
        _non_negative(min_area, "min_area")

        matches = [
            c for c in self.by_language(DEFAULT_LANGUAGE)
            if c.continent == continent and c.area_in_km2 >= min_area
        ]
        if not matches:
            logger.debug("No countries in %r with area >= %s", continent, min_area)
        matches.reverse()
        return matches
