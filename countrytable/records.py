from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

LANGUAGES = ("English", "Arabic", "Chinese", "French", "Hindi", "Korean", "Japanese", "Russian")
DEFAULT_LANGUAGE = "English"

NameMapping = Mapping[str, Optional[str]]


@dataclass(frozen=True)
class CountryRecord:
    code: str
    continent: str
    area_in_km2: Union[int, float]
    population: int
    capital: Optional[str]
    name: NameMapping = field(hash=False)

    def __post_init__(self):
        # Read-only view so callers cannot edit translations in place
        if not isinstance(self.name, MappingProxyType):
            object.__setattr__(self, "name", MappingProxyType(dict(self.name)))

    def name_in(self, language: str) -> Optional[str]:
        return self.name.get(language)


@dataclass(frozen=True)
class ProjectedCountry:
    """A country record with its name resolved for one language.

    ``name`` is a plain string for a resolved projection, ``None`` when the
    record has no translation for the requested language, and the original
    name mapping when the caller asked for no resolution at all.
    """

    code: str
    continent: str
    area_in_km2: Union[int, float]
    population: int
    capital: Optional[str]
    name: Union[str, NameMapping, None] = field(hash=False)

    @classmethod
    def from_record(cls, record: CountryRecord, language: Optional[str] = DEFAULT_LANGUAGE) -> "ProjectedCountry":
        name = record.name_in(language) if language else record.name
        return cls(
            code=record.code,
            continent=record.continent,
            area_in_km2=record.area_in_km2,
            population=record.population,
            capital=record.capital,
            name=name,
        )
