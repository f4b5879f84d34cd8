import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from countrytable.csv_parser import read_columns, to_number
from countrytable.errors import DatasetError
from countrytable.records import DEFAULT_LANGUAGE, LANGUAGES, CountryRecord
from countrytable.table import ColumnTable

logger = logging.getLogger(__name__)

NAME_PREFIX = "name_"
REQUIRED_COLUMNS = ["code", "continent", "areaInKm2", "population", "capital", NAME_PREFIX + DEFAULT_LANGUAGE]


def _number(value: Any, field: str, code: Any) -> Union[int, float]:
    if isinstance(value, str) or value is None:
        try:
            value = to_number(value)
        except ValueError:
            raise DatasetError(f"{code}: {field} is not a number: {value!r}") from None
    if value is None:
        raise DatasetError(f"{code}: {field} is missing")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DatasetError(f"{code}: {field} is not a number: {value!r}")
    if not math.isfinite(value):
        raise DatasetError(f"{code}: {field} must be a finite number, got {value}")
    if value < 0:
        raise DatasetError(f"{code}: {field} must be non-negative, got {value}")
    return value


def record_from_dict(item: Mapping[str, Any]) -> CountryRecord:
    """Build a record from an object shaped like the published dataset.

    ``item`` uses the dataset's own keys (``code``, ``continent``,
    ``areaInKm2``, ``population``, ``capital``, ``name``) where ``name`` maps
    language labels to localized names and must include English.
    """
    code = item.get("code")
    if not code:
        raise DatasetError(f"Record without a code: {dict(item)!r}")

    names = dict(item.get("name") or {})
    if not names.get(DEFAULT_LANGUAGE):
        raise DatasetError(f"{code}: {DEFAULT_LANGUAGE} name is required")

    population = _number(item.get("population"), "population", code)
    if population != int(population):
        raise DatasetError(f"{code}: population must be a whole number, got {population}")

    return CountryRecord(
        code=str(code),
        continent=item.get("continent"),
        area_in_km2=_number(item.get("areaInKm2"), "areaInKm2", code),
        population=int(population),
        capital=item.get("capital"),
        name=names,
    )


def records_from_dicts(items: Iterable[Mapping[str, Any]]) -> Tuple[CountryRecord, ...]:
    records = []
    seen = set()
    for item in items:
        record = record_from_dict(item)
        if record.code in seen:
            raise DatasetError(f"Duplicate country code: {record.code}")
        seen.add(record.code)
        records.append(record)
    return tuple(records)


def records_from_table(table: ColumnTable) -> Tuple[CountryRecord, ...]:
    missing = table.missing(REQUIRED_COLUMNS)
    if missing:
        raise DatasetError(
            "Dataset is missing required columns: " + ", ".join(missing)
            + f". Available: {table.columns}"
        )

    name_columns = [NAME_PREFIX + lang for lang in LANGUAGES if NAME_PREFIX + lang in table.columns]
    extra = [c for c in table.columns if c.startswith(NAME_PREFIX) and c not in name_columns]
    if extra:
        logger.warning("Ignoring unsupported language columns: %s", ", ".join(extra))

    # Rows with every cell blank come from trailing separators in spreadsheet exports
    blank = [all(v is None for v in row.values()) for row in table.rows()]
    if any(blank):
        logger.debug("Skipping %d blank rows", sum(blank))
        table = table.filter([not b for b in blank])

    items: List[Dict[str, Any]] = []
    for row in table.select(REQUIRED_COLUMNS[:-1] + name_columns).rows():
        item = {k: v for k, v in row.items() if not k.startswith(NAME_PREFIX)}
        item["name"] = {c[len(NAME_PREFIX):]: row[c] for c in name_columns}
        items.append(item)
    return records_from_dicts(items)


def load_dataset(csv_path: Union[str, Path], separator: str = ",") -> Tuple[CountryRecord, ...]:
    try:
        table = ColumnTable(read_columns(csv_path, separator=separator))
    except ValueError as e:
        raise DatasetError(f"Could not parse {csv_path}: {e}") from e

    records = records_from_table(table)
    logger.info("Loaded %d countries from %s (%d rows read)", len(records), csv_path, len(table))
    return records
