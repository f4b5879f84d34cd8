import html
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple

from countrytable.records import ProjectedCountry

logger = logging.getLogger(__name__)

DEFAULT_FLAG_TEMPLATE = "flags/{code}.png"
HEADERS = ["Flag", "Code", "Country/Dep. Name", "Continent", "Area (Km2)", "Population", "Capital"]


@dataclass(frozen=True)
class Cell:
    value: Any
    kind: str = "text"

    @property
    def text(self) -> str:
        if self.value is None:
            return ""
        if isinstance(self.value, Mapping):
            return " / ".join(str(v) for v in self.value.values() if v)
        return str(self.value)


@dataclass(frozen=True)
class Row:
    cells: Tuple[Cell, ...]

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def texts(self) -> List[str]:
        return [c.text for c in self.cells]


class RenderTarget(Protocol):
    def clear_rows(self) -> None: ...

    def append_row(self, cells: Sequence[Cell]) -> None: ...

    def set_caption(self, text: str) -> None: ...


class HtmlTableTarget:
    """In-memory table body and caption that serialize to an HTML table."""

    def __init__(self, headers: Optional[List[str]] = None, table_id: str = "countries"):
        self.headers = list(headers or HEADERS)
        self.table_id = table_id
        self.caption = ""
        self.rows: List[Tuple[Cell, ...]] = []

    def clear_rows(self) -> None:
        self.rows = []

    def append_row(self, cells: Sequence[Cell]) -> None:
        self.rows.append(tuple(cells))

    def set_caption(self, text: str) -> None:
        self.caption = text

    @staticmethod
    def _cell_html(cell: Cell) -> str:
        if cell.kind == "image":
            return f'<td><img src="{html.escape(cell.text)}" alt="" height="20"></td>'
        return f"<td>{html.escape(cell.text)}</td>"

    def to_html(self) -> str:
        head = "".join(f"<th>{html.escape(h)}</th>" for h in self.headers)
        body = "\n".join(
            "<tr>" + "".join(self._cell_html(c) for c in row) + "</tr>"
            for row in self.rows
        )
        return (
            f'<table id="{html.escape(self.table_id)}">\n'
            f"<caption>{html.escape(self.caption)}</caption>\n"
            f"<thead><tr>{head}</tr></thead>\n"
            f'<tbody id="table-rows">\n{body}\n</tbody>\n'
            "</table>"
        )


def flag_src(code: str, template: str = DEFAULT_FLAG_TEMPLATE) -> str:
    # Flag files are named by lower-case ISO2 code, e.g. flags/ca.png
    return template.format(code=code.lower())


class TableRenderer:
    def __init__(self, target: RenderTarget, flag_template: str = DEFAULT_FLAG_TEMPLATE):
        self.target = target
        self.flag_template = flag_template

    def clear(self) -> None:
        self.target.clear_rows()

    def row_for(self, country: ProjectedCountry) -> Row:
        return Row(cells=(
            Cell(flag_src(country.code, self.flag_template), kind="image"),
            Cell(country.code),
            Cell(country.name),
            Cell(country.continent),
            Cell(country.area_in_km2),
            Cell(country.population),
            Cell(country.capital),
        ))

    def render(self, countries: Sequence[ProjectedCountry]) -> int:
        self.clear()
        for country in countries:
            self.target.append_row(self.row_for(country).cells)
        logger.debug("Rendered %d rows", len(countries))
        return len(countries)
