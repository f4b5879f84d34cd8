import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List

from countrytable.query import QueryEngine
from countrytable.records import LANGUAGES, ProjectedCountry
from countrytable.render import TableRenderer

logger = logging.getLogger(__name__)

TITLE = "List of Countries and Dependencies"


@dataclass(frozen=True)
class MenuAction:
    key: str
    label: str
    caption: str
    call: str
    query: Callable[[QueryEngine], List[ProjectedCountry]]
    group: str


def _language_action(language: str) -> MenuAction:
    return MenuAction(
        key=f"menu_{language.lower()}",
        label=language,
        caption=f"{TITLE} in {language}",
        call=f"by_language({language!r})",
        query=lambda engine: engine.by_language(language),
        group="Language",
    )


MENU_ACTIONS: List[MenuAction] = [_language_action(lang) for lang in LANGUAGES] + [
    MenuAction(
        key="menu_population_100_000_000m",
        label="Population >= 100M",
        caption=f"{TITLE} - Population greater than 100 million",
        call="by_population(100000000)",
        query=lambda engine: engine.by_population(100000000),
        group="Population",
    ),
    MenuAction(
        key="menu_population_1m_2m",
        label="Population 1M - 2M",
        caption=f"{TITLE} - Population between 1 and 2 million",
        call="by_population(1000000, 2000000)",
        query=lambda engine: engine.by_population(1000000, 2000000),
        group="Population",
    ),
    MenuAction(
        key="menu_americas_1mkm",
        label="Americas >= 1M km²",
        caption=f"{TITLE} - All countries in Americas with area greater than 1 million km²",
        call="by_area_and_continent('Americas', 1000000)",
        query=lambda engine: engine.by_area_and_continent("Americas", 1000000),
        group="Area and Continent",
    ),
    MenuAction(
        key="menu_asia_all",
        label="All of Asia",
        caption=f"{TITLE} - All countries in Asia",
        call="by_area_and_continent('Asia', 0)",
        query=lambda engine: engine.by_area_and_continent("Asia", 0),
        group="Area and Continent",
    ),
]

ACTIONS_BY_KEY: Dict[str, MenuAction] = {a.key: a for a in MENU_ACTIONS}


class MenuController:
    def __init__(self, engine: QueryEngine, renderer: TableRenderer):
        self.engine = engine
        self.renderer = renderer
        self.execution_log: List[str] = []

    def activate(self, key: str) -> List[ProjectedCountry]:
        if key not in ACTIONS_BY_KEY:
            raise KeyError(f"Unknown menu action '{key}'. Available: {list(ACTIONS_BY_KEY)}")
        action = ACTIONS_BY_KEY[key]

        start = time.time()
        countries = action.query(self.engine)
        self.renderer.render(countries)
        self.renderer.target.set_caption(action.caption)
        elapsed = (time.time() - start) * 1000

        self.execution_log.append(f"{action.call} -> {len(countries)} rows in {elapsed:.2f}ms")
        logger.info("Menu action %s rendered %d rows", key, len(countries))
        return countries
