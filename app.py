import logging
from pathlib import Path
from typing import Optional, Tuple

import streamlit as st

from countrytable import config
from countrytable.charts import population_chart
from countrytable.dataset import load_dataset
from countrytable.errors import DatasetError
from countrytable.menu import ACTIONS_BY_KEY, MENU_ACTIONS, TITLE, MenuController
from countrytable.query import QueryEngine
from countrytable.records import CountryRecord
from countrytable.render import HtmlTableTarget, TableRenderer

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("countrytable.app")

st.set_page_config(
    page_title=TITLE,
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2rem;
        font-weight: 600;
        margin-bottom: 0.5rem;
    }

    #countries {
        width: 100%;
        border-collapse: collapse;
    }

    #countries caption {
        caption-side: top;
        text-align: left;
        font-size: 1.2rem;
        font-weight: 600;
        padding: 0.5rem 0;
    }

    #countries th, #countries td {
        border-bottom: 1px solid rgba(128, 128, 128, 0.3);
        padding: 0.3rem 0.6rem;
        text-align: left;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def _load_records_once(csv_path: Path) -> Tuple[Optional[Tuple[CountryRecord, ...]], Optional[str]]:
    try:
        with st.spinner(f"Loading {csv_path.name}..."):
            return load_dataset(csv_path), None
    except FileNotFoundError:
        return None, f"Dataset file not found at: {csv_path}"
    except DatasetError as e:
        return None, f"Dataset is malformed: {e}"
    except Exception as e:
        logger.exception("Unexpected failure loading %s", csv_path)
        return None, f"Failed to load or process data: {e}"


RECORDS, LOAD_ERROR = _load_records_once(config.DATA_FILE)
if RECORDS is None:
    logger.error(LOAD_ERROR)
    st.error(LOAD_ERROR)
    st.stop()

if "menu_action" not in st.session_state:
    st.session_state["menu_action"] = (
        config.DEFAULT_MENU_ACTION if config.DEFAULT_MENU_ACTION in ACTIONS_BY_KEY else MENU_ACTIONS[0].key
    )

with st.sidebar:
    st.header("Menu")
    current_group = None
    for action in MENU_ACTIONS:
        if action.group != current_group:
            current_group = action.group
            st.subheader(current_group)
        if st.button(action.label, key=action.key, use_container_width=True):
            st.session_state["menu_action"] = action.key

    st.markdown("---")
    show_chart = st.checkbox("Show Population Chart", value=False, key="show_chart")
    show_execution_log = st.checkbox("Show Execution Log", value=False, key="show_execution_log", help="Display the queries run for each menu action")

st.markdown(f'<h1 class="main-header">{TITLE}</h1>', unsafe_allow_html=True)

target = HtmlTableTarget()
controller = MenuController(QueryEngine(RECORDS), TableRenderer(target, flag_template=config.FLAG_URL_TEMPLATE))

countries = controller.activate(st.session_state["menu_action"])

st.caption(f"{len(countries)} of {len(RECORDS)} countries and dependencies")

if show_chart and countries:
    st.plotly_chart(population_chart(countries, title=target.caption), use_container_width=True)

if countries:
    st.markdown(target.to_html(), unsafe_allow_html=True)
else:
    st.markdown(f"### {target.caption}")
    st.info("No countries match this selection.")

if show_execution_log and controller.execution_log:
    st.markdown("---")
    with st.expander("Execution Log", expanded=True):
        for i, log_entry in enumerate(controller.execution_log, 1):
            st.text(f"{i}. {log_entry}")
