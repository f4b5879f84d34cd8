import os
from pathlib import Path

PROJECT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_DIR / "data"
DEFAULT_DATA_FILE = os.getenv("COUNTRIES_DATA_FILE", "countries.csv")
DATA_FILE = DATA_DIR / DEFAULT_DATA_FILE

# flagcdn.com serves PNG flags named by lower-case ISO2 code
DEFAULT_FLAG_URL_TEMPLATE = "https://flagcdn.com/w40/{code}.png"
FLAG_URL_TEMPLATE = os.getenv("FLAG_URL_TEMPLATE", DEFAULT_FLAG_URL_TEMPLATE)
DEFAULT_MENU_ACTION = os.getenv("DEFAULT_MENU_ACTION", "menu_english")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
