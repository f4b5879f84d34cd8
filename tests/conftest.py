import pytest

from countrytable.dataset import records_from_dicts
from countrytable.query import QueryEngine
from countrytable.render import HtmlTableTarget, TableRenderer

SAMPLE = [
    {
        "code": "CA", "continent": "Americas", "areaInKm2": 9984670, "population": 36624199,
        "capital": "Ottawa",
        "name": {
            "English": "Canada", "Arabic": "كندا", "Chinese": "加拿大", "French": "Canada",
            "Hindi": "कनाडा", "Korean": "캐나다", "Japanese": "カナダ", "Russian": "Канада",
        },
    },
    {
        "code": "BH", "continent": "Asia", "areaInKm2": 765, "population": 1492584,
        "capital": "Manama", "name": {"English": "Bahrain", "Arabic": "البحرين"},
    },
    {
        "code": "IN", "continent": "Asia", "areaInKm2": 3287263, "population": 1339180127,
        "capital": "New Delhi", "name": {"English": "India", "Hindi": "भारत", "French": "Inde"},
    },
    {
        "code": "EE", "continent": "Europe", "areaInKm2": 45227, "population": 1309632,
        "capital": "Tallinn", "name": {"English": "Estonia", "French": "Estonie"},
    },
    {
        "code": "US", "continent": "Americas", "areaInKm2": 9629091, "population": 325719178,
        "capital": "Washington, D.C.", "name": {"English": "United States", "French": "États-Unis"},
    },
    {
        "code": "JM", "continent": "Americas", "areaInKm2": 10991, "population": 2890299,
        "capital": "Kingston", "name": {"English": "Jamaica"},
    },
]


@pytest.fixture
def records():
    return records_from_dicts(SAMPLE)


@pytest.fixture
def engine(records):
    return QueryEngine(records)


@pytest.fixture
def target():
    return HtmlTableTarget()


@pytest.fixture
def renderer(target):
    return TableRenderer(target)
