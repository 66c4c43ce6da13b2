from __future__ import annotations

import copy

import pytest

from core.domain.models import Country


def _country(name, population, capital, languages, currencies, region="Asia"):
    record = {
        "name": {"common": name, "official": name, "nativeName": {}},
        "region": region,
        "population": population,
        "flags": {
            "png": f"https://flagcdn.com/w320/{name[:2].lower()}.png",
            "svg": f"https://flagcdn.com/{name[:2].lower()}.svg",
        },
    }
    if capital is not None:
        record["capital"] = capital
    if languages is not None:
        record["languages"] = languages
    if currencies is not None:
        record["currencies"] = {
            code: {"name": label, "symbol": "$"} for code, label in currencies.items()
        }
    return record


_PAYLOAD = [
    _country("China", 1402112000, ["Beijing"], {"zho": "Chinese"}, {"CNY": "Chinese yuan"}),
    _country("Japan", 125836021, ["Tokyo"], {"jpn": "Japanese"}, {"JPY": "Japanese yen"}),
    _country(
        "India",
        1380004385,
        ["New Delhi"],
        {"eng": "English", "hin": "Hindi", "tam": "Tamil"},
        {"INR": "Indian rupee"},
    ),
    _country(
        "United States",
        329484123,
        ["Washington D.C."],
        {"eng": "English"},
        {"USD": "United States dollar"},
        region="Americas",
    ),
    _country("Indonesia", 273523621, ["Jakarta"], {"ind": "Indonesian"}, {"IDR": "Indonesian rupiah"}),
    _country(
        "Pakistan",
        220892331,
        ["Islamabad"],
        {"eng": "English", "urd": "Urdu"},
        {"PKR": "Pakistani rupee"},
    ),
    _country(
        "Brazil",
        212559409,
        ["Brasília"],
        {"por": "Portuguese"},
        {"BRL": "Brazilian real"},
        region="Americas",
    ),
    _country("Nigeria", 206139587, ["Abuja"], {"eng": "English"}, {"NGN": "Nigerian naira"}, region="Africa"),
    _country("Bangladesh", 164689383, ["Dhaka"], {"ben": "Bengali"}, {"BDT": "Bangladeshi taka"}),
    _country("Russia", 144104080, ["Moscow"], {"rus": "Russian"}, {"RUB": "Russian ruble"}, region="Europe"),
    _country(
        "Mexico",
        128932753,
        ["Mexico City"],
        {"spa": "Spanish"},
        {"MXN": "Mexican peso"},
        region="Americas",
    ),
    _country(
        "South Africa",
        59308690,
        ["Pretoria", "Bloemfontein", "Cape Town"],
        {"afr": "Afrikaans", "eng": "English", "zul": "Zulu"},
        {"ZAR": "South African rand"},
        region="Africa",
    ),
    _country("Antarctica", 1000, None, None, None, region="Antarctic"),
    _country(
        "Panama",
        4314768,
        ["Panama City"],
        {"spa": "Spanish"},
        {"PAB": "Panamanian balboa", "USD": "United States dollar"},
        region="Americas",
    ),
]

WORLD_TOTAL = 4651902151


@pytest.fixture
def countries_payload() -> list[dict]:
    return copy.deepcopy(_PAYLOAD)


@pytest.fixture
def countries(countries_payload) -> list[Country]:
    return [Country.model_validate(raw) for raw in countries_payload]


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    # Keep the developer's own .env files out of the tests.
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    for key in ("API_URL", "API_FIELDS", "TOP_N", "SEARCH_DEBOUNCE_MS", "LOG_LEVEL"):
        monkeypatch.delenv(f"WORLD_COUNTRIES_{key}", raising=False)
