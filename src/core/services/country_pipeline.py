"""Country data-shaping utilities.

Everything the UI layers show goes through these helpers: raw API records
are normalized into display strings, filtered by the search box, and ranked
for the population chart. Nothing here performs I/O or printing, so the same
pipeline backs the terminal views and every exporter.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from core.domain.models import (
    CountriesReport,
    Country,
    CountrySummary,
    Currency,
    PopulationEntry,
)

NOT_FOUND = "Not Found"
WORLD_LABEL = "World"
DEFAULT_TOP_N = 10


def format_population(value: int | None) -> str:
    """Group digits the en-US way (``1234567`` -> ``"1,234,567"``)."""

    if value is None:
        return NOT_FOUND
    return f"{value:,}"


def capital_text(capital: Sequence[str] | str | None) -> str:
    if capital is None:
        return NOT_FOUND
    if isinstance(capital, str):
        return capital.strip() or NOT_FOUND
    parts = [c.strip() for c in capital if c and c.strip()]
    return ", ".join(parts) if parts else NOT_FOUND


def languages_text(languages: Mapping[str, str] | None) -> str:
    if not languages:
        return NOT_FOUND
    names = [name for name in languages.values() if name]
    return ", ".join(names) if names else NOT_FOUND


def currencies_text(currencies: Mapping[str, Currency] | None) -> str:
    if not currencies:
        return NOT_FOUND
    names = [c.name for c in currencies.values() if c is not None and c.name]
    return ", ".join(names) if names else NOT_FOUND


def plural_label(singular: str, plural: str, count: int) -> str:
    return plural if count > 1 else singular


def _flag_url(country: Country) -> str | None:
    if country.flags is None:
        return None
    return country.flags.svg or country.flags.png or None


def _search_text(name: str, capital: str, languages: str) -> str:
    # Placeholders are display-only; searching "not found" must not match them.
    parts = [name]
    parts.extend(value for value in (capital, languages) if value != NOT_FOUND)
    return "\n".join(parts).lower()


def summarize_country(country: Country) -> CountrySummary:
    """Turn one raw record into a display-ready panel."""

    name = country.name.common
    capital = capital_text(country.capital)
    languages = languages_text(country.languages)
    currencies = currencies_text(country.currencies)

    return CountrySummary(
        name=name,
        flag_url=_flag_url(country),
        capital=capital,
        region=country.region or NOT_FOUND,
        population=country.population,
        population_display=format_population(country.population),
        languages=languages,
        languages_label=plural_label("Language", "Languages", len(country.languages or {})),
        currencies=currencies,
        currencies_label=plural_label("Currency", "Currencies", len(country.currencies or {})),
        search_text=_search_text(name, capital, languages),
    )


def matches_search(summary: CountrySummary, query: str) -> bool:
    """Case-insensitive substring match on name, capital and languages."""

    needle = query.strip().lower()
    if not needle:
        return True
    return needle in summary.search_text


def filter_countries(summaries: Iterable[CountrySummary], query: str) -> list[CountrySummary]:
    return [s for s in summaries if matches_search(s, query)]


def rank_by_population(
    countries: Sequence[Country],
    top_n: int = DEFAULT_TOP_N,
) -> list[PopulationEntry]:
    """Build the chart rows: a synthesized World total, then the top ``top_n``.

    The World row sums the full list (missing populations count as 0). Ties
    keep the source order because ``sorted`` is stable.
    """

    if not countries:
        return []
    if top_n < 1:
        raise ValueError("top_n must be >= 1")

    rows = [(c.name.common, c.population or 0) for c in countries]
    world_population = sum(population for _, population in rows)
    ranked = sorted(rows, key=lambda row: row[1], reverse=True)[:top_n]

    entries = [
        PopulationEntry(
            name=WORLD_LABEL,
            population=world_population,
            population_display=format_population(world_population),
        )
    ]
    for name, population in ranked:
        entries.append(
            PopulationEntry(
                name=name,
                population=population,
                population_display=format_population(population),
            )
        )
    return entries


def build_report(
    countries: Sequence[Country],
    *,
    query: str = "",
    top_n: int = DEFAULT_TOP_N,
    source_url: str = "",
) -> CountriesReport:
    """Shape a fetched list into the aggregate every view renders.

    The ranking always covers the whole list; only the panels follow the
    search query.
    """

    summaries = [summarize_country(c) for c in countries]
    return CountriesReport(
        total_countries=len(countries),
        query=query,
        countries=filter_countries(summaries, query),
        all_countries=summaries,
        ranking=rank_by_population(countries, top_n),
        source_url=source_url,
    )
