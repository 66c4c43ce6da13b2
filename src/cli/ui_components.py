"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `show`, `chart` y `browse`.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CountriesReport, CountrySummary, PopulationEntry


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Permite desactivar banner en modos no interactivos (`--no-banner`).
    """

    title = Text("World Countries Data", style="bold cyan")
    subtitle = Text("Search • Country panels • Population chart", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_header(report: CountriesReport) -> Text:
    text = Text(f"Currently, there are {report.total_countries} countries in total.")
    if report.query.strip():
        text.append(
            f"\n{len(report.countries)} match \"{report.query.strip()}\".",
            style="dim",
        )
    return text


def build_country_panel(summary: CountrySummary) -> Panel:
    """Panel de un país (equivalente a la tarjeta de la página web)."""

    body = Text()
    rows = (
        ("Capital", summary.capital),
        (summary.languages_label, summary.languages),
        ("Population", summary.population_display),
        (summary.currencies_label, summary.currencies),
    )
    for index, (label, value) in enumerate(rows):
        if index:
            body.append("\n")
        body.append(f"{label}: ", style="bold")
        body.append(value)

    return Panel(
        body,
        title=Text(summary.name, style="bold cyan"),
        border_style="cyan",
        width=38,
    )


def build_country_columns(summaries: Sequence[CountrySummary]) -> Columns:
    return Columns([build_country_panel(s) for s in summaries], equal=True)


def build_population_chart(
    entries: Sequence[PopulationEntry],
    *,
    bar_width: int = 40,
) -> Table:
    """Gráfico de barras horizontal: 'World' + países más poblados."""

    top_n = max(len(entries) - 1, 0)
    table = Table(
        title=f"Top {top_n} most populated countries in the world",
        show_header=False,
        box=None,
        padding=(0, 1),
    )
    table.add_column("Country", style="cyan", no_wrap=True)
    table.add_column("Bar", no_wrap=True)
    table.add_column("Population", justify="right", no_wrap=True)

    peak = max((e.population for e in entries), default=0)
    for entry in entries:
        length = round(entry.population / peak * bar_width) if peak else 0
        bar = Text("█" * max(length, 1 if entry.population else 0), style="blue")
        table.add_row(entry.name, bar, entry.population_display)
    return table


def build_matches_table(summaries: Sequence[CountrySummary], *, query: str) -> Table:
    """Tabla compacta para la búsqueda interactiva."""

    title = f"{len(summaries)} countries" if not query.strip() else f"{len(summaries)} matches for \"{query.strip()}\""
    table = Table(title=title)
    table.add_column("Country", style="cyan", no_wrap=True)
    table.add_column("Capital", style="white")
    table.add_column("Languages", style="green")
    table.add_column("Population", justify="right", style="magenta")
    for s in summaries:
        table.add_row(s.name, s.capital, s.languages, s.population_display)
    return table
