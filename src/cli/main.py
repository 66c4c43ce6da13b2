"""Typer application: `show`, `chart`, `browse` and `doctor`.

Each command performs exactly one fetch, shapes the payload through
`core.services.country_pipeline` and hands the result to Rich components or
exporters. Fetch failures are logged and end the command with exit code 1.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html, export_report_pdf
from adapters.rest_countries import RestCountriesSource
from cli.doctor import app as doctor_app
from cli.logging_config import configure_logging
from cli.ui_components import (
    build_country_columns,
    build_header,
    build_matches_table,
    build_population_chart,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import CountriesReport, Country, CountrySummary
from core.interfaces.country_source import CountrySource, CountrySourceError
from core.services.country_pipeline import (
    build_report,
    filter_countries,
    rank_by_population,
    summarize_country,
)
from core.services.debounce import SearchState

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="World countries: search, country panels and population chart.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()

QUIT_COMMAND = ":q"


def build_source(settings: AppSettings) -> CountrySource:
    return RestCountriesSource(settings)


def _settings(ctx: typer.Context) -> AppSettings:
    obj = ctx.obj or {}
    settings = obj.get("settings")
    return settings if isinstance(settings, AppSettings) else AppSettings()


def _maybe_banner(ctx: typer.Context) -> None:
    if (ctx.obj or {}).get("banner", True):
        print_banner(_console)


def _load_countries(settings: AppSettings) -> list[Country]:
    source = build_source(settings)
    try:
        with _console.status("Loading..."):
            return asyncio.run(source.fetch_all())
    except CountrySourceError as exc:
        logger.error("%s", exc)
        _console.print(f"[red]Could not load countries:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _export(report: CountriesReport, *, json_path: Path | None, html_path: Path | None, pdf_path: Path | None) -> None:
    if json_path is not None:
        out = export_report_json(report=report, output_path=json_path)
        _console.print(f"[green]JSON saved to:[/green] {out}")
    if html_path is not None:
        out = export_report_html(report=report, output_path=html_path)
        _console.print(f"[green]HTML saved to:[/green] {out}")
    if pdf_path is not None:
        try:
            out = export_report_pdf(report=report, output_path=pdf_path)
            _console.print(f"[green]PDF saved to:[/green] {out}")
        except Exception as exc:  # WeasyPrint raises OSError/ImportError without pango
            logger.warning("PDF export failed (%s); falling back to HTML", exc)
            out = export_report_html(report=report, output_path=pdf_path.with_suffix(".html"))
            _console.print(f"[yellow]PDF export failed, HTML saved to:[/yellow] {out}")


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    settings = AppSettings()
    configure_logging(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = {"settings": settings, "banner": not no_banner}


@app.command()
def show(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter by country, capital or language."),
    top: Optional[int] = typer.Option(None, "--top", min=1, max=50, help="Countries in the chart."),
    no_panels: bool = typer.Option(False, "--no-panels", help="Do not print country panels."),
    no_chart: bool = typer.Option(False, "--no-chart", help="Do not print the population chart."),
    export_json: Optional[Path] = typer.Option(None, "--export-json", help="Write the view as JSON."),
    export_html: Optional[Path] = typer.Option(None, "--export-html", help="Write the view as an HTML page."),
    export_pdf: Optional[Path] = typer.Option(None, "--export-pdf", help="Write the view as PDF (HTML fallback)."),
) -> None:
    """Fetch all countries and print the header, matching panels and chart."""

    settings = _settings(ctx)
    _maybe_banner(ctx)

    countries = _load_countries(settings)
    report = build_report(
        countries,
        query=search,
        top_n=top or settings.top_n,
        source_url=settings.api_url,
    )

    _console.print(build_header(report))
    if not no_panels:
        if report.countries:
            _console.print(build_country_columns(report.countries))
        else:
            _console.print(f"[yellow]No countries match[/yellow] \"{search.strip()}\".")
    if not no_chart and report.ranking:
        _console.print(build_population_chart(report.ranking))

    _export(report, json_path=export_json, html_path=export_html, pdf_path=export_pdf)


@app.command()
def chart(
    ctx: typer.Context,
    top: Optional[int] = typer.Option(None, "--top", min=1, max=50, help="Countries in the chart."),
) -> None:
    """Print only the population chart (World total + most populous countries)."""

    settings = _settings(ctx)
    countries = _load_countries(settings)
    ranking = rank_by_population(countries, top or settings.top_n)
    if not ranking:
        _console.print("[yellow]No countries received.[/yellow]")
        return
    _console.print(build_population_chart(ranking))


PROMPT = "[bold cyan]search>[/bold cyan] "


def _read_line() -> str:
    return _console.input(PROMPT)


async def _browse_loop(summaries: list[CountrySummary], *, wait_seconds: float) -> None:
    reading = False

    def render(query: str) -> None:
        _console.print(build_matches_table(filter_countries(summaries, query), query=query))
        if reading:
            # The worker already printed its prompt above this table.
            _console.print(PROMPT, end="")

    state = SearchState(wait_seconds=wait_seconds, on_change=render)
    render(state.query)

    while True:
        reading = True
        try:
            line = await asyncio.to_thread(_read_line)
        except EOFError:
            break
        finally:
            reading = False
        if line.strip() == QUIT_COMMAND:
            break
        state.update(line)

    # Lines that arrived inside the debounce window still get their render.
    state.flush()


@app.command()
def browse(ctx: typer.Context) -> None:
    """Interactive search: type a query per line, `:q` (or EOF) to quit."""

    settings = _settings(ctx)
    _maybe_banner(ctx)

    countries = _load_countries(settings)
    _console.print(f"Currently, there are {len(countries)} countries in total.")
    summaries = [summarize_country(c) for c in countries]
    asyncio.run(_browse_loop(summaries, wait_seconds=settings.search_debounce_ms / 1000))


def run() -> None:
    app()
