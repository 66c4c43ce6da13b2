"""Exportación de reportes.

Por qué está en adapters:
- PDF/HTML son detalles de infraestructura (WeasyPrint/Jinja2).
- El Core solo conoce el agregado `CountriesReport`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import CountriesReport, CountrySummary
from core.services.country_pipeline import matches_search

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

BAR_COLOR = "#05386B"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def chart_rows(report: CountriesReport) -> list[dict[str, object]]:
    """Filas del gráfico con el ancho de barra relativo al máximo (0..100)."""

    peak = max((entry.population for entry in report.ranking), default=0)
    rows: list[dict[str, object]] = []
    for entry in report.ranking:
        percent = (entry.population / peak * 100.0) if peak else 0.0
        rows.append(
            {
                "name": entry.name,
                "value": entry.population_display,
                "percent": round(percent, 2),
            }
        )
    return rows


def panel_rows(report: CountriesReport) -> list[tuple[CountrySummary, bool]]:
    """Todos los paneles con su visibilidad inicial según `report.query`.

    El buscador de la página filtra en el cliente, así que el HTML lleva la
    lista completa aunque el reporte venga filtrado.
    """

    summaries = report.all_countries or report.countries
    return [(s, matches_search(s, report.query)) for s in summaries]


def render_report_html(*, report: CountriesReport) -> str:
    """Renderiza un HTML autocontenido con paneles, buscador y gráfico."""

    panels = panel_rows(report)
    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        panels=panels,
        visible_count=sum(1 for _, visible in panels if visible),
        generated_at=report.generated_at.isoformat(timespec="seconds"),
        chart_rows=chart_rows(report),
        chart_title=f"Top {max(len(report.ranking) - 1, 0)} most populated countries in the world",
        bar_color=BAR_COLOR,
    )


def export_report_html(*, report: CountriesReport, output_path: Path) -> Path:
    """Exporta el agregado como HTML.

    Por qué existe:
    - Es la vista completa (equivalente a la página original) y sirve como
      fallback cuando el render PDF no está soportado por el entorno.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_report_html(report=report), encoding="utf-8")
    return output_path


def export_report_pdf(*, report: CountriesReport, output_path: Path) -> Path:
    """Exporta el agregado como PDF.

    Diseño:
    - WeasyPrint se importa aquí: necesita librerías nativas (pango) que no
      hacen falta para HTML/JSON.
    """

    from weasyprint import HTML  # noqa: PLC0415

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_report_html(report=report)
    HTML(string=html, base_url=str(_TEMPLATES_DIR)).write_pdf(str(output_path))
    logger.info("wrote PDF report to %s", output_path)
    return output_path
