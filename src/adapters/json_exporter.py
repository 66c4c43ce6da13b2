"""Exportación JSON de la vista de países.

Guarda exactamente lo que muestra `show`: los paneles que pasaron la búsqueda
(ya normalizados, con "Not Found" donde falta el dato) y el ranking con la
fila "World". La lista completa sin filtrar no se incluye.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import CountriesReport


def export_report_json(*, report: CountriesReport, output_path: Path) -> Path:
    """Escribe el reporte como JSON UTF-8 (indentado, claves ordenadas)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
