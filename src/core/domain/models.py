"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los registros de la API traen campos opcionales/heterogéneos; el modelo
  crudo los acepta tal cual y la normalización vive en `core.services`.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CountryName(BaseModel):
    model_config = ConfigDict(extra="ignore")

    common: str = Field(
        ...,
        min_length=1,
        description="Nombre común del país (p.ej. 'Germany').",
    )
    official: str | None = Field(
        default=None,
        description="Nombre oficial (p.ej. 'Federal Republic of Germany').",
    )


class CountryFlags(BaseModel):
    model_config = ConfigDict(extra="ignore")

    svg: str | None = None
    png: str | None = None
    alt: str | None = None


class Currency(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    symbol: str | None = None


class Country(BaseModel):
    """Registro de país tal como lo entrega REST Countries (v3.1).

    Todos los campos salvo `name` son opcionales: territorios sin capital,
    sin idiomas o sin moneda aparecen con `null` o directamente sin la clave.
    """

    model_config = ConfigDict(extra="ignore")

    name: CountryName
    capital: list[str] | str | None = Field(
        default=None,
        description="Capital(es). La API entrega una lista; algunos mirrors un string.",
    )
    region: str | None = None
    population: int | None = Field(default=None, ge=0)
    languages: dict[str, str] | None = Field(
        default=None,
        description="Código ISO 639-3 -> nombre del idioma, en orden de la API.",
    )
    flags: CountryFlags | None = None
    currencies: dict[str, Currency] | None = Field(
        default=None,
        description="Código ISO 4217 -> moneda.",
    )


class CountrySummary(BaseModel):
    """Panel de un país listo para mostrar (strings ya normalizados)."""

    name: str
    flag_url: str | None = None
    capital: str
    region: str
    population: int | None = None
    population_display: str
    languages: str
    languages_label: str
    currencies: str
    currencies_label: str

    search_text: str = Field(
        default="",
        exclude=True,
        description="Texto en minúsculas sobre el que se aplica la búsqueda.",
    )


class PopulationEntry(BaseModel):
    name: str
    population: int = Field(..., ge=0)
    population_display: str


class CountriesReport(BaseModel):
    """Agregado principal: todo lo necesario para renderizar/exportar una vista.

    Por qué un agregado:
    - La CLI y los exportadores (JSON/HTML/PDF) consumen la misma estructura.
    """

    total_countries: int = Field(
        ...,
        ge=0,
        description="Cantidad total de países recibidos (sin filtrar).",
    )
    query: str = Field(
        default="",
        description="Texto de búsqueda aplicado a `countries`.",
    )
    countries: list[CountrySummary] = Field(
        default_factory=list,
        description="Paneles que coinciden con la búsqueda, en orden de la API.",
    )
    all_countries: list[CountrySummary] = Field(
        default_factory=list,
        exclude=True,
        description="Todos los paneles sin filtrar (la página HTML filtra en el cliente).",
    )
    ranking: list[PopulationEntry] = Field(
        default_factory=list,
        description="Fila 'World' seguida de los países más poblados.",
    )
    source_url: str = Field(
        default="",
        description="Endpoint del que se obtuvieron los datos.",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación (UTC).",
    )
