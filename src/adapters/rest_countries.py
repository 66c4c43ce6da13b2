"""Fuente de países: REST Countries.

- Una única petición GET al endpoint configurado (`/v3.1/all` por defecto).
- Sin autenticación, paginación ni reintentos.
- Los registros que no validan se descartan con un warning; el resto sigue.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import Country
from core.interfaces.country_source import CountrySource, CountrySourceError

logger = logging.getLogger(__name__)


class RestCountriesSource(CountrySource):
    """Descarga y valida la lista completa de países."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._settings.api_url

    def _params(self) -> dict[str, str]:
        fields = (self._settings.api_fields or "").strip()
        return {"fields": fields} if fields else {}

    async def fetch_all(self) -> list[Country]:
        logger.info("fetching countries from %s", self.url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.get(self.url, params=self._params())
        except httpx.HTTPError as exc:
            raise CountrySourceError(f"Request to {self.url} failed: {exc}") from exc

        if not resp.is_success:
            raise CountrySourceError(
                f"Request to {self.url} failed with status code {resp.status_code}"
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise CountrySourceError(f"Response from {self.url} is not valid JSON") from exc

        countries = parse_countries(payload)
        logger.info("received %d countries", len(countries))
        return countries


def parse_countries(payload: Any) -> list[Country]:
    """Valida el array crudo de la API, saltando registros inválidos."""

    if not isinstance(payload, list):
        raise CountrySourceError(
            f"Expected a JSON array of countries, got {type(payload).__name__}"
        )

    countries: list[Country] = []
    for index, raw in enumerate(payload):
        try:
            countries.append(Country.model_validate(raw))
        except ValidationError as exc:
            logger.warning(
                "skipping country record #%d: %d validation error(s)",
                index,
                exc.error_count(),
            )
    return countries
