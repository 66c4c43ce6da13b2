"""Contrato de fuentes de países.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir la fuente HTTP por un stub en tests o por un archivo local.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Country


class CountrySourceError(RuntimeError):
    """La fuente no pudo entregar la lista de países."""


@runtime_checkable
class CountrySource(Protocol):
    """Contrato mínimo para una fuente de datos.

    Reglas de diseño:
    - `fetch_all` es asíncrono porque típicamente hará I/O (HTTP).
    - Cualquier fallo se reporta como `CountrySourceError`.
    """

    async def fetch_all(self) -> list[Country]:
        """Devuelve todos los países disponibles, en el orden de la fuente."""

        ...
