"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos
  (hoy: la fuente REST de países).
"""

from core.interfaces.country_source import CountrySource, CountrySourceError

__all__ = ["CountrySource", "CountrySourceError"]
