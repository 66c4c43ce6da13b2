"""Settings de world-countries.

Todo se lee de variables `WORLD_COUNTRIES_*`: primero un `.env` en el
directorio actual y luego el `.env` del usuario, que es donde
`doctor set-api-url` guarda un endpoint alternativo (p.ej. un mirror de
REST Countries).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_DIR_NAME = "world-countries"
DEFAULT_API_URL = "https://restcountries.com/v3.1/all"
DEFAULT_API_FIELDS = "name,capital,region,population,languages,flags,currencies"


def get_user_config_dir() -> Path:
    """Carpeta `world-countries` dentro del directorio de config del sistema."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Mezcla `values` en el .env del usuario; los `None` se ignoran."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# world-countries user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Endpoint, timeouts, tamaño del ranking y debounce de búsqueda.

    Los límites (`top_n` 1..50, `search_debounce_ms` 0..5000) se validan al
    leer el entorno, antes de que la CLI haga la petición.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORLD_COUNTRIES_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default=DEFAULT_API_URL,
        min_length=8,
        description="Endpoint REST que devuelve el array de países.",
    )
    api_fields: str | None = Field(
        default=DEFAULT_API_FIELDS,
        description="Filtro `fields` enviado al endpoint (vacío = sin filtro).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="world-countries/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )

    top_n: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Cantidad de países en el ranking de población (sin contar 'World').",
    )
    search_debounce_ms: int = Field(
        default=50,
        ge=0,
        le=5000,
        description="Espera del debounce de búsqueda interactiva (milisegundos).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (DEBUG, INFO, WARNING, ERROR).",
    )
