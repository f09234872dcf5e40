"""
Configuration — variables d'environnement lues à l'appel (pas au chargement du module).

PUMPKIN_JSON_PRETTY     "1" → JSON indenté (défaut), "0" → compact
PUMPKIN_JSON_INDENT     indentation quand PRETTY est actif (défaut 2)
PUMPKIN_LOG_LEVEL       niveau du logger racine (défaut INFO)
PUMPKIN_BUILT_WITH_URL  lien "Built with" du footer
"""
import logging
import os

from pydantic import BaseModel, ConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    json_pretty: bool = True
    json_indent: int = 2
    log_level: str = "INFO"
    built_with_url: str = "https://github.com/pumpkin-cms"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def get_settings() -> Settings:
    """Snapshot des réglages courants."""
    try:
        indent = int(os.getenv("PUMPKIN_JSON_INDENT", "2"))
    except ValueError:
        indent = 2
    return Settings(
        json_pretty=_env_bool("PUMPKIN_JSON_PRETTY", "1"),
        json_indent=max(indent, 0),
        log_level=os.getenv("PUMPKIN_LOG_LEVEL", "INFO").upper(),
        built_with_url=os.getenv("PUMPKIN_BUILT_WITH_URL", Settings().built_with_url),
    )


def configure_logging(level: str | None = None) -> None:
    """basicConfig au format de l'application hôte (à appeler une fois au démarrage)."""
    logging.basicConfig(level=level or get_settings().log_level, format=LOG_FORMAT)
