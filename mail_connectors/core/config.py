# mail_connectors/core/config.py

from dotenv import load_dotenv
import os

load_dotenv()

VERSION = "0.2.0"

DEFAULT_MAILGUN_API_BASE = "api.mailgun.net/v3"
DEFAULT_HTTP_TIMEOUT = 10.0


def get_mailgun_api_key() -> str:
    key = os.getenv("MAILGUN_API_KEY")
    if not key:
        raise RuntimeError("MAILGUN_API_KEY manquante. Définir la var d'environnement ou la passer au client.")
    return key


def get_mailgun_domain() -> str:
    domain = os.getenv("MAILGUN_DOMAIN")
    if not domain:
        raise RuntimeError("MAILGUN_DOMAIN manquant. Définir la var d'environnement ou le passer au client.")
    return domain


def get_mailgun_api_base() -> str:
    """Hôte + version de l'API (ex: api.eu.mailgun.net/v3 pour la région EU)."""
    return os.getenv("MAILGUN_API_BASE") or DEFAULT_MAILGUN_API_BASE


def get_http_timeout() -> float:
    value = os.getenv("MAILGUN_HTTP_TIMEOUT")
    if not value:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return float(value)
    except ValueError:
        raise RuntimeError(f"MAILGUN_HTTP_TIMEOUT invalide : {value!r} (nombre de secondes attendu).")
