# mail_connectors/mailgun/decoder.py

from typing import Any

import httpx

from mail_connectors.core.exceptions import MailgunHTTPError, ResponseDecodeError
from mail_connectors.core.logger import get_logger

logger = get_logger(__name__)


def status_line(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


def decode_response(response: httpx.Response) -> Any:
    """
    Convertit une réponse Mailgun en objet JSON.

    - 2xx : retourne le JSON décodé, lève ResponseDecodeError si le corps est illisible.
    - sinon : logge le champ `message` du corps en WARNING puis lève
      MailgunHTTPError portant la ligne de statut (ex: "404 Not Found").
      Un corps non JSON ne masque pas l'erreur HTTP : le texte brut est loggé à la place.
    """
    if response.is_success:
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Réponse JSON invalide ({status_line(response)}): {e}") from e

    line = status_line(response)
    try:
        body = response.json()
    except ValueError:
        body = None

    api_message = body.get("message") if isinstance(body, dict) else None
    if api_message:
        logger.warning(api_message)
    else:
        logger.warning(f"{line}: {response.text[:300]}")

    raise MailgunHTTPError(line, status_code=response.status_code, api_message=api_message)
