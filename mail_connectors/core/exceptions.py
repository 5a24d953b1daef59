# mail_connectors/core/exceptions.py
from typing import Optional


class APIError(Exception):
    """Erreur lors de l'appel d'une API externe"""
    pass


class MailgunHTTPError(APIError):
    """Réponse HTTP non 2xx. Le message de l'exception est la ligne de statut (ex: '404 Not Found')."""

    def __init__(self, status_line: str, status_code: int, api_message: Optional[str] = None):
        super().__init__(status_line)
        self.status_line = status_line
        self.status_code = status_code
        self.api_message = api_message


class ResponseDecodeError(APIError, ValueError):
    """Corps de réponse JSON illisible sur une réponse en succès."""
    pass


class PaginationLimitError(APIError):
    """Nombre maximal de pages atteint avant une page vide."""
    pass
