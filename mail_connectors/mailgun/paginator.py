# mail_connectors/mailgun/paginator.py

from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

from mail_connectors.core.exceptions import APIError, PaginationLimitError
from mail_connectors.core.httpx_client import HTTPClient
from mail_connectors.core.logger import get_logger, mask_url
from mail_connectors.mailgun.decoder import decode_response

logger = get_logger(__name__)

DEFAULT_COLLECTION_KEY = "items"


def with_query(url: str, query: str) -> str:
    """Remplace la query string de `url` par `query` (le reste de l'URL est conservé)."""
    return urlsplit(url)._replace(query=query).geturl()


def next_page_query(page: Dict[str, Any]) -> str:
    """Extrait la query string du lien `paging.next` (hôte et chemin ignorés)."""
    next_url = (page.get("paging") or {}).get("next")
    if not next_url:
        raise APIError("Page non vide sans lien `paging.next` : impossible de continuer la pagination.")
    return urlsplit(next_url).query


def fetch_all_pages(http: HTTPClient, url: str, key: str = DEFAULT_COLLECTION_KEY,
                    max_pages: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Récupère tous les éléments d'un listing paginé Mailgun.

    Les pages sont demandées une par une, dans l'ordre : seule la query string
    du lien `paging.next` est réutilisée contre l'URL de listing d'origine.
    La boucle s'arrête à la première page dont la collection `key` est vide
    (ou absente), y compris dès la première page.

    :param http: client HTTP
    :param url: URL du listing (ex: .../lists/pages)
    :param key: nom du champ contenant la collection
    :param max_pages: borne de sécurité optionnelle; None = pas de limite
    :return: la concaténation des collections, dans l'ordre de récupération
    """
    query = ""
    result: List[Dict[str, Any]] = []
    fetched = 0

    while True:
        if max_pages is not None and fetched >= max_pages:
            raise PaginationLimitError(
                f"Pagination interrompue après {fetched} pages sans page vide ({mask_url(url)})."
            )

        page = decode_response(http.get(with_query(url, query)))
        fetched += 1

        items = page.get(key) or []
        logger.debug(f"📄 Page {fetched}: {len(items)} éléments (total: {len(result) + len(items)})")
        if not items:
            break

        result.extend(items)
        query = next_page_query(page)

    return result
