import httpx
from typing import Any, Dict, Optional

from .config import VERSION, get_http_timeout
from .logger import get_logger, mask_url

logger = get_logger(__name__)


class HTTPClient:
    """
    Client HTTP synchrone basé sur httpx pour les appels API externes.

    Le `httpx.Client` sous-jacent est créé au premier appel puis réutilisé
    (réutilisation des connexions). Il est fermé par `close()` ou en sortie
    d'un bloc `with`. Un client httpx peut être injecté (tests, proxy...).
    """

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None,
                 client: Optional[httpx.Client] = None):
        self.timeout = timeout if timeout is not None else get_http_timeout()
        self.user_agent = user_agent or f"mail_connectors/{VERSION}"
        self._client = client
        # un client injecté est conservé après close() : httpx refuse alors toute nouvelle requête
        self._injected = client is not None

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            logger.debug(f"Création du client httpx (timeout={self.timeout})")
            self._client = httpx.Client(timeout=self.timeout, follow_redirects=True)
        return self._client

    @property
    def is_open(self) -> bool:
        return self._client is not None and not self._client.is_closed

    def request(self, method: str, url: str, data: Optional[Dict[str, Any]] = None) -> httpx.Response:
        logger.debug(f"➡️ {method} {mask_url(url)} | data={sorted(data) if data else None}")

        try:
            response = self.client.request(method, url, data=data, headers={"User-Agent": self.user_agent})
        except httpx.TransportError as e:
            # Les erreurs réseau (DNS, TLS, connexion) remontent telles quelles
            logger.error(f"HTTPX Error on {mask_url(url)}: {e}")
            raise

        logger.debug(f"⬅️ Response {response.status_code}: {response.text[:300]}")
        return response

    def get(self, url: str) -> httpx.Response:
        return self.request("GET", url)

    def post(self, url: str, data: Optional[Dict[str, Any]] = None) -> httpx.Response:
        return self.request("POST", url, data=data)

    def put(self, url: str, data: Optional[Dict[str, Any]] = None) -> httpx.Response:
        return self.request("PUT", url, data=data)

    def delete(self, url: str) -> httpx.Response:
        return self.request("DELETE", url)

    def close(self):
        if self._client is not None:
            self._client.close()
            if not self._injected:
                self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
