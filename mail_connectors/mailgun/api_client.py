# mail_connectors/mailgun/api_client.py

import json
from typing import Any, Dict, List, Optional

import httpx

from mail_connectors.core.config import get_mailgun_api_key, get_mailgun_domain, get_mailgun_api_base
from mail_connectors.core.httpx_client import HTTPClient
from mail_connectors.core.logger import get_logger
from mail_connectors.mailgun import urls
from mail_connectors.mailgun.decoder import decode_response
from mail_connectors.mailgun.paginator import fetch_all_pages
from mail_connectors.mailgun.schema import (
    DeleteResponse,
    ListMember,
    ListMemberResponse,
    MailingList,
    MailingListResponse,
    MessageResponse,
)

logger = get_logger(__name__)


class MailgunClient:
    """
    Client pour Mailgun (API v3).

    Stocke api_key et domain (modifiables après construction).

    Fournit les méthodes pour accéder aux API:
     - message(args)                                   https://documentation.mailgun.com/api-sending.html
     - lists() / add_list / list / update_list / delete_list
     - list_members / add_list_member(s) / list_member / update_list_member / delete_list_member
                                                       https://documentation.mailgun.com/api-mailinglists.html

    Les listings (lists, list_members) suivent la pagination jusqu'à la première page vide.
    """

    def __init__(self, api_key: str, domain: str, http_client: Optional[HTTPClient] = None,
                 api_base: Optional[str] = None, max_pages: Optional[int] = None):
        self.api_key = api_key
        self.domain = domain
        self.api_base = api_base or get_mailgun_api_base()
        self.max_pages = max_pages
        # HTTPClient wrapper (testable / injectable), le client httpx est créé au premier appel
        self.http = http_client if http_client is not None else HTTPClient()

    @classmethod
    def from_env(cls, **kwargs) -> "MailgunClient":
        """Construit un client à partir de MAILGUN_API_KEY / MAILGUN_DOMAIN."""
        return cls(api_key=get_mailgun_api_key(), domain=get_mailgun_domain(), **kwargs)

    @classmethod
    def with_transport(cls, api_key: str, domain: str, transport: httpx.BaseTransport, **kwargs) -> "MailgunClient":
        """Construit un client sur un transport httpx donné (ex: httpx.MockTransport)."""
        return cls(api_key=api_key, domain=domain, http_client=HTTPClient(client=httpx.Client(transport=transport)),
                   **kwargs)

    # ---------------- URLs ----------------
    def api_url(self, method: str) -> str:
        return urls.api_url(self.api_key, method, api_base=self.api_base)

    def domain_api_url(self, method: str) -> str:
        return urls.domain_api_url(self.api_key, self.domain, method, api_base=self.api_base)

    # ---------------- Pagination ----------------
    def recursive(self, method: str, key: str = "items") -> List[Dict[str, Any]]:
        """Récupère tous les éléments d'un listing paginé (ex: 'lists/pages')."""
        return fetch_all_pages(self.http, self.api_url(method), key=key, max_pages=self.max_pages)

    # ---------------- Messages ----------------
    def message(self, args: Dict[str, Any]) -> MessageResponse:
        """
        Envoie un message.
        args: from, to, subject, text, html, ... (to peut être une liste d'adresses)
        """
        logger.debug("POST message | to=%s", args.get("to"))
        res = self.http.post(self.domain_api_url("messages"), data=args)
        return MessageResponse.model_validate(decode_response(res))

    # ---------------- Listes de diffusion ----------------
    def lists(self) -> List[MailingList]:
        return [MailingList.model_validate(item) for item in self.recursive("lists/pages")]

    def add_list(self, args: Dict[str, Any]) -> MailingListResponse:
        """args: address, name (optionnel), description (optionnel), access_level (readonly, members, everyone)"""
        res = self.http.post(self.api_url("lists"), data=args)
        return MailingListResponse.model_validate(decode_response(res))

    def list(self, address: str) -> MailingList:
        res = self.http.get(self.api_url(f"lists/{address}"))
        return MailingList.model_validate(decode_response(res)["list"])

    def update_list(self, address: str, args: Dict[str, Any]) -> MailingListResponse:
        res = self.http.put(self.api_url(f"lists/{address}"), data=args)
        return MailingListResponse.model_validate(decode_response(res))

    def delete_list(self, address: str) -> DeleteResponse:
        res = self.http.delete(self.api_url(f"lists/{address}"))
        return DeleteResponse.model_validate(decode_response(res))

    # ---------------- Membres ----------------
    def list_members(self, address: str) -> List[ListMember]:
        return [ListMember.model_validate(item) for item in self.recursive(f"lists/{address}/members/pages")]

    def add_list_member(self, address: str, args: Dict[str, Any]) -> ListMemberResponse:
        """args: address, name, vars (chaîne JSON), subscribed (yes/no), upsert (yes/no)"""
        res = self.http.post(self.api_url(f"lists/{address}/members"), data=args)
        return ListMemberResponse.model_validate(decode_response(res))

    def add_list_members(self, address: str, args: Dict[str, Any]) -> MailingListResponse:
        """
        Ajout en masse. args["members"] est un tableau JSON (chaîne); une liste Python
        (adresses ou dicts) est encodée en JSON avant l'envoi.
        """
        data = dict(args)
        if "members" in data and not isinstance(data["members"], str):
            data["members"] = json.dumps(data["members"])
        res = self.http.post(self.api_url(f"lists/{address}/members.json"), data=data)
        return MailingListResponse.model_validate(decode_response(res))

    def list_member(self, address: str, member: str) -> ListMember:
        res = self.http.get(self.api_url(f"lists/{address}/members/{member}"))
        return ListMember.model_validate(decode_response(res)["member"])

    def update_list_member(self, address: str, member: str, args: Dict[str, Any]) -> ListMemberResponse:
        res = self.http.put(self.api_url(f"lists/{address}/members/{member}"), data=args)
        return ListMemberResponse.model_validate(decode_response(res))

    def delete_list_member(self, address: str, member: str) -> DeleteResponse:
        res = self.http.delete(self.api_url(f"lists/{address}/members/{member}"))
        return DeleteResponse.model_validate(decode_response(res))

    # ---------------- Ressources ----------------
    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
