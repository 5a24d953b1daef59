import json
import os
from typing import List
from urllib.parse import parse_qs

import httpx
import pytest

from mail_connectors.core.httpx_client import HTTPClient
from mail_connectors.mailgun.api_client import MailgunClient

API_KEY = "KEY"
DOMAIN = "example.com"
API_BASE = "api.mailgun.net/v3"

TEST_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "test_data")


def _load_json(filename):
    """Charge un fichier JSON depuis tests/mailgun/test_data/"""
    with open(os.path.join(TEST_DATA_DIR, filename), "r", encoding="utf-8") as f:
        return json.load(f)


def _form_data(request: httpx.Request) -> dict:
    """Décode le corps form-encoded d'une requête."""
    return parse_qs(request.content.decode())


class MockMailgunAPI:
    """
    Faux serveur Mailgun pour httpx.MockTransport :
    les réponses sont servies dans l'ordre, les requêtes sont enregistrées.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: List[httpx.Response] = []

    def queue(self, status_code: int = 200, json=None, text: str = None):
        if json is not None:
            self.responses.append(httpx.Response(status_code, json=json))
        else:
            self.responses.append(httpx.Response(status_code, text=text or ""))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Requête inattendue : {request.method} {request.url}")
        return self.responses.pop(0)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def load_json():
    return _load_json


@pytest.fixture
def form_data():
    return _form_data


@pytest.fixture
def mock_api():
    return MockMailgunAPI()


@pytest.fixture
def http(mock_api):
    """HTTPClient branché sur le faux serveur."""
    with HTTPClient(client=httpx.Client(transport=httpx.MockTransport(mock_api.handler))) as client:
        yield client


@pytest.fixture
def mailgun(mock_api):
    """MailgunClient branché sur le faux serveur."""
    with MailgunClient.with_transport(API_KEY, DOMAIN, httpx.MockTransport(mock_api.handler),
                                      api_base=API_BASE) as client:
        yield client
