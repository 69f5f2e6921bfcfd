"""Shared fixtures: application factory, clients and webhook payloads."""
import copy
from unittest.mock import MagicMock

import pytest
import requests

from app import create_app
from app.config.settings import TestingConfig
from app.infrastructure.providers.whatsapp_provider import WhatsAppProvider
from app.infrastructure.service_container import ServiceContainer


WHATSAPP_TOKEN = "EAAGtestaccesstoken0123456789abcdefghijklmnop"


class ConfiguredTestConfig(TestingConfig):
    VERIFY_TOKEN = "verify-me"
    WHATSAPP_TOKEN = WHATSAPP_TOKEN
    PHONE_NUMBER_ID = "109876543210"
    VERSION = "v18.0"
    WHATSAPP_API_TIMEOUT = 10
    MESSAGE_HISTORY_LIMIT = 100
    PORT = 3000


class UnconfiguredTestConfig(TestingConfig):
    VERIFY_TOKEN = None
    WHATSAPP_TOKEN = None
    PHONE_NUMBER_ID = None
    PORT = 3000


SAMPLE_WEBHOOK = {
    "object": "whatsapp_business_account",
    "entry": [{
        "id": "WHATSAPP_BUSINESS_ACCOUNT_ID",
        "changes": [{
            "value": {
                "messaging_product": "whatsapp",
                "metadata": {
                    "display_phone_number": "15550555555",
                    "phone_number_id": "109876543210"
                },
                "contacts": [{
                    "profile": {"name": "Test User"},
                    "wa_id": "123"
                }],
                "messages": [{
                    "from": "123",
                    "id": "wamid.test123",
                    "timestamp": "1234567890",
                    "text": {"body": "hello"},
                    "type": "text"
                }]
            },
            "field": "messages"
        }]
    }]
}


def make_webhook(*messages, statuses=None):
    """Build an envelope holding the given messages in a single change."""
    body = copy.deepcopy(SAMPLE_WEBHOOK)
    value = body["entry"][0]["changes"][0]["value"]
    value["messages"] = list(messages)
    if statuses is not None:
        value["statuses"] = statuses
    return body


def make_response(status_code=200, json_data=None, text=""):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def sample_webhook():
    return copy.deepcopy(SAMPLE_WEBHOOK)


@pytest.fixture
def http_session():
    """Stand-in for the Graph API session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def app(http_session):
    provider = WhatsAppProvider(
        access_token=ConfiguredTestConfig.WHATSAPP_TOKEN,
        phone_number_id=ConfiguredTestConfig.PHONE_NUMBER_ID,
        version=ConfiguredTestConfig.VERSION,
        timeout=ConfiguredTestConfig.WHATSAPP_API_TIMEOUT,
        session=http_session,
    )
    container = ServiceContainer(ConfiguredTestConfig, message_provider=provider)
    return create_app(ConfiguredTestConfig, service_container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.config["service_container"].get_message_store()


@pytest.fixture
def unconfigured_app():
    return create_app(UnconfiguredTestConfig)


@pytest.fixture
def unconfigured_client(unconfigured_app):
    return unconfigured_app.test_client()
