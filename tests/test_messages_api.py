"""Tests for the outbound relay and message history endpoints."""
import pytest
import requests

from tests.conftest import WHATSAPP_TOKEN, make_response


GRAPH_SUCCESS = {
    "messaging_product": "whatsapp",
    "contacts": [{"input": "123", "wa_id": "123"}],
    "messages": [{"id": "wamid.HBgLMTIzNDU2Nzg5MBUCABEYEjA="}],
}


class TestSendMessage:
    def test_success_returns_message_id(self, client, http_session):
        http_session.post.return_value = make_response(200, GRAPH_SUCCESS)

        response = client.post("/api/send-message", json={"to": "123", "message": "hi"})

        assert response.status_code == 200
        assert response.get_json() == {
            "success": True,
            "messageId": "wamid.HBgLMTIzNDU2Nzg5MBUCABEYEjA=",
            "data": GRAPH_SUCCESS,
        }

    def test_request_sent_to_graph_api(self, client, http_session):
        http_session.post.return_value = make_response(200, GRAPH_SUCCESS)

        client.post("/api/send-message", json={"to": "+1 555-0100", "message": "hi"})

        args, kwargs = http_session.post.call_args
        assert args[0] == "https://graph.facebook.com/v18.0/109876543210/messages"
        assert kwargs["json"] == {
            "messaging_product": "whatsapp",
            "to": "15550100",
            "type": "text",
            "text": {"body": "hi"},
        }
        assert kwargs["headers"]["Authorization"] == f"Bearer {WHATSAPP_TOKEN}"
        assert kwargs["timeout"] == 10

    @pytest.mark.parametrize("body", [
        {"to": "123"},
        {"message": "hi"},
        {"to": "", "message": "hi"},
        {},
    ])
    def test_missing_fields_are_rejected(self, client, http_session, body):
        response = client.post("/api/send-message", json=body)

        assert response.status_code == 400
        assert response.get_json()["success"] is False
        http_session.post.assert_not_called()

    def test_missing_fields_rejected_without_configuration(self, unconfigured_client):
        response = unconfigured_client.post("/api/send-message", json={"to": "123"})

        assert response.status_code == 400

    def test_non_json_body_is_rejected(self, client):
        response = client.post("/api/send-message", data="to=123", content_type="text/plain")

        assert response.status_code == 400

    def test_invalid_recipient_is_rejected(self, client, http_session):
        response = client.post("/api/send-message", json={"to": "not-a-number", "message": "hi"})

        assert response.status_code == 400
        assert "Invalid phone number" in response.get_json()["error"]
        http_session.post.assert_not_called()

    def test_missing_credentials_is_configuration_error(self, unconfigured_client):
        response = unconfigured_client.post("/api/send-message", json={"to": "123", "message": "hi"})

        assert response.status_code == 500
        assert response.get_json() == {
            "success": False,
            "error": "Server not configured. Missing WHATSAPP_TOKEN or PHONE_NUMBER_ID",
        }

    def test_platform_error_message_is_preferred(self, client, http_session):
        error_body = {
            "error": {
                "message": "(#131030) Recipient phone number not in allowed list",
                "type": "OAuthException",
                "code": 131030,
            }
        }
        http_session.post.return_value = make_response(400, error_body)

        response = client.post("/api/send-message", json={"to": "123", "message": "hi"})

        assert response.status_code == 500
        assert response.get_json() == {
            "success": False,
            "error": "(#131030) Recipient phone number not in allowed list",
            "details": error_body,
        }

    def test_http_error_without_platform_message(self, client, http_session):
        http_session.post.return_value = make_response(502, None, text="<html>Bad Gateway</html>")

        response = client.post("/api/send-message", json={"to": "123", "message": "hi"})

        assert response.status_code == 500
        body = response.get_json()
        assert body["error"] == "Request failed with status code 502"
        assert "details" not in body

    def test_transport_error_is_surfaced_without_retry(self, client, http_session):
        http_session.post.side_effect = requests.ConnectionError("Connection refused")

        response = client.post("/api/send-message", json={"to": "123", "message": "hi"})

        assert response.status_code == 500
        assert response.get_json()["error"] == "Connection refused"
        assert http_session.post.call_count == 1


class TestListMessages:
    def test_empty_history(self, client):
        response = client.get("/api/messages")

        assert response.status_code == 200
        assert response.get_json() == {"success": True, "count": 0, "messages": []}

    def test_history_after_webhook(self, client, sample_webhook):
        client.post("/webhook", json=sample_webhook)

        body = client.get("/api/messages").get_json()

        assert body["count"] == 1
        message = body["messages"][0]
        assert message["from"] == "123"
        assert message["text"] == "hello"
        assert message["type"] == "text"
        assert message["timestamp"] == "2009-02-13 23:31:30 UTC"
        assert message["raw"] == sample_webhook["entry"][0]["changes"][0]["value"]["messages"][0]
