"""Tests for settings, health, dashboard and fallback routes."""
from app import create_app
from app.api.settings import mask_token
from tests.conftest import ConfiguredTestConfig, WHATSAPP_TOKEN


def test_settings_mask_the_token(client):
    response = client.get("/api/settings")

    body = response.get_json()
    assert response.status_code == 200
    assert body["whatsapp_token"] == f"{WHATSAPP_TOKEN[:20]}..."
    assert WHATSAPP_TOKEN not in response.get_data(as_text=True)
    assert body["verify_token"] == "verify-me"
    assert body["phone_number_id"] == "109876543210"
    assert body["server_status"] == "Running"
    assert body["port"] == 3000


def test_settings_webhook_url_follows_request(client):
    assert client.get("/api/settings").get_json()["webhook_url"] == "http://localhost/webhook"

    forwarded = client.get(
        "/api/settings",
        base_url="http://relay.example.com",
        headers={"X-Forwarded-Proto": "https"},
    )
    assert forwarded.get_json()["webhook_url"] == "https://relay.example.com/webhook"


def test_settings_without_configuration(unconfigured_client):
    body = unconfigured_client.get("/api/settings").get_json()

    assert body["verify_token"] == "Not configured"
    assert body["phone_number_id"] == "Not configured"
    assert body["whatsapp_token"] == "Not configured"


def test_mask_token_keeps_fixed_prefix():
    assert mask_token("short") == "short..."
    assert mask_token("x" * 200) == "x" * 20 + "..."
    assert mask_token(None) == "Not configured"


def test_health(client):
    body = client.get("/health").get_json()

    assert body["status"] == "OK"
    assert body["timestamp"].endswith("Z")
    assert body["uptime"] >= 0


def test_dashboard_is_served(client):
    response = client.get("/")

    assert response.status_code == 200
    assert b"<html" in response.data


def test_unknown_route(client):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_unsupported_method_is_not_found(client):
    response = client.delete("/webhook")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


class LimitedConfig(ConfiguredTestConfig):
    RATELIMIT_ENABLED = True


def test_api_is_rate_limited_but_webhook_is_not():
    client = create_app(LimitedConfig).test_client()

    statuses = [client.get("/api/messages").status_code for _ in range(101)]
    assert statuses[:100] == [200] * 100
    assert statuses[100] == 429

    webhook = client.get("/webhook", query_string={
        "hub.mode": "subscribe", "hub.verify_token": "verify-me", "hub.challenge": "ok",
    })
    assert webhook.status_code == 200


class MetricsConfig(ConfiguredTestConfig):
    ENABLE_METRICS = True


def test_metrics_endpoint(sample_webhook):
    client = create_app(MetricsConfig).test_client()
    client.post("/webhook", json=sample_webhook)

    response = client.get("/metrics")

    assert response.status_code == 200
    assert b"whatsapp_messages_received_total" in response.data
