"""WhatsApp provider implementation (Strategy Pattern)."""
import logging
from typing import Optional, Dict, Any
import requests
from requests.adapters import HTTPAdapter

from app.domain.exceptions import ConfigurationError
from app.domain.interfaces.message_provider import IMessageProvider, OutboundResult


GRAPH_API_URL = "https://graph.facebook.com"


class WhatsAppProvider(IMessageProvider):
    """
    WhatsApp Cloud API provider implementation.

    Sends are synchronous, bounded by a timeout and never retried; the
    caller owns retry policy.
    """

    def __init__(
        self,
        access_token: Optional[str],
        phone_number_id: Optional[str],
        version: str = "v18.0",
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize WhatsApp provider with connection pooling.

        Args:
            access_token: Graph API bearer token
            phone_number_id: Sender phone number ID
            version: Graph API version
            timeout: Seconds to wait for the Graph API
            session: Optional preconfigured session (for testing)
        """
        self._logger = logging.getLogger(__name__)
        self._access_token = access_token
        self._phone_number_id = phone_number_id
        self._version = version
        self._timeout = timeout
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a requests session with connection pooling and no retries."""
        session = requests.Session()

        adapter = HTTPAdapter(
            max_retries=0,
            pool_connections=10,
            pool_maxsize=10,
            pool_block=False
        )

        session.mount("https://", adapter)
        return session

    def is_configured(self) -> bool:
        return bool(self._access_token and self._phone_number_id)

    def _get_base_url(self) -> str:
        """Get the messages URL for the configured phone number."""
        if not self.is_configured():
            raise ConfigurationError(
                "Server not configured. Missing WHATSAPP_TOKEN or PHONE_NUMBER_ID"
            )
        return f"{GRAPH_API_URL}/{self._version}/{self._phone_number_id}/messages"

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for API requests."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}"
        }

    def send_text_message(self, recipient: str, message: str) -> OutboundResult:
        """
        Send a text message via WhatsApp API.

        Args:
            recipient: Phone number digits
            message: Message text

        Returns:
            OutboundResult with the message ID, or the upstream error

        Raises:
            ConfigurationError: If token or phone number ID is missing
        """
        url = self._get_base_url()
        payload = {
            "messaging_product": "whatsapp",
            "to": recipient,
            "type": "text",
            "text": {"body": message}
        }

        try:
            response = self._session.post(
                url,
                json=payload,
                headers=self._get_headers(),
                timeout=self._timeout
            )
        except requests.Timeout:
            self._logger.error(f"Request timeout after {self._timeout}s")
            return OutboundResult(
                status="error",
                error_message=f"timeout of {self._timeout}s exceeded"
            )
        except requests.RequestException as e:
            self._logger.error(f"Request failed: {e}")
            return OutboundResult(status="error", error_message=str(e))

        response_data = self._parse_body(response)

        if response.status_code >= 400:
            return self._error_result(response, response_data)

        if response_data is None:
            self._logger.error("Graph API returned a non-JSON success body")
            return OutboundResult(
                status="error",
                error_message="Invalid JSON in WhatsApp API response",
                http_status=response.status_code
            )

        messages = response_data.get("messages") or [{}]
        return OutboundResult(
            status="success",
            message_id=messages[0].get("id"),
            response=response_data,
            http_status=response.status_code
        )

    @staticmethod
    def _parse_body(response: requests.Response) -> Optional[Dict[str, Any]]:
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    def _error_result(
        self, response: requests.Response, error_data: Optional[Dict[str, Any]]
    ) -> OutboundResult:
        """Prefer the Graph API's own error message over the HTTP status."""
        error_msg = f"Request failed with status code {response.status_code}"
        error_code = None

        if error_data and isinstance(error_data.get("error"), dict):
            error_msg = error_data["error"].get("message") or error_msg
            error_code = error_data["error"].get("code")

        self._logger.error(
            f"HTTP {response.status_code} error: {error_msg} (code: {error_code})"
        )
        if error_data is None:
            self._logger.debug(f"Response body: {response.text}")

        return OutboundResult(
            status="error",
            error_message=error_msg,
            response=error_data,
            http_status=response.status_code
        )
