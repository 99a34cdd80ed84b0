"""
HTTP Backend Base - Shared httpx plumbing for the REST adapters.

Every call is folded into a Result here, so adapters never raise for
HTTP outcomes:
- no response received       -> ErrorKind.NETWORK
- non-2xx status             -> ErrorKind.REJECTED (server message kept)
- 2xx with unusable body     -> ErrorKind.UNEXPECTED
"""

import logging
from typing import Any, Dict, Optional

import httpx

from legasi_dms.config import Settings, get_settings
from legasi_dms.domain.result import ApiError, ErrorKind, Result, is_success_payload
from legasi_dms.errors import DEFAULT_ERROR_MESSAGE, NETWORK_ERROR_MESSAGE

logger = logging.getLogger(__name__)

INVALID_RESPONSE_MESSAGE = "Invalid API response format."


class HttpBackend:
    """
    Base for adapters talking to the dashboard REST backend.

    Uses one httpx.Client per adapter with the configured base URL and
    per-request timeout.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize HTTP backend.

        Args:
            settings: Client settings (defaults to get_settings())
            client: Preconfigured httpx.Client; built from settings if omitted
        """
        self._settings = settings or get_settings()
        self._client = client or httpx.Client(
            base_url=self._settings.api_base_url,
            timeout=self._settings.request_timeout,
            headers={"Accept": "application/json"},
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _path(self, name: str) -> str:
        return self._settings.endpoint(name)

    @staticmethod
    def _headers(token: Optional[str]) -> Dict[str, str]:
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def _request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        **kwargs: Any,
    ) -> Result[Dict[str, Any]]:
        """
        Send a request and normalize the outcome.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            token: Bearer token to attach, if any
            **kwargs: Passed to httpx (json, params, files)

        Returns:
            Result whose value is the decoded JSON object
        """
        logger.debug("%s %s", method, path)

        try:
            response = self._client.request(method, path, headers=self._headers(token), **kwargs)
        except httpx.RequestError as e:
            logger.warning("%s %s failed without a response: %s", method, path, e.__class__.__name__)
            return Result.failure(ApiError(kind=ErrorKind.NETWORK, message=NETWORK_ERROR_MESSAGE))

        payload = self._decode(response)

        if response.is_error:
            message = DEFAULT_ERROR_MESSAGE
            if isinstance(payload, dict) and payload.get("message"):
                message = payload["message"]
            logger.info("%s %s rejected with status %s", method, path, response.status_code)
            return Result.failure(ApiError(
                kind=ErrorKind.REJECTED,
                message=message,
                status_code=response.status_code,
                payload=payload if isinstance(payload, dict) else {},
            ))

        if not isinstance(payload, dict):
            logger.error("%s %s returned a non-object body", method, path)
            return Result.failure(ApiError(
                kind=ErrorKind.UNEXPECTED,
                message=INVALID_RESPONSE_MESSAGE,
                status_code=response.status_code,
            ))

        return Result.success(payload, message=payload.get("message"))

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _require_success(
        result: Result[Dict[str, Any]],
        default_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> Result[Dict[str, Any]]:
        """Turn a 2xx reply lacking a success flag into a rejection."""
        if not result.ok:
            return result

        payload = result.value
        if is_success_payload(payload):
            return result

        return Result.failure(ApiError(
            kind=ErrorKind.REJECTED,
            message=payload.get("message") or default_message,
            payload=payload,
        ))

    @staticmethod
    def _unexpected(message: str, payload: Optional[Dict[str, Any]] = None) -> Result:
        return Result.failure(ApiError(
            kind=ErrorKind.UNEXPECTED,
            message=message,
            payload=payload or {},
        ))
