"""IAM access tokens for IBM Cloud services.

An API key is exchanged for a short-lived bearer token with a single POST.
Tokens are never refreshed automatically: check ``AccessToken.is_expired``
and exchange again, then hand the new token to the clients with
``set_authorization_token``.
"""
import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from .client import HttpClients
from .errors import (
    InternalServerError,
    InvalidApiKey,
    NotAllowed,
    ParameterValidationFailed,
    ResponseDecodeError,
    ServiceConnectionError,
    UnmappedResponse,
)
from .models import AccessToken

logger = logging.getLogger(__name__)

IAM_URL = "https://iam.cloud.ibm.com/identity/token"
GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"

_ERRORS = {
    400: ParameterValidationFailed,
    401: InvalidApiKey,
    403: NotAllowed,
    500: InternalServerError,
}


class IamAuthenticator(HttpClients):
    """Exchanges an API key for an IAM access token."""

    def __init__(
        self,
        *,
        url: str = IAM_URL,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(timeout=timeout, transport=transport, async_transport=async_transport)
        self.url = url
        self.token: Optional[AccessToken] = None

    def exchange(self, api_key: str) -> AccessToken:
        """Trade ``api_key`` for an access token and remember it as ``self.token``."""
        try:
            response = self._client.post(self.url, headers=self._headers(), content=self._body(api_key))
        except httpx.TransportError as exc:
            raise ServiceConnectionError(str(exc) or exc.__class__.__name__) from exc
        return self._handle_response(response)

    async def exchange_async(self, api_key: str) -> AccessToken:
        """Async: trade ``api_key`` for an access token."""
        try:
            response = await self._async_client.post(self.url, headers=self._headers(), content=self._body(api_key))
        except httpx.TransportError as exc:
            raise ServiceConnectionError(str(exc) or exc.__class__.__name__) from exc
        return self._handle_response(response)

    @staticmethod
    def _headers() -> dict:
        return {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        }

    @staticmethod
    def _body(api_key: str) -> bytes:
        return urlencode({"grant_type": GRANT_TYPE, "apikey": api_key}, safe=":").encode("utf-8")

    def _handle_response(self, response: httpx.Response) -> AccessToken:
        logger.debug("POST %s -> %d", self.url, response.status_code)
        if response.status_code == 200:
            try:
                self.token = AccessToken.from_dict(response.json())
            except (ValueError, KeyError, TypeError, AttributeError) as exc:
                raise ResponseDecodeError(status_code=200, details={"cause": str(exc)}) from exc
            return self.token
        details: dict = {}
        message = None
        try:
            details = response.json()
            message = details.get("errorMessage") or details.get("message")
        except (ValueError, AttributeError):
            details = {}
        error_cls = _ERRORS.get(response.status_code)
        if error_cls is None:
            raise UnmappedResponse(response.status_code, message, details=details)
        raise error_cls(message, status_code=response.status_code, details=details)
