import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode

import httpx

from .config import WatsonConfig
from .errors import ResponseDecodeError, ServiceConnectionError, UnmappedResponse, WatsonError

logger = logging.getLogger(__name__)

Decoder = Callable[[httpx.Response], Any]


def no_content(response: httpx.Response) -> None:
    return None


def raw_bytes(response: httpx.Response) -> bytes:
    return response.content


def json_body(parse: Callable[[Any], Any], key: Optional[str] = None) -> Decoder:
    """Decoder that parses the JSON body, optionally unwrapping one top-level key."""

    def decode(response: httpx.Response) -> Any:
        try:
            data = response.json()
            if key is not None:
                data = data[key]
            return parse(data)
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise ResponseDecodeError(status_code=response.status_code, details={"cause": str(exc)}) from exc

    return decode


def json_list(parse: Callable[[Any], Any], key: str) -> Decoder:
    return json_body(lambda items: [parse(item) for item in items], key)


@dataclass
class Operation:
    """Everything needed to issue one remote call and interpret its answer.

    ``path`` is a template such as ``v1/customizations/{customization_id}``;
    ``path_params`` values are percent-encoded before substitution. ``params``
    keeps its order on the wire and skips pairs whose value is None.
    ``errors`` maps each documented status to the exception it raises; any
    other non-success status raises UnmappedResponse.
    """

    method: str
    path: str
    path_params: Dict[str, str] = field(default_factory=dict)
    params: Sequence[Tuple[str, Optional[str]]] = ()
    json: Any = None
    content: Optional[bytes] = None
    files: Optional[Dict[str, Any]] = None
    content_type: Optional[str] = None
    success: Tuple[int, ...] = (200,)
    errors: Dict[int, type] = field(default_factory=dict)
    decode: Decoder = no_content
    resource_id: Optional[str] = None

    def url(self, config: WatsonConfig) -> str:
        path = self.path.format(**{name: quote(value, safe="") for name, value in self.path_params.items()})
        url = config.url_for(path)
        query = [(name, value) for name, value in self.params if value is not None]
        if query:
            url = f"{url}?{urlencode(query, quote_via=quote)}"
        return url


class HttpClients:
    """Owns one httpx.Client and one httpx.AsyncClient, reused for every call.

    TLS verification is left at httpx's default and cannot be turned off
    from here.
    """

    def __init__(
        self,
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._async_client = httpx.AsyncClient(timeout=timeout, transport=async_transport)

    def close(self) -> None:
        self._client.close()
        if self._async_client.is_closed:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._async_client.aclose())
        # Inside a running loop the caller must await aclose().

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self._client.close()
        if not self._async_client.is_closed:
            await self._async_client.aclose()


class ResourceClient(HttpClients):
    """Shared plumbing for the Watson REST clients."""

    def __init__(
        self,
        config: WatsonConfig,
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config.validate()
        self.config = config
        super().__init__(timeout=timeout, transport=transport, async_transport=async_transport)

    def set_authorization_token(self, token: str) -> None:
        """Update bearer token at runtime (tokens are short-lived)."""
        self.config.authorization_token = token

    def _call(self, operation: Operation, timeout: Optional[float] = None) -> Any:
        request = self._build_request(self._client, operation, timeout)
        try:
            response = self._client.send(request)
        except httpx.TransportError as exc:
            raise ServiceConnectionError(str(exc) or exc.__class__.__name__) from exc
        return self._handle_response(operation, response)

    async def _acall(self, operation: Operation, timeout: Optional[float] = None) -> Any:
        request = self._build_request(self._async_client, operation, timeout)
        try:
            response = await self._async_client.send(request)
        except httpx.TransportError as exc:
            raise ServiceConnectionError(str(exc) or exc.__class__.__name__) from exc
        return self._handle_response(operation, response)

    def _build_request(self, client, operation: Operation, timeout: Optional[float]) -> httpx.Request:
        url = operation.url(self.config)
        headers = self._auth_headers()
        if operation.content_type:
            headers["Content-Type"] = operation.content_type
        logger.debug("%s %s", operation.method, url)
        return client.build_request(
            operation.method,
            url,
            headers=headers,
            json=operation.json,
            content=operation.content,
            files=operation.files,
            timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
        )

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.config.authorization_token}"}

    def _handle_response(self, operation: Operation, response: httpx.Response) -> Any:
        logger.debug("%s %s -> %d", operation.method, operation.path, response.status_code)
        if response.status_code in operation.success:
            return operation.decode(response)
        raise self._classify(operation, response)

    def _classify(self, operation: Operation, response: httpx.Response) -> WatsonError:
        message: Optional[str] = None
        details: Dict = {}
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            details = payload
            error = payload.get("error")
            message = (
                (error.get("message") if isinstance(error, dict) else error)
                or payload.get("message")
                or None
            )
        error_cls = operation.errors.get(response.status_code)
        if error_cls is None:
            return UnmappedResponse(response.status_code, message, details=details, resource_id=operation.resource_id)
        return error_cls(message, status_code=response.status_code, details=details, resource_id=operation.resource_id)
