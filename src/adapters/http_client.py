"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base_url, timeouts, headers y logging de cada request.
- Traduce fallos de red/HTTP/JSON a una familia de errores propia del
  transporte, distinta de los errores de dominio.
- Facilita testeo: se le inyecta un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from core.config import AppSettings
from core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransportError(Exception):
    """No se pudo obtener una respuesta utilizable de la API."""


class HTTPStatusTransportError(TransportError):
    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class ConnectionTransportError(TransportError):
    """Timeout, DNS, TLS o conexión rechazada."""


class MalformedResponseError(TransportError):
    """El body no es JSON o no tiene la forma esperada."""


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las operaciones se comporten igual.
    - `base_url` permite que los recursos sean relativos (`define?term=...`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


class HttpxTransport:
    """Implementa `DictionaryTransport` sobre `httpx.AsyncClient`.

    Si no se le pasa un cliente, construye uno y es responsable de cerrarlo.
    Un cliente inyectado lo cierra quien lo creó.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_async_client(settings)

    async def execute(self, resource: str, response_type: type[T]) -> T:
        try:
            response = await self._client.get(resource)
        except httpx.RequestError as exc:
            logger.debug("request to %s failed: %s", resource, exc)
            raise ConnectionTransportError(f"Could not reach the API for {resource!r}: {exc}") from exc

        logger.debug("GET %s -> %s", response.request.url, response.status_code)
        if not response.is_success:
            raise HTTPStatusTransportError(response.status_code, str(response.request.url))

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Response for {resource!r} is not valid JSON") from exc

        try:
            return TypeAdapter(response_type).validate_python(payload)
        except ValidationError as exc:
            raise MalformedResponseError(f"Response for {resource!r} has an unexpected shape: {exc}") from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
