"""Errores de dominio del cliente.

Por qué una jerarquía propia:
- El caller distingue "la API dijo que no" (`DictionaryError`) de "no pudimos
  hablar con la API" (`adapters.http_client.TransportError`).
- Cada error conserva el dato que lo provocó para diagnóstico.
"""

from __future__ import annotations

from typing import Any


class DictionaryError(Exception):
    """Base de todos los fallos de dominio."""


class InvalidArgumentError(DictionaryError, ValueError):
    """Argumento inválido detectado antes de cualquier I/O."""

    def __init__(self, parameter: str, value: Any, message: str) -> None:
        super().__init__(f"{message} (parameter: {parameter})")
        self.parameter = parameter
        self.value = value


class NotFoundError(DictionaryError, LookupError):
    """La API respondió sin resultados para la consulta."""

    def __init__(self, query: str | int, message: str) -> None:
        super().__init__(message)
        self.query = query


class VoteError(DictionaryError):
    """La API rechazó el voto.

    La respuesta no trae detalle estructurado: el id es solo la causa probable.
    """

    def __init__(self, defid: int) -> None:
        super().__init__(
            "An error occurred while sending the vote request, "
            f"the definition id ({defid}) is probably wrong."
        )
        self.defid = defid


class EmptyResponseError(DictionaryError):
    """Un recurso que siempre debería traer registros devolvió una lista vacía."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"The '{resource}' resource returned no entries.")
        self.resource = resource
