"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El cliente recibe el transporte como dependencia explícita: en tests se
  sustituye por un doble sin tocar red ni estado global.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class DictionaryTransport(Protocol):
    """Contrato mínimo para ejecutar requests contra la API.

    Reglas de diseño:
    - `execute` es asíncrono porque hace I/O (HTTP).
    - `resource` ya incluye el query string escapado.
    - Los fallos de red/HTTP/JSON se reportan con errores propios del
      transporte; el cliente no los interpreta.
    """

    async def execute(self, resource: str, response_type: type[T]) -> T:
        """Hace un GET de `resource` y decodifica el body a `response_type`."""

        ...

    async def aclose(self) -> None:
        """Libera el pool de conexiones subyacente."""

        ...
