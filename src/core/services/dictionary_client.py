"""Cliente de alto nivel de la API de diccionario.

Cada operación sigue la misma secuencia lineal:
validar -> construir recurso -> await transporte -> interpretar discriminante.

El cliente no guarda estado entre llamadas más allá del transporte, así que
puede usarse concurrentemente desde varias tareas sin locks.
"""

from __future__ import annotations

from typing import Any, Awaitable
from urllib.parse import quote

from adapters.http_client import HttpxTransport
from core.config import AppSettings
from core.domain.models import (
    AutocompleteResult,
    DefinitionRecord,
    DefinitionResult,
    ResultType,
    VoteDirection,
    VoteResult,
)
from core.exceptions import EmptyResponseError, InvalidArgumentError, NotFoundError, VoteError
from core.interfaces.transport import DictionaryTransport
from core.logging import get_logger

logger = get_logger(__name__)

DEFINE_RESOURCE = "define"
RANDOM_RESOURCE = "random"
AUTOCOMPLETE_RESOURCE = "autocomplete"
VOTE_RESOURCE = "vote"


def escape_term(term: str) -> str:
    """Percent-encoding RFC 3986 de un valor de query (espacio -> `%20`)."""

    return quote(term, safe="")


def check_definition_id(defid: Any) -> int:
    """Valida que `defid` sea un entero estrictamente positivo."""

    # bool es subclase de int pero nunca es un id válido.
    if isinstance(defid, bool) or not isinstance(defid, int):
        raise InvalidArgumentError("defid", defid, "The definition id must be an integer.")
    if defid <= 0:
        raise InvalidArgumentError("defid", defid, "The definition id is equal or lower than 0.")
    return defid


class DictionaryClient:
    """Operaciones tipadas sobre la API (define, random, autocomplete, vote)."""

    def __init__(self, transport: DictionaryTransport) -> None:
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "DictionaryClient":
        """Crea un cliente con un `HttpxTransport` propio."""

        return cls(HttpxTransport(settings=settings or AppSettings()))

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "DictionaryClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def lookup_by_term(self, term: str) -> DefinitionResult:
        """Busca definiciones de `term`.

        Raises:
            NotFoundError: la API no tiene definiciones para el término.
        """

        result = await self._transport.execute(f"{DEFINE_RESOURCE}?term={escape_term(term)}", DefinitionResult)
        if result.status is ResultType.NO_RESULTS:
            logger.debug("no results for term %r", term)
            raise NotFoundError(term, f"The word {term} wasn't found.")
        return result

    def lookup_by_id(self, defid: int) -> Awaitable[DefinitionResult]:
        """Busca una definición por id.

        La validación corre al llamar (no al hacer await): un id inválido
        lanza `InvalidArgumentError` sin crear la corrutina de red.
        """

        return self._lookup_by_id(check_definition_id(defid))

    async def _lookup_by_id(self, defid: int) -> DefinitionResult:
        result = await self._transport.execute(f"{DEFINE_RESOURCE}?defid={defid}", DefinitionResult)
        if result.status is ResultType.NO_RESULTS:
            logger.debug("no results for defid %s", defid)
            raise NotFoundError(defid, f"The definition with the id {defid} wasn't found.")
        return result

    async def random_entries(self) -> list[DefinitionRecord]:
        """Entradas aleatorias en el orden del servidor (una lista vacía es válida)."""

        result = await self._transport.execute(RANDOM_RESOURCE, DefinitionResult)
        return list(result.entries)

    async def random_entry(self) -> DefinitionRecord:
        """Primera entrada de `random_entries`.

        Raises:
            EmptyResponseError: el servidor devolvió cero entradas.
        """

        entries = await self.random_entries()
        if not entries:
            raise EmptyResponseError(RANDOM_RESOURCE)
        return entries[0]

    async def autocomplete(self, term: str) -> AutocompleteResult:
        return await self._transport.execute(
            f"{AUTOCOMPLETE_RESOURCE}?term={escape_term(term)}", AutocompleteResult
        )

    def vote_on_definition(self, defid: int, direction: VoteDirection) -> Awaitable[VoteResult]:
        """Vota `direction` sobre la definición `defid`.

        Igual que `lookup_by_id`, el id se valida antes de cualquier I/O.

        Raises:
            VoteError: la API respondió con estado `error`. La causa más
                probable es un id inexistente, pero la API no lo confirma.
        """

        defid = check_definition_id(defid)
        if not isinstance(direction, VoteDirection):
            direction = VoteDirection.parse(str(direction))
        return self._vote_on_definition(defid, direction)

    async def _vote_on_definition(self, defid: int, direction: VoteDirection) -> VoteResult:
        result = await self._transport.execute(
            f"{VOTE_RESOURCE}?defid={defid}&direction={direction.token()}", VoteResult
        )
        if result.is_error:
            logger.debug("vote %s on defid %s rejected", direction.token(), defid)
            raise VoteError(defid)
        return result
