"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El transporte decodifica el JSON de la API directamente a estos modelos.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
- Son inmutables (`frozen`): se crean por respuesta y los consume el caller.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.exceptions import InvalidArgumentError


class ResultType(str, Enum):
    """Discriminante de una búsqueda (tokens de la API legacy)."""

    HAS_RESULTS = "exact"
    NO_RESULTS = "no_results"


class VoteDirection(str, Enum):
    """Dirección de un voto sobre una definición."""

    UP = "up"
    DOWN = "down"

    def token(self) -> str:
        """Forma textual enviada a la API (siempre en minúsculas)."""

        return self.value.lower()

    @classmethod
    def parse(cls, text: str) -> "VoteDirection":
        """Interpreta `up`/`down` sin distinguir mayúsculas."""

        normalized = text.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidArgumentError("direction", text, "The vote direction must be 'up' or 'down'.")


class VoteStatus(str, Enum):
    """Tokens conocidos del campo `status` de un voto."""

    SAVED = "saved"
    ERROR = "error"


class DefinitionRecord(BaseModel):
    """Una entrada del diccionario tal como la devuelve la API.

    Por qué `extra="ignore"`:
    - La API agrega campos sin avisar; el cliente solo pasa el registro tal cual.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    defid: int = Field(
        ...,
        description="Identificador numérico de la definición.",
    )
    word: str = Field(
        ...,
        description="Término definido.",
    )
    definition: str = Field(
        default="",
        description="Cuerpo de la definición.",
    )
    example: str = Field(
        default="",
        description="Ejemplo de uso.",
    )
    author: str = Field(
        default="",
        description="Autor de la definición.",
    )
    permalink: str = Field(
        default="",
        description="URL pública de la definición.",
    )
    thumbs_up: int = Field(
        default=0,
        description="Votos positivos.",
    )
    thumbs_down: int = Field(
        default=0,
        description="Votos negativos.",
    )
    written_on: str | None = Field(
        default=None,
        description="Fecha de publicación (ISO 8601, tal como la manda la API).",
    )
    current_vote: str = Field(
        default="",
        description="Voto actual del cliente sobre la definición (si hay).",
    )
    sound_urls: list[str] = Field(
        default_factory=list,
        description="URLs de audio asociadas.",
    )


class DefinitionResult(BaseModel):
    """Respuesta de `define` (por término o por id) y de `random`.

    La API actual devuelve solo `{"list": [...]}`; la legacy agregaba
    `result_type`, `tags` y `sounds`. Ambas formas se decodifican aquí.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    entries: list[DefinitionRecord] = Field(
        default_factory=list,
        alias="list",
        description="Definiciones en el orden del servidor.",
    )
    result_type: str | None = Field(
        default=None,
        description="Discriminante enviado por la API legacy (`exact`, `fulltext`, `no_results`, ...).",
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Tags relacionados (solo API legacy).",
    )
    sounds: list[str] = Field(
        default_factory=list,
        description="URLs de audio (solo API legacy).",
    )

    @property
    def status(self) -> ResultType:
        if self.result_type == ResultType.NO_RESULTS.value or not self.entries:
            return ResultType.NO_RESULTS
        return ResultType.HAS_RESULTS

    def first(self) -> DefinitionRecord | None:
        return self.entries[0] if self.entries else None


class VoteResult(BaseModel):
    """Respuesta de `vote`."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    status: str = Field(
        ...,
        description="Token de estado (`saved`, `error`, ...).",
    )
    up: int | None = Field(
        default=None,
        description="Votos positivos tras el voto.",
    )
    down: int | None = Field(
        default=None,
        description="Votos negativos tras el voto.",
    )
    current_vote: str | None = Field(
        default=None,
        description="Voto registrado para este cliente.",
    )

    @property
    def is_error(self) -> bool:
        return self.status.strip().lower() == VoteStatus.ERROR.value


AutocompleteResult = list[str]
