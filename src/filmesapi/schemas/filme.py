"""Pydantic schemas for filme data."""

from typing import ClassVar

from pydantic import Field

from filmesapi.schemas.base import Dto, RequiredStr
from filmesapi.schemas.sessao import ReadSessaoDto


class FilmeBase(Dto):
    """Fields a client may submit for a filme."""

    messages: ClassVar[dict[str, dict[str, str]]] = {
        "titulo": {"required": "O Título é obrigatório."},
        "genero": {
            "required": "O Gênero é obrigatório.",
            "max_length": "O Gênero não pode ter mais do que 50 caractéres.",
        },
        "duracao": {
            "required": "A Duração é obrigatório.",
            "range": "O filme deve ter entre 70 e 600 minutos de duração.",
        },
    }

    titulo: RequiredStr
    genero: RequiredStr = Field(max_length=50)
    duracao: int = Field(ge=70, le=600, strict=True)


class CreateFilmeDto(FilmeBase):
    """Filme creation payload."""


class UpdateFilmeDto(FilmeBase):
    """Filme replacement payload, also the target shape for JSON Patch."""


class ReadFilmeDto(Dto):
    """Filme response schema."""

    id: int
    titulo: str
    genero: str
    duracao: int
    sessoes: list[ReadSessaoDto] = []
