"""Pydantic schemas for cinema addresses."""

from typing import ClassVar

from pydantic import Field

from filmesapi.schemas.base import Dto, RequiredStr


class EnderecoBase(Dto):
    messages: ClassVar[dict[str, dict[str, str]]] = {
        "logradouro": {"required": "O Logradouro é obrigatório."},
        "numero": {"required": "O Número é obrigatório."},
    }

    logradouro: RequiredStr = Field(max_length=300)
    numero: int = Field(strict=True)


class CreateEnderecoDto(EnderecoBase):
    pass


class UpdateEnderecoDto(EnderecoBase):
    pass


class ReadEnderecoDto(Dto):
    id: int
    logradouro: str
    numero: int
