"""Pydantic schemas for cinema data."""

from typing import ClassVar

from pydantic import Field

from filmesapi.schemas.base import Dto, RequiredStr
from filmesapi.schemas.endereco import CreateEnderecoDto, ReadEnderecoDto, UpdateEnderecoDto
from filmesapi.schemas.sessao import ReadSessaoDto

_MESSAGES = {
    "nome": {"required": "O Nome é obrigatório."},
    "endereco": {"required": "O Endereço é obrigatório."},
}


class CreateCinemaDto(Dto):
    """Cinema creation payload; the address is created with the cinema."""

    messages: ClassVar[dict[str, dict[str, str]]] = _MESSAGES

    nome: RequiredStr = Field(max_length=200)
    endereco: CreateEnderecoDto


class UpdateCinemaDto(Dto):
    """Cinema replacement payload, also the target shape for JSON Patch."""

    messages: ClassVar[dict[str, dict[str, str]]] = _MESSAGES

    nome: RequiredStr = Field(max_length=200)
    endereco: UpdateEnderecoDto


class ReadCinemaDto(Dto):
    """Cinema response schema with its address and sessions."""

    id: int
    nome: str
    endereco: ReadEnderecoDto
    sessoes: list[ReadSessaoDto] = []
