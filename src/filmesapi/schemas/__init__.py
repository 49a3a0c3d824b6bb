"""Pydantic schemas for API requests and responses."""

from filmesapi.schemas.cinema import CreateCinemaDto, ReadCinemaDto, UpdateCinemaDto
from filmesapi.schemas.endereco import CreateEnderecoDto, ReadEnderecoDto, UpdateEnderecoDto
from filmesapi.schemas.filme import CreateFilmeDto, ReadFilmeDto, UpdateFilmeDto
from filmesapi.schemas.sessao import CreateSessaoDto, ReadSessaoDto, UpdateSessaoDto

__all__ = [
    "CreateCinemaDto",
    "ReadCinemaDto",
    "UpdateCinemaDto",
    "CreateEnderecoDto",
    "ReadEnderecoDto",
    "UpdateEnderecoDto",
    "CreateFilmeDto",
    "ReadFilmeDto",
    "UpdateFilmeDto",
    "CreateSessaoDto",
    "ReadSessaoDto",
    "UpdateSessaoDto",
]
