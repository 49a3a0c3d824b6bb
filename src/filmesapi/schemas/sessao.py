"""Pydantic schemas for sessao data."""

from datetime import datetime, timezone
from typing import ClassVar

from pydantic import Field, field_validator

from filmesapi.schemas.base import Dto


class SessaoBase(Dto):
    """Fields a client may submit for a sessao."""

    messages: ClassVar[dict[str, dict[str, str]]] = {
        "filme_id": {"required": "O campo FilmeId é obrigatório."},
        "cinema_id": {"required": "O campo CinemaId é obrigatório."},
        "horario_de_encerramento": {
            "required": "O campo HorarioDeEncerramento é obrigatório."
        },
    }

    filme_id: int = Field(strict=True)
    cinema_id: int = Field(strict=True)
    horario_de_encerramento: datetime

    @field_validator("horario_de_encerramento")
    @classmethod
    def as_naive_utc(cls, value: datetime) -> datetime:
        # Stored without a zone; aware inputs are normalised to UTC
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class CreateSessaoDto(SessaoBase):
    pass


class UpdateSessaoDto(SessaoBase):
    pass


class ReadSessaoDto(Dto):
    """Sessao response schema; the start time is derived from the filme's duration."""

    id: int
    filme_id: int
    cinema_id: int
    horario_de_inicio: datetime
    horario_de_encerramento: datetime
