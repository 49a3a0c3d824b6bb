"""SQLAlchemy ORM models."""

from filmesapi.models.base import Base
from filmesapi.models.cinema import Cinema
from filmesapi.models.endereco import Endereco
from filmesapi.models.filme import Filme
from filmesapi.models.sessao import Sessao

__all__ = ["Base", "Cinema", "Endereco", "Filme", "Sessao"]
