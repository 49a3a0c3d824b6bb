"""Filme model for storing movie records."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmesapi.models.sessao import Sessao


class Filme(Base, TimestampMixin):
    """
    Movie model.

    Field constraints (genero length, duracao range) are enforced on the
    inbound DTOs before anything reaches this table.
    """

    __tablename__ = "filmes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    titulo: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    genero: Mapped[str] = mapped_column(String(50), nullable=False)
    duracao: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    sessoes: Mapped[list["Sessao"]] = relationship(
        back_populates="filme",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Sessao.id",
    )

    def __repr__(self) -> str:
        return f"<Filme(id={self.id!r}, titulo={self.titulo!r}, duracao={self.duracao})>"
