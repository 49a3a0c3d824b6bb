"""Endereco model for cinema addresses."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmesapi.models.cinema import Cinema


class Endereco(Base, TimestampMixin):
    """
    Address model.

    Owned by exactly one cinema and deleted together with it.
    """

    __tablename__ = "enderecos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    logradouro: Mapped[str] = mapped_column(String(300), nullable=False)
    numero: Mapped[int] = mapped_column(Integer, nullable=False)

    cinema_id: Mapped[int] = mapped_column(
        ForeignKey("cinemas.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    # Relationships
    cinema: Mapped["Cinema"] = relationship(back_populates="endereco")

    def __repr__(self) -> str:
        return (
            f"<Endereco(id={self.id!r}, logradouro={self.logradouro!r}, "
            f"numero={self.numero})>"
        )
