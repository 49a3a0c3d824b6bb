"""Cinema model for storing cinema venues."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmesapi.models.endereco import Endereco
    from filmesapi.models.sessao import Sessao


class Cinema(Base, TimestampMixin):
    """
    Cinema venue model.

    A cinema always has exactly one address, and owns its sessions.
    """

    __tablename__ = "cinemas"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    # Relationships
    endereco: Mapped["Endereco"] = relationship(
        back_populates="cinema",
        cascade="all, delete-orphan",
        uselist=False,
        lazy="joined",
    )
    sessoes: Mapped[list["Sessao"]] = relationship(
        back_populates="cinema",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Sessao.id",
    )

    def __repr__(self) -> str:
        return f"<Cinema(id={self.id!r}, nome={self.nome!r})>"
