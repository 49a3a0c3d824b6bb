"""Sessao model for screenings of a filme at a cinema."""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from filmesapi.models.cinema import Cinema
    from filmesapi.models.filme import Filme


class Sessao(Base, TimestampMixin):
    """
    Screening model.

    Links one filme and one cinema. Only the end time is stored; the start
    time follows from the filme's duration.
    """

    __tablename__ = "sessoes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Foreign keys
    filme_id: Mapped[int] = mapped_column(
        ForeignKey("filmes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cinema_id: Mapped[int] = mapped_column(
        ForeignKey("cinemas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    horario_de_encerramento: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    # Relationships
    filme: Mapped["Filme"] = relationship(back_populates="sessoes", lazy="joined")
    cinema: Mapped["Cinema"] = relationship(back_populates="sessoes", lazy="joined")

    @property
    def horario_de_inicio(self) -> datetime:
        return self.horario_de_encerramento - timedelta(minutes=self.filme.duracao)

    def __repr__(self) -> str:
        return (
            f"<Sessao(filme_id={self.filme_id!r}, "
            f"cinema_id={self.cinema_id!r}, "
            f"horario_de_encerramento={self.horario_de_encerramento})>"
        )
