from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.models import Cinema, Filme, Sessao


async def get_cinema_by_id(*, db: AsyncSession, id: int) -> Cinema | None:
    """
    Retrieve a cinema by its ID.

    The address is joined and the sessions selected in the same round of
    loading, so the result can be projected without further queries.
    """
    return await db.get(Cinema, id)


async def get_cinemas(
    *,
    db: AsyncSession,
    skip: int,
    take: int,
    nome_filme: str | None = None,
) -> list[Cinema]:
    """
    Retrieve a page of cinemas ordered by ID.

    Args:
        db: Database session
        skip: Number of cinemas to skip
        take: Maximum number of cinemas to return
        nome_filme: When given, only cinemas with at least one session of a
            filme with exactly this title

    Returns:
        The cinemas in the requested window, possibly empty
    """
    stmt = select(Cinema).order_by(Cinema.id)
    if nome_filme is not None:
        stmt = stmt.where(Cinema.sessoes.any(Sessao.filme.has(Filme.titulo == nome_filme)))
    stmt = stmt.offset(skip).limit(take)

    result = await db.execute(stmt)
    return list(result.scalars().all())


async def add_cinema(*, db: AsyncSession, cinema: Cinema) -> Cinema:
    """Add a new cinema together with its address."""
    db.add(cinema)
    await db.flush()
    return cinema


async def delete_cinema(*, db: AsyncSession, cinema: Cinema) -> None:
    """Delete a cinema; its address and sessions are deleted with it."""
    await db.delete(cinema)
