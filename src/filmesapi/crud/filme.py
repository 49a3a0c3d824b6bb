from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.models import Cinema, Filme, Sessao


async def get_filme_by_id(*, db: AsyncSession, id: int) -> Filme | None:
    """
    Retrieve a filme by its ID, with its sessions.

    Args:
        db: Database session
        id: The ID of the filme to retrieve

    Returns:
        The filme if found, otherwise None
    """
    return await db.get(Filme, id)


async def get_filmes(
    *,
    db: AsyncSession,
    skip: int,
    take: int,
    nome_cinema: str | None = None,
) -> list[Filme]:
    """
    Retrieve a page of filmes ordered by ID.

    Args:
        db: Database session
        skip: Number of filmes to skip
        take: Maximum number of filmes to return
        nome_cinema: When given, only filmes with at least one session at a
            cinema with exactly this name

    Returns:
        The filmes in the requested window, possibly empty
    """
    stmt = select(Filme).order_by(Filme.id)
    if nome_cinema is not None:
        stmt = stmt.where(Filme.sessoes.any(Sessao.cinema.has(Cinema.nome == nome_cinema)))
    stmt = stmt.offset(skip).limit(take)

    result = await db.execute(stmt)
    return list(result.scalars().all())


async def add_filme(*, db: AsyncSession, filme: Filme) -> Filme:
    """Add a new filme and flush so the database assigns its ID."""
    db.add(filme)
    await db.flush()
    return filme


async def delete_filme(*, db: AsyncSession, filme: Filme) -> None:
    """Delete a filme; its sessions are deleted with it."""
    await db.delete(filme)
