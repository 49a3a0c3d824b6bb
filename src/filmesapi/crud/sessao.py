from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.models import Sessao


async def get_sessao_by_id(*, db: AsyncSession, id: int) -> Sessao | None:
    """
    Retrieve a sessao by its ID.

    Args:
        db: Database session
        id: The ID of the sessao to retrieve

    Returns:
        The sessao, with its filme and cinema joined, or None
    """
    return await db.get(Sessao, id)


async def get_sessoes(
    *,
    db: AsyncSession,
    skip: int,
    take: int,
    filme_id: int | None = None,
    cinema_id: int | None = None,
) -> list[Sessao]:
    """
    Retrieve a page of sessoes ordered by ID, optionally for one filme and/or cinema.
    """
    stmt = select(Sessao).order_by(Sessao.id)
    if filme_id is not None:
        stmt = stmt.where(Sessao.filme_id == filme_id)
    if cinema_id is not None:
        stmt = stmt.where(Sessao.cinema_id == cinema_id)
    stmt = stmt.offset(skip).limit(take)

    result = await db.execute(stmt)
    return list(result.scalars().all())


async def add_sessao(*, db: AsyncSession, sessao: Sessao) -> Sessao:
    db.add(sessao)
    await db.flush()
    return sessao


async def delete_sessao(*, db: AsyncSession, sessao: Sessao) -> None:
    await db.delete(sessao)
