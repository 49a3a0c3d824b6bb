from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.models import Endereco


async def get_endereco_by_id(*, db: AsyncSession, id: int) -> Endereco | None:
    return await db.get(Endereco, id)


async def get_enderecos(*, db: AsyncSession, skip: int, take: int) -> list[Endereco]:
    stmt = select(Endereco).order_by(Endereco.id).offset(skip).limit(take)
    result = await db.execute(stmt)
    return list(result.scalars().all())
