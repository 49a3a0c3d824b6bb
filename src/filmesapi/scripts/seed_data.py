"""Seed script to populate sample filmes, cinemas and sessoes."""

import asyncio
from datetime import datetime

from sqlalchemy import select

from filmesapi.database import AsyncSessionLocal
from filmesapi.models import Cinema, Endereco, Filme, Sessao

FILMES_DATA = [
    {"titulo": "Central do Brasil", "genero": "Drama", "duracao": 113},
    {"titulo": "Cidade de Deus", "genero": "Crime", "duracao": 130},
    {"titulo": "O Auto da Compadecida", "genero": "Comédia", "duracao": 104},
]

CINEMAS_DATA = [
    {
        "nome": "Cine Belas Artes",
        "endereco": {"logradouro": "Rua da Consolação", "numero": 2423},
    },
    {
        "nome": "Cine Odeon",
        "endereco": {"logradouro": "Praça Floriano", "numero": 7},
    },
]

# (filme titulo, cinema nome, horario de encerramento)
SESSOES_DATA = [
    ("Central do Brasil", "Cine Belas Artes", datetime(2026, 11, 6, 21, 0)),
    ("Cidade de Deus", "Cine Belas Artes", datetime(2026, 11, 6, 23, 30)),
    ("Cidade de Deus", "Cine Odeon", datetime(2026, 11, 7, 22, 10)),
]


async def seed_data() -> None:
    """Seed the database with sample data, skipping records that already exist."""
    async with AsyncSessionLocal() as session:
        filmes: dict[str, Filme] = {}
        for filme_data in FILMES_DATA:
            result = await session.execute(
                select(Filme).where(Filme.titulo == filme_data["titulo"])
            )
            filme = result.scalars().first()
            if filme:
                print(f"Filme {filme_data['titulo']!r} already exists, skipping")
            else:
                filme = Filme(**filme_data, sessoes=[])
                session.add(filme)
                print(f"Added filme: {filme_data['titulo']}")
            filmes[filme.titulo] = filme

        cinemas: dict[str, Cinema] = {}
        for cinema_data in CINEMAS_DATA:
            result = await session.execute(select(Cinema).where(Cinema.nome == cinema_data["nome"]))
            cinema = result.scalars().first()
            if cinema:
                print(f"Cinema {cinema_data['nome']!r} already exists, skipping")
            else:
                cinema = Cinema(
                    nome=cinema_data["nome"],
                    endereco=Endereco(**cinema_data["endereco"]),
                    sessoes=[],
                )
                session.add(cinema)
                print(f"Added cinema: {cinema_data['nome']}")
            cinemas[cinema.nome] = cinema

        await session.flush()

        for titulo, nome, encerramento in SESSOES_DATA:
            filme = filmes[titulo]
            cinema = cinemas[nome]
            result = await session.execute(
                select(Sessao.id).where(
                    Sessao.filme_id == filme.id,
                    Sessao.cinema_id == cinema.id,
                    Sessao.horario_de_encerramento == encerramento,
                )
            )
            if result.first():
                continue
            session.add(Sessao(filme=filme, cinema=cinema, horario_de_encerramento=encerramento))
            print(f"Added sessao: {titulo} at {nome}, ending {encerramento:%Y-%m-%d %H:%M}")

        await session.commit()
        print("Seeding complete")


if __name__ == "__main__":
    asyncio.run(seed_data())
