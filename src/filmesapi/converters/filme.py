from filmesapi.converters import sessao as sessao_converter
from filmesapi.models.filme import Filme
from filmesapi.schemas.filme import CreateFilmeDto, ReadFilmeDto, UpdateFilmeDto


def to_read(filme: Filme) -> ReadFilmeDto:
    return ReadFilmeDto(
        id=filme.id,
        titulo=filme.titulo,
        genero=filme.genero,
        duracao=filme.duracao,
        sessoes=[sessao_converter.to_read(sessao) for sessao in filme.sessoes],
    )


def to_entity(filme_dto: CreateFilmeDto) -> Filme:
    # The id is assigned by the database on flush
    return Filme(
        titulo=filme_dto.titulo,
        genero=filme_dto.genero,
        duracao=filme_dto.duracao,
        sessoes=[],
    )


def to_update(filme: Filme) -> UpdateFilmeDto:
    return UpdateFilmeDto(
        titulo=filme.titulo,
        genero=filme.genero,
        duracao=filme.duracao,
    )


def apply_update(filme_dto: UpdateFilmeDto, filme: Filme) -> Filme:
    filme.titulo = filme_dto.titulo
    filme.genero = filme_dto.genero
    filme.duracao = filme_dto.duracao
    return filme
