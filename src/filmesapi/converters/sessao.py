from filmesapi.models.cinema import Cinema
from filmesapi.models.filme import Filme
from filmesapi.models.sessao import Sessao
from filmesapi.schemas.sessao import CreateSessaoDto, ReadSessaoDto, UpdateSessaoDto


def to_read(sessao: Sessao) -> ReadSessaoDto:
    return ReadSessaoDto(
        id=sessao.id,
        filme_id=sessao.filme_id,
        cinema_id=sessao.cinema_id,
        horario_de_inicio=sessao.horario_de_inicio,
        horario_de_encerramento=sessao.horario_de_encerramento,
    )


def to_entity(sessao_dto: CreateSessaoDto, *, filme: Filme, cinema: Cinema) -> Sessao:
    """
    Build a new Sessao from its creation payload.

    The referenced filme and cinema are passed in already loaded so the
    relationships are set on the object itself, not only the foreign keys.
    """
    return Sessao(
        filme=filme,
        cinema=cinema,
        horario_de_encerramento=sessao_dto.horario_de_encerramento,
    )


def to_update(sessao: Sessao) -> UpdateSessaoDto:
    return UpdateSessaoDto(
        filme_id=sessao.filme_id,
        cinema_id=sessao.cinema_id,
        horario_de_encerramento=sessao.horario_de_encerramento,
    )


def apply_update(
    sessao_dto: UpdateSessaoDto,
    sessao: Sessao,
    *,
    filme: Filme,
    cinema: Cinema,
) -> Sessao:
    sessao.filme = filme
    sessao.cinema = cinema
    sessao.horario_de_encerramento = sessao_dto.horario_de_encerramento
    return sessao
