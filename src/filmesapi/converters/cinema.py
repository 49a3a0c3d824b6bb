from filmesapi.converters import endereco as endereco_converter
from filmesapi.converters import sessao as sessao_converter
from filmesapi.models.cinema import Cinema
from filmesapi.schemas.cinema import CreateCinemaDto, ReadCinemaDto, UpdateCinemaDto


def to_read(cinema: Cinema) -> ReadCinemaDto:
    """Project a cinema with its address and sessions, which must already be loaded."""
    return ReadCinemaDto(
        id=cinema.id,
        nome=cinema.nome,
        endereco=endereco_converter.to_read(cinema.endereco),
        sessoes=[sessao_converter.to_read(sessao) for sessao in cinema.sessoes],
    )


def to_entity(cinema_dto: CreateCinemaDto) -> Cinema:
    return Cinema(
        nome=cinema_dto.nome,
        endereco=endereco_converter.to_entity(cinema_dto.endereco),
        sessoes=[],
    )


def to_update(cinema: Cinema) -> UpdateCinemaDto:
    return UpdateCinemaDto(
        nome=cinema.nome,
        endereco=endereco_converter.to_update(cinema.endereco),
    )


def apply_update(cinema_dto: UpdateCinemaDto, cinema: Cinema) -> Cinema:
    # The address is updated in place and keeps its id
    cinema.nome = cinema_dto.nome
    endereco_converter.apply_update(cinema_dto.endereco, cinema.endereco)
    return cinema
