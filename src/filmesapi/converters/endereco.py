from filmesapi.models.endereco import Endereco
from filmesapi.schemas.endereco import CreateEnderecoDto, ReadEnderecoDto, UpdateEnderecoDto


def to_read(endereco: Endereco) -> ReadEnderecoDto:
    return ReadEnderecoDto(
        id=endereco.id,
        logradouro=endereco.logradouro,
        numero=endereco.numero,
    )


def to_entity(endereco_dto: CreateEnderecoDto) -> Endereco:
    return Endereco(
        logradouro=endereco_dto.logradouro,
        numero=endereco_dto.numero,
    )


def to_update(endereco: Endereco) -> UpdateEnderecoDto:
    return UpdateEnderecoDto(
        logradouro=endereco.logradouro,
        numero=endereco.numero,
    )


def apply_update(endereco_dto: UpdateEnderecoDto, endereco: Endereco) -> Endereco:
    endereco.logradouro = endereco_dto.logradouro
    endereco.numero = endereco_dto.numero
    return endereco
