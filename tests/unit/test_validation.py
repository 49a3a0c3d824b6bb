"""Unit tests for transfer object validation and error reporting."""

import pytest

from filmesapi.exceptions import FieldViolation, PatchApplicationError, ValidationError
from filmesapi.schemas.cinema import CreateCinemaDto
from filmesapi.schemas.filme import CreateFilmeDto
from filmesapi.schemas.sessao import CreateSessaoDto
from filmesapi.validation import validate


class TestValidate:
    def test_returns_model_for_valid_data(self) -> None:
        dto = validate(CreateFilmeDto, {"titulo": "Aquarius", "genero": "Drama", "duracao": 146})
        assert dto == CreateFilmeDto(titulo="Aquarius", genero="Drama", duracao=146)

    def test_accepts_python_field_names(self) -> None:
        dto = validate(
            CreateSessaoDto,
            {"filme_id": 1, "cinema_id": 2, "horario_de_encerramento": "2026-01-01T10:00:00"},
        )
        assert dto.filme_id == 1

    @pytest.mark.parametrize(
        ("duracao", "valid"),
        [(69, False), (70, True), (600, True), (601, False)],
    )
    def test_duracao_bounds(self, duracao: int, valid: bool) -> None:
        data = {"titulo": "Aquarius", "genero": "Drama", "duracao": duracao}
        if valid:
            assert validate(CreateFilmeDto, data).duracao == duracao
        else:
            with pytest.raises(ValidationError) as exc_info:
                validate(CreateFilmeDto, data)
            assert exc_info.value.errors() == {
                "duracao": ["O filme deve ter entre 70 e 600 minutos de duração."]
            }

    def test_genero_of_fifty_characters_is_accepted(self) -> None:
        data = {"titulo": "Aquarius", "genero": "g" * 50, "duracao": 146}
        assert validate(CreateFilmeDto, data).genero == "g" * 50

    def test_null_is_reported_as_required(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate(CreateFilmeDto, {"titulo": None, "genero": "Drama", "duracao": 146})
        assert exc_info.value.errors() == {"titulo": ["O Título é obrigatório."]}

    def test_wrong_type_keeps_default_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate(CreateFilmeDto, {"titulo": "Aquarius", "genero": "Drama", "duracao": "longo"})
        errors = exc_info.value.errors()
        assert list(errors) == ["duracao"]
        assert errors["duracao"] != ["O filme deve ter entre 70 e 600 minutos de duração."]

    def test_whitespace_only_is_reported_as_required(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate(CreateFilmeDto, {"titulo": " \n ", "genero": "Drama", "duracao": 146})
        assert exc_info.value.errors() == {"titulo": ["O Título é obrigatório."]}

    def test_numeric_strings_are_not_coerced(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate(
                CreateSessaoDto,
                {"filmeId": "1", "cinemaId": 2, "horarioDeEncerramento": "2026-01-01T10:00:00"},
            )
        assert list(exc_info.value.errors()) == ["filmeId"]

    def test_nested_field_uses_nested_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate(CreateCinemaDto, {"nome": "Cine Joia", "endereco": {"logradouro": "Rua X"}})
        assert exc_info.value.errors() == {"endereco.numero": ["O Número é obrigatório."]}

    def test_non_object_body(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate(CreateFilmeDto, [1, 2])
        assert "body" in exc_info.value.errors()


class TestValidationError:
    def test_groups_messages_by_field_in_order(self) -> None:
        error = ValidationError(
            [
                FieldViolation("b", "first"),
                FieldViolation("a", "second"),
                FieldViolation("b", "third"),
            ]
        )
        assert error.errors() == {"b": ["first", "third"], "a": ["second"]}
        assert list(error.errors()) == ["b", "a"]

    def test_problem_document(self) -> None:
        problem = ValidationError([FieldViolation("titulo", "O Título é obrigatório.")]).to_problem()

        assert problem["status"] == 400
        assert problem["title"] == "One or more validation errors occurred."
        assert problem["errors"] == {"titulo": ["O Título é obrigatório."]}

    def test_patch_error_is_keyed_by_path(self) -> None:
        assert PatchApplicationError("/foo", "not found").errors() == {"/foo": ["not found"]}

    def test_patch_error_at_root(self) -> None:
        assert PatchApplicationError("", "bad").errors() == {"patch": ["bad"]}
