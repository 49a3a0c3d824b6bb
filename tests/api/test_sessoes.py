"""Tests for the sessao API endpoints."""

import pytest
from httpx import AsyncClient

from tests.factories import create_cinema, create_filme, create_sessao


@pytest.fixture
async def filme(client: AsyncClient) -> dict:
    return await create_filme(client, duracao=113)


@pytest.fixture
async def cinema(client: AsyncClient) -> dict:
    return await create_cinema(client)


async def test_create_derives_start_from_filme_duration(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    response = await client.post(
        "/sessao",
        json={
            "filmeId": filme["id"],
            "cinemaId": cinema["id"],
            "horarioDeEncerramento": "2026-11-06T21:00:00",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["filmeId"] == filme["id"]
    assert body["cinemaId"] == cinema["id"]
    assert body["horarioDeEncerramento"] == "2026-11-06T21:00:00"
    assert body["horarioDeInicio"] == "2026-11-06T19:07:00"
    assert response.headers["location"].endswith(f"/sessao/{body['id']}")


async def test_create_normalises_offset_to_utc(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    sessao = await create_sessao(
        client, filme["id"], cinema["id"], horario_de_encerramento="2026-11-06T21:00:00-03:00"
    )

    assert sessao["horarioDeEncerramento"] == "2026-11-07T00:00:00"


async def test_create_with_unknown_references_reports_both(client: AsyncClient) -> None:
    response = await client.post(
        "/sessao",
        json={"filmeId": 404, "cinemaId": 405, "horarioDeEncerramento": "2026-11-06T21:00:00"},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {
        "filmeId": ["Filme com ID 404 não encontrado."],
        "cinemaId": ["Cinema com ID 405 não encontrado."],
    }
    assert (await client.get("/sessao")).json() == []


async def test_create_without_fields_is_rejected(client: AsyncClient) -> None:
    response = await client.post("/sessao", json={})

    assert response.status_code == 400
    assert response.json()["errors"] == {
        "filmeId": ["O campo FilmeId é obrigatório."],
        "cinemaId": ["O campo CinemaId é obrigatório."],
        "horarioDeEncerramento": ["O campo HorarioDeEncerramento é obrigatório."],
    }


async def test_sessao_appears_under_filme_and_cinema(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    sessao = await create_sessao(client, filme["id"], cinema["id"])

    filme_body = (await client.get(f"/filme/{filme['id']}")).json()
    cinema_body = (await client.get(f"/cinema/{cinema['id']}")).json()

    assert filme_body["sessoes"] == [sessao]
    assert cinema_body["sessoes"] == [sessao]


async def test_list_filters_by_filme_and_cinema(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    outro_filme = await create_filme(client, titulo="Bacurau", duracao=131)
    outro_cinema = await create_cinema(client, nome="Cine Odeon")
    a = await create_sessao(client, filme["id"], cinema["id"])
    b = await create_sessao(client, outro_filme["id"], cinema["id"])
    c = await create_sessao(client, filme["id"], outro_cinema["id"])

    by_filme = await client.get("/sessao", params={"filmeId": filme["id"]})
    by_cinema = await client.get("/sessao", params={"cinemaId": cinema["id"]})
    by_both = await client.get(
        "/sessao", params={"filmeId": filme["id"], "cinemaId": outro_cinema["id"]}
    )

    assert [s["id"] for s in by_filme.json()] == [a["id"], c["id"]]
    assert [s["id"] for s in by_cinema.json()] == [a["id"], b["id"]]
    assert [s["id"] for s in by_both.json()] == [c["id"]]


async def test_get_missing_returns_404(client: AsyncClient) -> None:
    response = await client.get("/sessao/1")

    assert response.status_code == 404
    assert response.content == b""


async def test_put_moves_sessao_to_another_filme(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    sessao = await create_sessao(client, filme["id"], cinema["id"])
    longo = await create_filme(client, titulo="Lavoura Arcaica", duracao=163)

    response = await client.put(
        f"/sessao/{sessao['id']}",
        json={
            "filmeId": longo["id"],
            "cinemaId": cinema["id"],
            "horarioDeEncerramento": "2026-11-06T23:00:00",
        },
    )

    assert response.status_code == 204
    fetched = (await client.get(f"/sessao/{sessao['id']}")).json()
    assert fetched["filmeId"] == longo["id"]
    assert fetched["horarioDeInicio"] == "2026-11-06T20:17:00"
    assert (await client.get(f"/filme/{filme['id']}")).json()["sessoes"] == []


async def test_put_with_unknown_cinema_leaves_sessao_unchanged(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    sessao = await create_sessao(client, filme["id"], cinema["id"])

    response = await client.put(
        f"/sessao/{sessao['id']}",
        json={
            "filmeId": filme["id"],
            "cinemaId": 999,
            "horarioDeEncerramento": "2026-11-06T23:00:00",
        },
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"cinemaId": ["Cinema com ID 999 não encontrado."]}
    assert (await client.get(f"/sessao/{sessao['id']}")).json() == sessao


async def test_patch_end_time(client: AsyncClient, filme: dict, cinema: dict) -> None:
    sessao = await create_sessao(client, filme["id"], cinema["id"])

    response = await client.patch(
        f"/sessao/{sessao['id']}",
        json=[{"op": "replace", "path": "/horarioDeEncerramento", "value": "2026-11-06T22:53:00"}],
    )

    assert response.status_code == 204
    fetched = (await client.get(f"/sessao/{sessao['id']}")).json()
    assert fetched["horarioDeEncerramento"] == "2026-11-06T22:53:00"
    assert fetched["horarioDeInicio"] == "2026-11-06T21:00:00"


async def test_patch_to_unknown_filme_is_rejected(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    sessao = await create_sessao(client, filme["id"], cinema["id"])

    response = await client.patch(
        f"/sessao/{sessao['id']}",
        json=[{"op": "replace", "path": "/filmeId", "value": 12345}],
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"filmeId": ["Filme com ID 12345 não encontrado."]}


async def test_delete_keeps_filme_and_cinema(
    client: AsyncClient, filme: dict, cinema: dict
) -> None:
    sessao = await create_sessao(client, filme["id"], cinema["id"])

    first = await client.delete(f"/sessao/{sessao['id']}")
    second = await client.delete(f"/sessao/{sessao['id']}")

    assert first.status_code == 204
    assert second.status_code == 404
    assert (await client.get(f"/filme/{filme['id']}")).json()["sessoes"] == []
    assert (await client.get(f"/cinema/{cinema['id']}")).status_code == 200
