"""Tests for the cinema API endpoints."""

from httpx import AsyncClient

from tests.factories import CINEMA_PAYLOAD, create_cinema, create_filme, create_sessao


async def test_create_returns_cinema_with_nested_endereco(client: AsyncClient) -> None:
    response = await client.post("/cinema", json=CINEMA_PAYLOAD)

    assert response.status_code == 201
    body = response.json()
    assert body["nome"] == "Cine Belas Artes"
    assert body["endereco"]["logradouro"] == "Rua da Consolação"
    assert body["endereco"]["numero"] == 2423
    assert isinstance(body["endereco"]["id"], int)
    assert body["sessoes"] == []
    assert response.headers["location"].endswith(f"/cinema/{body['id']}")


async def test_create_without_endereco_is_rejected(client: AsyncClient) -> None:
    response = await client.post("/cinema", json={"nome": "Cine Odeon"})

    assert response.status_code == 400
    assert response.json()["errors"] == {"endereco": ["O Endereço é obrigatório."]}
    assert (await client.get("/cinema")).json() == []


async def test_create_reports_nested_endereco_violations(client: AsyncClient) -> None:
    response = await client.post(
        "/cinema",
        json={"nome": "", "endereco": {"logradouro": "", "numero": 10}},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {
        "nome": ["O Nome é obrigatório."],
        "endereco.logradouro": ["O Logradouro é obrigatório."],
    }


async def test_create_rejects_overlong_nome(client: AsyncClient) -> None:
    response = await client.post("/cinema", json={**CINEMA_PAYLOAD, "nome": "n" * 201})

    assert response.status_code == 400
    assert "nome" in response.json()["errors"]


async def test_get_returns_created_cinema(client: AsyncClient) -> None:
    cinema = await create_cinema(client)

    response = await client.get(f"/cinema/{cinema['id']}")

    assert response.status_code == 200
    assert response.json() == cinema


async def test_get_missing_returns_404(client: AsyncClient) -> None:
    response = await client.get("/cinema/42")

    assert response.status_code == 404
    assert response.content == b""


async def test_list_pages_in_id_order(client: AsyncClient) -> None:
    ids = [(await create_cinema(client, nome=f"Cine {n}"))["id"] for n in range(4)]

    response = await client.get("/cinema", params={"skip": 2, "take": 5})

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == ids[2:]


async def test_list_with_take_zero_is_empty(client: AsyncClient) -> None:
    await create_cinema(client)

    response = await client.get("/cinema", params={"take": 0})

    assert response.status_code == 200
    assert response.json() == []


async def test_list_filters_by_filme_title(client: AsyncClient) -> None:
    filme = await create_filme(client, titulo="Bacurau")
    exibe = await create_cinema(client, nome="Cine Odeon")
    await create_cinema(client, nome="Cine Joia")
    await create_sessao(client, filme["id"], exibe["id"])

    response = await client.get("/cinema", params={"nomeFilme": "Bacurau"})

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [exibe["id"]]


async def test_list_filter_with_unknown_title_is_empty(client: AsyncClient) -> None:
    await create_cinema(client)

    response = await client.get("/cinema", params={"nomeFilme": "Inexistente"})

    assert response.json() == []


async def test_put_updates_nome_and_endereco_in_place(client: AsyncClient) -> None:
    cinema = await create_cinema(client)

    response = await client.put(
        f"/cinema/{cinema['id']}",
        json={"nome": "Cine Marquise", "endereco": {"logradouro": "Av. Paulista", "numero": 900}},
    )

    assert response.status_code == 204
    fetched = (await client.get(f"/cinema/{cinema['id']}")).json()
    assert fetched["nome"] == "Cine Marquise"
    assert fetched["endereco"] == {
        "id": cinema["endereco"]["id"],
        "logradouro": "Av. Paulista",
        "numero": 900,
    }


async def test_put_missing_returns_404(client: AsyncClient) -> None:
    response = await client.put("/cinema/7", json=CINEMA_PAYLOAD)

    assert response.status_code == 404


async def test_patch_nested_endereco_field(client: AsyncClient) -> None:
    cinema = await create_cinema(client)

    response = await client.patch(
        f"/cinema/{cinema['id']}",
        json=[{"op": "replace", "path": "/endereco/numero", "value": 100}],
    )

    assert response.status_code == 204
    fetched = (await client.get(f"/cinema/{cinema['id']}")).json()
    assert fetched["endereco"]["numero"] == 100
    assert fetched["endereco"]["logradouro"] == CINEMA_PAYLOAD["endereco"]["logradouro"]
    assert fetched["nome"] == cinema["nome"]


async def test_patch_removing_nome_is_rejected(client: AsyncClient) -> None:
    cinema = await create_cinema(client)

    response = await client.patch(
        f"/cinema/{cinema['id']}",
        json=[{"op": "remove", "path": "/nome"}],
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"nome": ["O Nome é obrigatório."]}
    assert (await client.get(f"/cinema/{cinema['id']}")).json()["nome"] == cinema["nome"]


async def test_delete_removes_endereco_and_sessoes(client: AsyncClient) -> None:
    filme = await create_filme(client)
    cinema = await create_cinema(client)
    sessao = await create_sessao(client, filme["id"], cinema["id"])

    response = await client.delete(f"/cinema/{cinema['id']}")

    assert response.status_code == 204
    assert (await client.get(f"/cinema/{cinema['id']}")).status_code == 404
    assert (await client.get(f"/endereco/{cinema['endereco']['id']}")).status_code == 404
    assert (await client.get(f"/sessao/{sessao['id']}")).status_code == 404
    assert (await client.get(f"/filme/{filme['id']}")).json()["sessoes"] == []


async def test_delete_missing_returns_404(client: AsyncClient) -> None:
    response = await client.delete("/cinema/3")

    assert response.status_code == 404


async def test_list_with_empty_filme_title_is_unfiltered(client: AsyncClient) -> None:
    cinema = await create_cinema(client)

    response = await client.get("/cinema", params={"nomeFilme": ""})

    assert [c["id"] for c in response.json()] == [cinema["id"]]


async def test_patch_replaces_endereco_object_with_any_member_casing(client: AsyncClient) -> None:
    cinema = await create_cinema(client)

    response = await client.patch(
        f"/cinema/{cinema['id']}",
        json=[
            {
                "op": "replace",
                "path": "/endereco",
                "value": {"Logradouro": "Rua Augusta", "NUMERO": 3},
            }
        ],
    )

    assert response.status_code == 204
    fetched = (await client.get(f"/cinema/{cinema['id']}")).json()
    assert fetched["endereco"] == {
        "id": cinema["endereco"]["id"],
        "logradouro": "Rua Augusta",
        "numero": 3,
    }


async def test_create_rejects_blank_nome_and_logradouro(client: AsyncClient) -> None:
    response = await client.post(
        "/cinema",
        json={"nome": "  ", "endereco": {"logradouro": "\t", "numero": 10}},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {
        "nome": ["O Nome é obrigatório."],
        "endereco.logradouro": ["O Logradouro é obrigatório."],
    }
