"""Rotas /api/v1/instrutores — mapeamento HTTP sobre o repositório.

Invariants:
    - POST devolve 201 com o registro criado (id gerado, campos ecoados)
    - ID inválido → 400, instrutor inexistente → 404, falha do banco → 500
    - PUT/PATCH devolvem o registro relido do banco
    - DELETE devolve 200 sem corpo
"""

BASE = "/api/v1/instrutores"

ANA = {
    "nome": "Ana",
    "dataNascimento": "1990-05-10",
    "cpf": "111",
    "telefone": "11999990000",
    "sexo": "F",
    "email": "ana@academia.com",
    "especialidade": "Jiu-Jitsu",
    "experiencia": 8,
    "ativo": True,
}


def _create(client, payload=None):
    res = client.post(BASE, json=payload or ANA)
    assert res.status_code == 201
    return res.json()


def test_root_lists_instrutores_endpoint(client):
    res = client.get("/")

    assert res.status_code == 200
    assert {"instrutores": BASE} in res.json()["endpoints"]


def test_create_echoes_fields_with_generated_id(client):
    body = _create(client)

    assert body["id"] == 1
    for key, value in ANA.items():
        assert body[key] == value


def test_create_accepts_snake_case_birth_date(client):
    payload = {**ANA}
    payload["data_nascimento"] = payload.pop("dataNascimento")

    body = _create(client, payload)

    assert body["dataNascimento"] == "1990-05-10"


def test_list_empty(client):
    res = client.get(BASE)

    assert res.status_code == 200
    assert res.json() == []


def test_list_returns_created(client):
    _create(client)
    _create(client, {**ANA, "nome": "Bruno", "cpf": "222"})

    res = client.get(BASE)

    assert {i["nome"] for i in res.json()} == {"Ana", "Bruno"}


def test_get_by_id(client):
    created = _create(client)

    res = client.get(f"{BASE}/{created['id']}")

    assert res.status_code == 200
    assert res.json() == created


def test_get_missing_returns_404(client):
    res = client.get(f"{BASE}/999")

    assert res.status_code == 404
    assert res.json()["detail"] == "Instrutor não encontrado"


def test_get_invalid_id_returns_400(client):
    res = client.get(f"{BASE}/abc")

    assert res.status_code == 400
    assert res.json()["detail"] == "Informe um ID válido"


def test_patch_scenario_keeps_name_and_deactivates(client):
    created = _create(client)

    res = client.patch(f"{BASE}/{created['id']}", json={**ANA, "ativo": False})

    assert res.status_code == 200
    assert res.json()["ativo"] is False
    assert res.json()["nome"] == "Ana"


def test_patch_omitted_fields_are_cleared(client):
    created = _create(client)

    res = client.patch(f"{BASE}/{created['id']}", json={"ativo": False})

    assert res.status_code == 200
    assert res.json()["nome"] is None
    assert res.json()["cpf"] is None


def test_patch_missing_returns_404(client):
    res = client.patch(f"{BASE}/999", json=ANA)

    assert res.status_code == 404


def test_put_replaces_every_field(client):
    created = _create(client)
    novo = {
        "nome": "Ana Souza",
        "dataNascimento": "1991-01-02",
        "cpf": "333",
        "telefone": "1133334444",
        "sexo": "F",
        "email": "souza@academia.com",
        "especialidade": "Muay Thai",
        "experiencia": 10,
        "ativo": False,
    }

    res = client.put(f"{BASE}/{created['id']}", json=novo)

    assert res.status_code == 200
    assert res.json() == {"id": created["id"], **novo}


def test_put_missing_returns_404(client):
    res = client.put(f"{BASE}/999", json=ANA)

    assert res.status_code == 404


def test_put_invalid_id_returns_400(client):
    res = client.put(f"{BASE}/x1", json=ANA)

    assert res.status_code == 400


def test_delete_then_delete_again(client):
    created = _create(client)

    first = client.delete(f"{BASE}/{created['id']}")
    second = client.delete(f"{BASE}/{created['id']}")

    assert first.status_code == 200
    assert first.content == b""
    assert second.status_code == 404
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_delete_invalid_id_returns_400(client):
    res = client.delete(f"{BASE}/abc")

    assert res.status_code == 400


def test_store_failure_returns_generic_500(broken_client):
    res = broken_client.get(BASE)

    assert res.status_code == 500
    assert res.json() == {"detail": "Erro interno"}


def test_store_failure_on_create_returns_500(broken_client):
    res = broken_client.post(BASE, json=ANA)

    assert res.status_code == 500


def test_out_of_range_id_returns_json_500(client):
    res = client.get(f"{BASE}/99999999999999999999")

    assert res.status_code == 500
    assert res.headers["content-type"].startswith("application/json")
    assert res.json() == {"detail": "Erro interno"}


def test_unexpected_error_returns_json_500(crashing_client, caplog):
    with caplog.at_level("ERROR"):
        res = crashing_client.get(BASE)

    assert res.status_code == 500
    assert res.json() == {"detail": "Erro interno"}
    assert any(
        "Erro - GET /api/v1/instrutores" in r.getMessage() for r in caplog.records
    )
