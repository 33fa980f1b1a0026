import httpx
import pytest
from fastapi.testclient import TestClient
from pokedex.main import app
from pokedex.dependencies import get_poke_client, get_shakespeare_client, get_yoda_client
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.clients.translation_client import TranslationClient
from pokedex.models import TranslationStyle

POKEAPI_URL = "http://pokeapi.test/api/v2"
YODA_URL = "http://funtranslations.test/translate/yoda.json"
SHAKESPEARE_URL = "http://funtranslations.test/translate/shakespeare.json"

# Mock data for external APIs
MOCK_POKEMON = {
    "mewtwo": {"id": 150, "name": "mewtwo"},
    "zubat": {"id": 41, "name": "zubat"},
    "ditto": {"id": 132, "name": "ditto"},
}

MOCK_SPECIES = {
    150: {
        "is_legendary": True,
        "habitat": {"name": "rare"},
        "flavor_text_entries": [
            {"flavor_text": "Il a été créé par un scientifique.", "language": {"name": "fr"}},
            {"flavor_text": "It was created by\na scientist after\fyears of gene splicing.", "language": {"name": "en"}},
        ]
    },
    41: {
        "is_legendary": False,
        "habitat": {"name": "cave"},
        "flavor_text_entries": [
            {"flavor_text": "Forms colonies in\nperpetually dark places.", "language": {"name": "en"}}
        ]
    },
    132: {
        "is_legendary": False,
        "habitat": {"name": "urban"},
        "flavor_text_entries": [
            {"flavor_text": "It can transform\finto anything.", "language": {"name": "en"}}
        ]
    },
}

MEWTWO_DESCRIPTION = "It was created by a scientist after years of gene splicing."


def translation_url(base: str, text: str) -> str:
    return str(httpx.URL(base, params={"text": text}))


def mock_catalog(httpx_mock, name: str):
    pokemon = MOCK_POKEMON[name]
    httpx_mock.add_response(url=f"{POKEAPI_URL}/pokemon/{name}", json=pokemon)
    httpx_mock.add_response(url=f"{POKEAPI_URL}/pokemon-species/{pokemon['id']}", json=MOCK_SPECIES[pokemon["id"]])


@pytest.fixture(scope="function")
def test_client():
    """
    Provides a TestClient whose upstream clients point at test hosts.
    Every outbound call is answered by httpx_mock.
    """
    poke_client = PokeAPIClient(base_url=POKEAPI_URL)
    yoda_client = TranslationClient(TranslationStyle.YODA, url=YODA_URL)
    shakespeare_client = TranslationClient(TranslationStyle.SHAKESPEARE, url=SHAKESPEARE_URL)

    app.dependency_overrides[get_poke_client] = lambda: poke_client
    app.dependency_overrides[get_yoda_client] = lambda: yoda_client
    app.dependency_overrides[get_shakespeare_client] = lambda: shakespeare_client

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def test_e2e_get_record_success(httpx_mock, test_client):
    """Scenario mewtwo: plain lookup returns the cleaned English flavor text."""
    mock_catalog(httpx_mock, "mewtwo")

    response = test_client.get("/creature/mewtwo")

    assert response.status_code == 200
    assert response.json() == {
        "name": "mewtwo",
        "description": MEWTWO_DESCRIPTION,
        "habitat": "rare",
        "isRare": True,
    }


def test_e2e_get_record_is_idempotent(httpx_mock, test_client):
    mock_catalog(httpx_mock, "mewtwo")
    mock_catalog(httpx_mock, "mewtwo")

    first = test_client.get("/creature/mewtwo")
    second = test_client.get("/creature/mewtwo")

    assert first.content == second.content


def test_e2e_styled_rare_pokemon_uses_yoda(httpx_mock, test_client):
    """Scenario mewtwo: legendary -> Yoda."""
    mock_catalog(httpx_mock, "mewtwo")
    httpx_mock.add_response(
        url=translation_url(YODA_URL, MEWTWO_DESCRIPTION),
        json={"contents": {"translated": "Created by a scientist, it was.", "text": MEWTWO_DESCRIPTION, "translation": "yoda"}},
    )

    response = test_client.get("/creature/styled/mewtwo")

    assert response.status_code == 200
    assert response.json()["description"] == "Created by a scientist, it was."
    assert response.json()["isRare"] is True


def test_e2e_styled_cave_pokemon_uses_yoda(httpx_mock, test_client):
    """Scenario zubat: cave habitat -> Yoda even though not rare."""
    mock_catalog(httpx_mock, "zubat")
    httpx_mock.add_response(
        url=translation_url(YODA_URL, "Forms colonies in perpetually dark places."),
        json={"contents": {"translated": "In dark places, colonies it forms.", "text": "", "translation": "yoda"}},
    )

    response = test_client.get("/creature/styled/zubat")

    assert response.status_code == 200
    assert response.json() == {
        "name": "zubat",
        "description": "In dark places, colonies it forms.",
        "habitat": "cave",
        "isRare": False,
    }


def test_e2e_styled_regular_pokemon_uses_shakespeare(httpx_mock, test_client):
    """Scenario ditto: urban, not rare -> Shakespeare."""
    mock_catalog(httpx_mock, "ditto")
    httpx_mock.add_response(
        url=translation_url(SHAKESPEARE_URL, "It can transform into anything."),
        json={"contents": {"translated": "'t can transform into aught.", "text": "", "translation": "shakespeare"}},
    )

    response = test_client.get("/creature/styled/ditto")

    assert response.status_code == 200
    assert response.json()["description"] == "'t can transform into aught."
    assert all("yoda" not in str(r.url) for r in httpx_mock.get_requests())


@pytest.mark.parametrize(
    "translation_response",
    [
        {"status_code": 429, "json": {"error": {"code": 429, "message": "Rate limit exceeded"}}},
        {"status_code": 500, "json": {"error": {"code": 500, "message": "Internal Server Error"}}},
        {"status_code": 200, "json": {"contents": {"translated": "", "text": "", "translation": "yoda"}}},
    ],
)
def test_e2e_translation_failure_falls_back_to_original(httpx_mock, test_client, translation_response):
    """
    A failing translation service must never fail the request: 200 with the
    untranslated description.
    """
    mock_catalog(httpx_mock, "mewtwo")
    httpx_mock.add_response(url=translation_url(YODA_URL, MEWTWO_DESCRIPTION), **translation_response)

    response = test_client.get("/creature/styled/mewtwo")

    assert response.status_code == 200
    assert response.json()["description"] == MEWTWO_DESCRIPTION


def test_e2e_translation_network_error_falls_back_to_original(httpx_mock, test_client):
    mock_catalog(httpx_mock, "mewtwo")
    httpx_mock.add_exception(
        httpx.ReadTimeout("Read timed out."),
        url=translation_url(YODA_URL, MEWTWO_DESCRIPTION),
    )

    response = test_client.get("/creature/styled/mewtwo")

    assert response.status_code == 200
    assert response.json()["description"] == MEWTWO_DESCRIPTION


@pytest.mark.parametrize("path", ["/creature/doesnotexist123", "/creature/styled/doesnotexist123"])
def test_e2e_not_found(httpx_mock, test_client, path):
    """Scenario doesnotexist123: 404 on both endpoints, no translation call."""
    httpx_mock.add_response(url=f"{POKEAPI_URL}/pokemon/doesnotexist123", status_code=404, text="Not Found")

    response = test_client.get(path)

    assert response.status_code == 404
    assert "doesnotexist123" in response.json()["detail"]
    assert [r.url.host for r in httpx_mock.get_requests()] == ["pokeapi.test"]


@pytest.mark.parametrize("path", ["/creature/styled/mewtwo", "/creature/mewtwo"])
def test_e2e_catalog_failure_is_503(httpx_mock, test_client, path):
    httpx_mock.add_response(url=f"{POKEAPI_URL}/pokemon/mewtwo", status_code=500)

    response = test_client.get(path)

    assert response.status_code == 503
    assert "External API Error" in response.json()["detail"]


def test_e2e_blank_name_is_400(httpx_mock, test_client):
    response = test_client.get("/creature/%20%20")

    assert response.status_code == 400
    assert httpx_mock.get_requests() == []


def test_health(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["timestamp"]
    assert body["version"]


@pytest.mark.parametrize("path", ["/creature/%3Fx", "/creature/%23x", "/creature/styled/%3Fx"])
def test_e2e_name_with_url_syntax_is_404(httpx_mock, test_client, path):
    response = test_client.get(path)

    assert response.status_code == 404
    assert httpx_mock.get_requests() == []
