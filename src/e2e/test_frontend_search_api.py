import pytest
from frontend.web import create_app
from shakesearch.engine import Engine
from shakesearch.models import SearchResponse


@pytest.fixture
def client(works):
    app = create_app(Engine(works, corrector=lambda q, k: "to be, or not" if k == "secret" else None))
    return app.test_client()


@pytest.mark.e2e
def test_missing_query_is_bad_request(client):
    for url in ("/search", "/search?q=", "/search?s=100"):
        rv = client.get(url)
        assert rv.status_code == 400
        assert rv.get_data(as_text=True) == "missing search query in URL params"


@pytest.mark.e2e
def test_search_returns_json_payload(client):
    rv = client.get("/search?q=question&s=100")
    assert rv.status_code == 200
    assert rv.mimetype == "application/json"
    data = rv.get_json()
    assert set(data) == {"query", "message", "matchWholeWord", "results"}
    assert data["query"] == "question"
    assert data["matchWholeWord"] is False
    assert data["results"] == [{
        "text": data["results"][0]["text"],
        "attribution": "THE TRAGEDY OF HAMLET, PRINCE OF DENMARK - ACT III",
    }]
    assert "question" in data["results"][0]["text"]


@pytest.mark.e2e
def test_whole_word_flag(client):
    loose = client.get("/search?q=be&s=100").get_json()
    strict = client.get("/search?q=be&s=100&mw=on").get_json()
    assert strict["matchWholeWord"] is True
    assert len(strict["results"]) == 2
    assert strict["message"].endswith("a total of 2 results.")
    assert len(loose["results"]) > len(strict["results"])
    # anything but "on" keeps substring mode
    assert client.get("/search?q=be&s=100&mw=yes").get_json()["matchWholeWord"] is False


@pytest.mark.e2e
def test_non_numeric_size_uses_default(client):
    default = client.get("/search?q=Castle").get_json()
    assert client.get("/search?q=Castle&s=abc").get_json() == default
    assert client.get("/search?q=Castle&s=500").get_json() == default


@pytest.mark.e2e
def test_correction_with_key(client):
    data = client.get("/search?q=tbe%20or%20not&s=100&k=secret").get_json()
    assert data["query"] == "to be, or not"
    assert len(data["results"]) == 1

    data = client.get("/search?q=tbe%20or%20not&s=100&k=").get_json()
    assert data["query"] == "tbe or not"
    assert data["results"] == []


@pytest.mark.e2e
def test_encoding_failure_is_server_error(client, monkeypatch):
    monkeypatch.setattr(SearchResponse, "to_dict", lambda self: {"bad": object()})
    rv = client.get("/search?q=Castle")
    assert rv.status_code == 500
    assert rv.get_data(as_text=True) == "encoding failure"


@pytest.mark.e2e
def test_home_page_renders(client):
    rv = client.get("/")
    assert rv.status_code == 200
    html = rv.get_data(as_text=True).lower()
    assert "<form" in html and "/search" in html


@pytest.mark.e2e
def test_home_page_pages_results(client):
    html = client.get("/").get_data(as_text=True)
    for marker in ('id="pager"', 'id="prev"', 'id="next"', 'id="per"', "<option selected>5</option>"):
        assert marker in html
    assert 'minlength="3"' in html
    assert "const MIN_QUERY = 3;" in html


@pytest.mark.e2e
def test_home_page_highlights_around_line_breaks(client):
    html = client.get("/").get_data(as_text=True)
    # the highlighter works on the pieces between <br> markers
    assert "text.split(BR)" in html and ".join(BR)" in html
