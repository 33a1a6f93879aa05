"""Unit tests for the index client against a mock transport."""
import json

import httpx
import pytest

from games_index.index_client import (
    IndexClient,
    IndexTransportError,
    SearchResponseError,
)


def _client(handler):
    return IndexClient("http://es.test:9200/", transport=httpx.MockTransport(handler))


def test_put_document_upserts_by_id(client, stub_index):
    """Test documents are PUT at index path plus id."""
    response = client.put_document("games/game", 5, {"id": 5, "name": "Tetris"})
    assert response.status_code == 201
    request = stub_index.requests[-1]
    assert request.method == "PUT"
    assert str(request.url) == "http://es.test:9200/games/game/5"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"id": 5, "name": "Tetris"}


def test_put_document_returns_error_responses():
    """Test a non-2xx status is handed back, not raised."""
    with _client(lambda r: httpx.Response(400, json={"error": "bad"})) as client:
        response = client.put_document("games/game/", 1, {})
    assert response.status_code == 400


def test_search_posts_body_with_size(client, stub_index):
    """Test the search URL, size cap and parsed response."""
    stub_index.search_handler = lambda body: {
        "hits": {"total": 1, "hits": [{"_source": {"genre": "Action", "global_sales": 1.5, "name": "X"}}]}
    }
    result = client.search("games/game/", {"query": {"match_all": {}}})
    request = stub_index.requests[-1]
    assert request.method == "POST"
    assert request.url.path == "/games/game/_search"
    assert request.url.params["size"] == "1000"
    assert json.loads(request.content) == {"query": {"match_all": {}}}
    assert result.hits.total == 1
    assert result.hits.hits[0].source.global_sales == 1.5


def test_search_accepts_object_total():
    """Test the {"value": n} total form."""
    payload = {"hits": {"total": {"value": 3, "relation": "eq"}, "hits": []}}
    with _client(lambda r: httpx.Response(200, json=payload)) as client:
        assert client.search("games", {}).hits.total == 3


def test_search_rejects_non_json():
    """Test an undecodable body raises a typed error."""
    with _client(lambda r: httpx.Response(502, text="<html>bad gateway</html>")) as client:
        with pytest.raises(SearchResponseError):
            client.search("games", {})


def test_search_rejects_unexpected_schema():
    """Test an error document raises a typed error."""
    payload = {"error": {"type": "index_not_found_exception"}, "status": 404}
    with _client(lambda r: httpx.Response(404, json=payload)) as client:
        with pytest.raises(SearchResponseError):
            client.search("games", {})


def test_search_rejects_hits_without_genre():
    """Test hits missing required fields raise a typed error."""
    payload = {"hits": {"total": 1, "hits": [{"_source": {"global_sales": 1.0}}]}}
    with _client(lambda r: httpx.Response(200, json=payload)) as client:
        with pytest.raises(SearchResponseError):
            client.search("games", {})


def test_transport_errors_are_wrapped():
    """Test connection failures raise IndexTransportError."""
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    with _client(refuse) as client:
        with pytest.raises(IndexTransportError):
            client.search("games", {})
        with pytest.raises(IndexTransportError):
            client.put_document("games/game", 1, {})


def test_create_index_puts_body(client, stub_index):
    """Test index creation hits the index root."""
    client.create_index("games", {"settings": {}})
    request = stub_index.requests[-1]
    assert request.method == "PUT"
    assert request.url.path == "/games"
