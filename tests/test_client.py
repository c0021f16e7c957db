import httpx
import pytest

from postman_docs_sync.client import PostmanClient
from postman_docs_sync.errors import ApiError, CollectionNotFoundError

WORKSPACES = {"workspaces": [{"id": "ws-1", "name": "Team"}, {"id": "ws-2", "name": "Personal"}]}
COLLECTIONS = {"collections": [{"uid": "123-abc", "name": "Sample API"}, {"uid": "456-def", "name": "Other"}]}
DETAILS = {"collection": {"info": {"name": "Sample API"}, "item": []}}


def _make_client(handler, calls: list | None = None) -> PostmanClient:
    def recording_handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return handler(request)

    return PostmanClient("PMAK-test", transport=httpx.MockTransport(recording_handler))


def _routes(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/workspaces":
        return httpx.Response(200, json=WORKSPACES)
    if request.url.path == "/collections":
        return httpx.Response(200, json=COLLECTIONS)
    if request.url.path == "/collections/123-abc":
        return httpx.Response(200, json=DETAILS)
    return httpx.Response(404, json={"error": {"name": "notFound"}})


class TestResolveWorkspace:
    def test_no_name_skips_request(self):
        calls = []
        client = _make_client(_routes, calls)
        assert client.resolve_workspace_id(None) is None
        assert calls == []

    def test_exact_match(self):
        calls = []
        client = _make_client(_routes, calls)
        assert client.resolve_workspace_id("Team") == "ws-1"
        assert calls[0].headers["X-Api-Key"] == "PMAK-test"
        assert str(calls[0].url) == "https://api.getpostman.com/workspaces"

    def test_no_match_returns_none(self, capsys):
        client = _make_client(_routes)
        assert client.resolve_workspace_id("team") is None
        assert 'Workspace "team" not found. Searching all collections directly.' in capsys.readouterr().err

    def test_non_object_response(self):
        client = _make_client(lambda request: httpx.Response(200, json=[]))
        with pytest.raises(ApiError, match="expected a JSON object, got list"):
            client.resolve_workspace_id("Team")

    def test_workspaces_not_a_list(self):
        client = _make_client(lambda request: httpx.Response(200, json={"workspaces": "Team"}))
        with pytest.raises(ApiError, match="is not a list"):
            client.resolve_workspace_id("Team")

    def test_match_without_id(self):
        client = _make_client(lambda request: httpx.Response(200, json={"workspaces": [{"name": "Team"}]}))
        with pytest.raises(ApiError, match="has no id"):
            client.resolve_workspace_id("Team")

    def test_http_error_is_fatal(self):
        client = _make_client(lambda request: httpx.Response(500))
        with pytest.raises(ApiError, match="fetch workspaces"):
            client.resolve_workspace_id("Team")


class TestResolveCollection:
    def test_direct_id_skips_search(self):
        calls = []
        client = _make_client(_routes, calls)
        assert client.resolve_collection_uid("Sample API", collection_id="999-xyz") == "999-xyz"
        assert calls == []

    def test_name_match_returns_uid(self):
        client = _make_client(_routes)
        assert client.resolve_collection_uid("Sample API") == "123-abc"

    def test_scoped_to_workspace(self):
        calls = []
        client = _make_client(_routes, calls)
        client.resolve_collection_uid("Sample API", workspace_id="ws-1")
        assert calls[0].url.params["workspace"] == "ws-1"

    def test_unscoped_has_no_params(self):
        calls = []
        client = _make_client(_routes, calls)
        client.resolve_collection_uid("Sample API")
        assert "workspace" not in calls[0].url.params

    def test_not_found(self):
        client = _make_client(_routes)
        with pytest.raises(CollectionNotFoundError, match='Collection "Missing" not found.'):
            client.resolve_collection_uid("Missing")

    def test_match_without_uid(self):
        client = _make_client(lambda request: httpx.Response(200, json={"collections": [{"name": "Sample API"}]}))
        with pytest.raises(ApiError, match="has no uid"):
            client.resolve_collection_uid("Sample API")

    def test_non_object_entries_ignored(self):
        client = _make_client(lambda request: httpx.Response(
            200, json={"collections": ["Sample API", {"uid": "123-abc", "name": "Sample API"}]},
        ))
        assert client.resolve_collection_uid("Sample API") == "123-abc"


class TestFetchCollection:
    def test_returns_collection_document(self):
        client = _make_client(_routes)
        assert client.fetch_collection("123-abc") == DETAILS["collection"]

    def test_http_error(self):
        client = _make_client(_routes)
        with pytest.raises(ApiError, match="fetch collection details"):
            client.fetch_collection("nope")

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _make_client(handler)
        with pytest.raises(ApiError, match="connection refused"):
            client.fetch_collection("123-abc")

    def test_missing_collection_key(self):
        client = _make_client(lambda request: httpx.Response(200, json={}))
        with pytest.raises(ApiError):
            client.fetch_collection("123-abc")

    def test_context_manager_closes(self):
        with _make_client(_routes) as client:
            pass
        assert client.http.is_closed
