"""Postman API client.

Resolves a workspace and collection by name and fetches the full
collection document. Every call is a single GET: no retries, no paging.
"""

import click
import httpx

from postman_docs_sync.config import DEFAULT_BASE_URL
from postman_docs_sync.errors import ApiError, CollectionNotFoundError


class PostmanClient:
    """Thin wrapper over httpx.Client for the Postman API."""

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, transport: httpx.BaseTransport | None = None):
        self.http = httpx.Client(
            base_url=base_url,
            headers={"X-Api-Key": api_key},
            transport=transport,
        )

    def __enter__(self) -> "PostmanClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def _get(self, path: str, action: str, params: dict | None = None) -> dict:
        try:
            response = self.http.get(path, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            click.secho(f"Failed to {action}: {e}", fg="red", err=True)
            raise ApiError(f"Failed to {action}: {e}") from e
        if not isinstance(data, dict):
            raise ApiError(f"Failed to {action}: expected a JSON object, got {type(data).__name__}")
        return data

    def _list(self, path: str, key: str, action: str, params: dict | None = None) -> list[dict]:
        entries = self._get(path, action, params=params).get(key) or []
        if not isinstance(entries, list):
            raise ApiError(f'Failed to {action}: "{key}" is not a list')
        return [entry for entry in entries if isinstance(entry, dict)]

    def list_workspaces(self) -> list[dict]:
        return self._list("/workspaces", "workspaces", "fetch workspaces")

    def list_collections(self, workspace_id: str | None = None) -> list[dict]:
        params = {"workspace": workspace_id} if workspace_id else None
        return self._list("/collections", "collections", "list collections", params=params)

    def resolve_workspace_id(self, workspace_name: str | None) -> str | None:
        """Find the id of the workspace with this exact name.

        Returns None when no name is given or nothing matches; the
        collection search then runs across all workspaces.
        """
        if not workspace_name:
            return None

        click.echo(f'Searching for workspace: "{workspace_name}"...')
        for workspace in self.list_workspaces():
            if workspace.get("name") == workspace_name:
                if not workspace.get("id"):
                    raise ApiError(f'Workspace "{workspace_name}" has no id.')
                return workspace["id"]

        click.secho(
            f'Workspace "{workspace_name}" not found. Searching all collections directly.',
            fg="yellow",
            err=True,
        )
        return None

    def resolve_collection_uid(
        self,
        collection_name: str | None,
        collection_id: str | None = None,
        workspace_id: str | None = None,
    ) -> str:
        """Return the collection uid, searching by exact name unless an id is given."""
        if collection_id:
            return collection_id

        click.echo(f'Searching for collection: "{collection_name}"...')
        for collection in self.list_collections(workspace_id):
            if collection.get("name") == collection_name:
                if not collection.get("uid"):
                    raise ApiError(f'Collection "{collection_name}" has no uid.')
                return collection["uid"]
        raise CollectionNotFoundError(collection_name)

    def fetch_collection(self, collection_uid: str) -> dict:
        """Fetch the full collection document."""
        click.echo(f"Fetching collection details for UID: {collection_uid}...")
        data = self._get(f"/collections/{collection_uid}", "fetch collection details")
        if not isinstance(data.get("collection"), dict):
            raise ApiError(f"Collection {collection_uid} response has no collection document.")
        return data["collection"]
