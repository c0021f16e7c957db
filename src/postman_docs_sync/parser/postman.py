"""Postman Collection v2.x parser.

Turns a collection document (as returned by the Postman API or exported
from the app) into Collection / FolderNode / RequestNode models.
"""

import json
from pathlib import Path

from .base import Collection, CollectionInfo, CollectionNode, FolderNode, RequestNode


def load_collection_document(file_path: Path) -> dict:
    """Read a collection JSON file.

    Accepts a saved collection, or an API response that wraps it under
    the "collection" key.
    """
    text = file_path.read_text(encoding="utf-8")
    document = json.loads(text)
    if not isinstance(document, dict):
        raise ValueError("expected a JSON object at the top level")
    if isinstance(document.get("collection"), dict):
        return document["collection"]
    return document


def parse_collection(document: dict) -> Collection:
    """Parse a collection document into models."""
    return Collection(
        info=CollectionInfo.model_validate(document.get("info") or {}),
        items=_parse_items(document.get("item") or []),
    )


def _parse_items(items: list[dict]) -> list[CollectionNode]:
    """Recursively parse items (supports folders)."""
    if not isinstance(items, list):
        raise ValueError(f'"item" must be a list, got {type(items).__name__}')
    nodes: list[CollectionNode] = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"collection item must be an object, got {type(item).__name__}")
        node = parse_item(item)
        if node is not None:
            nodes.append(node)
    return nodes


def parse_item(item: dict) -> CollectionNode | None:
    """Parse one item. Items with neither children nor a request are skipped."""
    if "item" in item:
        return FolderNode(
            name=item.get("name"),
            children=_parse_items(item["item"] or []),
        )
    if item.get("request"):
        request = item["request"]
        # v2 allows a bare URL string as shorthand for a GET request
        if isinstance(request, str):
            request = {"url": request}
        return RequestNode.model_validate(
            {
                "name": item.get("name"),
                "request": request,
                "response": item.get("response"),
            }
        )
    return None
