"""Sync pipeline: fetch collection -> save raw JSON -> write Markdown and endpoint modules."""

import json
from pathlib import Path

import click

from postman_docs_sync.client import PostmanClient
from postman_docs_sync.config import SyncConfig
from postman_docs_sync.errors import SyncError
from postman_docs_sync.parser.postman import parse_collection
from postman_docs_sync.walker import CollectionWalker, WalkResult

COLLECTION_FILENAME = "collection.json"


def save_collection_document(document: dict, output_dir: Path) -> Path:
    """Persist the raw collection document as formatted JSON."""
    output_dir.mkdir(parents=True, exist_ok=True)
    file_path = output_dir / COLLECTION_FILENAME
    file_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    return file_path


def render_collection(
    document: dict,
    output_dir: Path,
    endpoints_dir: Path | None = None,
    verbose: bool = False,
) -> WalkResult:
    """Write Markdown pages (and endpoint modules, if enabled) for a collection document."""
    try:
        collection = parse_collection(document)
    except ValueError as e:
        raise SyncError(f"Invalid collection document: {e}") from e

    click.echo(f'Generating Markdown documentation for "{collection.info.name}"...')
    walker = CollectionWalker(output_dir, endpoints_dir=endpoints_dir, verbose=verbose)
    result = walker.walk(collection.items)
    click.echo(f"  {len(result.markdown_files)} pages written to {output_dir}")

    if endpoints_dir is not None:
        click.echo(f"API endpoint files saved to {endpoints_dir}/")
    return result


def sync_collection(config: SyncConfig, client: PostmanClient | None = None, verbose: bool = False) -> WalkResult:
    """Run the full sync described by `config`."""
    with client or PostmanClient(config.api_key, base_url=config.base_url) as api:
        workspace_id = api.resolve_workspace_id(config.workspace_name)
        collection_uid = api.resolve_collection_uid(
            config.collection_name,
            collection_id=config.collection_id,
            workspace_id=workspace_id,
        )
        document = api.fetch_collection(collection_uid)

    saved = save_collection_document(document, config.output_dir)
    click.echo(f"Collection JSON saved to {saved}")

    return render_collection(document, config.output_dir, endpoints_dir=config.endpoints_dir, verbose=verbose)
