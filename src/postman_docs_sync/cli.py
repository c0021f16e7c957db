"""CLI entry point for postman-docs-sync."""

from pathlib import Path

import click
from dotenv import find_dotenv, load_dotenv

from postman_docs_sync.config import DEFAULT_BASE_URL, DEFAULT_OUTPUT_DIR, build_config
from postman_docs_sync.errors import SyncError
from postman_docs_sync.parser.postman import load_collection_document
from postman_docs_sync.sync import render_collection, sync_collection


@click.group()
def main():
    """Postman Docs Sync — turn a Postman collection into Markdown docs and endpoint modules."""
    pass


@main.command()
@click.option("--api-key", envvar="POSTMAN_API_KEY", help="Postman API key.")
@click.option("--workspace", "workspace_name", envvar="WORKSPACE_NAME", help="Workspace to search for the collection.")
@click.option("--collection", "collection_name", envvar="COLLECTION_NAME", help="Collection name (exact match).")
@click.option("--collection-id", envvar="COLLECTION_ID", help="Collection UID; skips the name search.")
@click.option("-o", "--output", envvar="OUTPUT_DIR", default=DEFAULT_OUTPUT_DIR, type=click.Path(file_okay=False, path_type=Path), help="Output directory for Markdown docs and collection.json.")
@click.option("--endpoints-dir", envvar="API_ENDPOINTS_DIR", default=None, type=click.Path(file_okay=False, path_type=Path), help="Output directory for endpoint modules (disabled when unset).")
@click.option("--base-url", envvar="POSTMAN_API_URL", default=DEFAULT_BASE_URL, show_default=True, help="Postman API base URL.")
@click.option("-v", "--verbose", is_flag=True, help="Print every file written.")
def sync(
    api_key: str | None,
    workspace_name: str | None,
    collection_name: str | None,
    collection_id: str | None,
    output: Path,
    endpoints_dir: Path | None,
    base_url: str,
    verbose: bool,
):
    """Fetch a collection from the Postman API and generate documentation."""
    config = build_config(
        api_key=api_key,
        workspace_name=workspace_name,
        collection_name=collection_name,
        collection_id=collection_id,
        output_dir=output,
        endpoints_dir=endpoints_dir,
        base_url=base_url,
    )

    try:
        sync_collection(config, verbose=verbose)
    except OSError as e:
        raise SyncError(str(e)) from e

    click.echo("\nDocumentation sync complete!")


@main.command()
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", envvar="OUTPUT_DIR", default=DEFAULT_OUTPUT_DIR, type=click.Path(file_okay=False, path_type=Path), help="Output directory for Markdown docs.")
@click.option("--endpoints-dir", envvar="API_ENDPOINTS_DIR", default=None, type=click.Path(file_okay=False, path_type=Path), help="Output directory for endpoint modules (disabled when unset).")
@click.option("-v", "--verbose", is_flag=True, help="Print every file written.")
def render(collection_path: Path, output: Path, endpoints_dir: Path | None, verbose: bool):
    """Generate documentation from a saved collection JSON file."""
    click.echo(f"Reading collection from {collection_path}...")
    try:
        document = load_collection_document(collection_path)
        render_collection(document, output, endpoints_dir=endpoints_dir, verbose=verbose)
    except ValueError as e:
        raise SyncError(f"Could not read {collection_path}: {e}") from e
    except OSError as e:
        raise SyncError(str(e)) from e

    click.echo("\nDocumentation render complete!")


def entry_point():
    """Console script: load .env from the working directory, then run the CLI."""
    load_dotenv(find_dotenv(usecwd=True))
    main()
