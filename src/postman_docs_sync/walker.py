"""Collection tree walker — mirrors the folder tree on disk and renders every request."""

from dataclasses import dataclass, field
from pathlib import Path

import click

from postman_docs_sync.generator.endpoints import write_endpoint_module
from postman_docs_sync.generator.markdown import write_request_markdown
from postman_docs_sync.naming import to_file_safe
from postman_docs_sync.parser.base import CollectionNode, FolderNode, RequestNode

GENERAL_GROUP = "general"


@dataclass
class WalkResult:
    """Files written by one walk."""

    markdown_files: list[Path] = field(default_factory=list)
    endpoint_files: list[Path] = field(default_factory=list)


class CollectionWalker:
    """Writes one Markdown page per request into a directory tree mirroring the folders.

    When `endpoints_dir` is set, requests are also grouped by their top-level
    folder (root-level requests go to the "general" group) and one endpoint
    module is written per non-empty group.
    """

    def __init__(self, output_dir: Path, endpoints_dir: Path | None = None, verbose: bool = False):
        self.output_dir = output_dir
        self.endpoints_dir = endpoints_dir
        self.verbose = verbose

    def walk(self, nodes: list[CollectionNode]) -> WalkResult:
        result = WalkResult()
        groups: dict[str, list[RequestNode]] | None = {} if self.endpoints_dir else None

        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._walk_nodes(nodes, self.output_dir, None, groups, result)

        if groups is not None:
            self._write_endpoint_modules(groups, result)
        return result

    def _walk_nodes(
        self,
        nodes: list[CollectionNode],
        directory: Path,
        group: str | None,
        groups: dict[str, list[RequestNode]] | None,
        result: WalkResult,
    ) -> None:
        for node in nodes:
            if isinstance(node, FolderNode):
                folder_path = directory / to_file_safe(node.name)
                folder_path.mkdir(parents=True, exist_ok=True)
                # Nested folders stay in their top-level folder's group
                folder_group = to_file_safe(node.name).lower() if group is None else group
                self._walk_nodes(node.children, folder_path, folder_group, groups, result)
            elif isinstance(node, RequestNode):
                file_path = write_request_markdown(node, directory)
                result.markdown_files.append(file_path)
                if self.verbose:
                    click.echo(f"  Wrote {file_path}")
                if groups is not None:
                    groups.setdefault(GENERAL_GROUP if group is None else group, []).append(node)

    def _write_endpoint_modules(self, groups: dict[str, list[RequestNode]], result: WalkResult) -> None:
        self.endpoints_dir.mkdir(parents=True, exist_ok=True)
        for folder_name, requests in groups.items():
            if not requests:
                continue
            file_path = write_endpoint_module(folder_name, requests, self.endpoints_dir)
            result.endpoint_files.append(file_path)
            click.echo(f"  Created: {file_path.name}")
