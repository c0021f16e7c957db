"""Markdown generator — renders one request node as a documentation page."""

from pathlib import Path

from postman_docs_sync.naming import extract_path, to_file_safe
from postman_docs_sync.parser.base import RequestNode, UrlSpec

NO_DESCRIPTION = "No description provided."


def render_request_markdown(node: RequestNode) -> str:
    """Render a request as a Markdown document."""
    request = node.request
    method = request.method or "GET"
    description = request.description or NO_DESCRIPTION

    md = f"# {node.name}\n\n"
    md += f"> {description}\n\n"
    md += f"`{method}` **{_display_url(request.url)}**\n\n"

    if request.header:
        md += "## Headers\n\n"
        md += _table(["Key", "Value", "Description"], [[h.key, h.value, h.description] for h in request.header])

    query = request.url.query if isinstance(request.url, UrlSpec) else []
    if query:
        md += "## Query Parameters\n\n"
        md += _table(["Key", "Value", "Description"], [[q.key, q.value, q.description] for q in query])

    body = request.body
    if body and body.mode == "raw":
        md += "## Body (raw)\n\n"
        md += _json_block(body.raw)
    elif body and body.mode == "formdata":
        md += "## Body (formdata)\n\n"
        md += _table(
            ["Key", "Value", "Type", "Description"],
            [[f.key, f.value, f.type, f.description] for f in body.formdata],
        )

    if node.response:
        md += "## Responses\n\n"
        for res in node.response:
            code = "" if res.code is None else res.code
            md += f"### {res.name} ({code} {res.status})\n\n"
            md += _json_block(res.body)

    return md


def markdown_filename(name: str) -> str:
    """File name for a request page: file-safe, lower-cased, .md suffix."""
    return f"{to_file_safe(name).lower()}.md"


def write_request_markdown(node: RequestNode, directory: Path) -> Path:
    """Render a request and write it into `directory`, overwriting any existing page."""
    file_path = directory / markdown_filename(node.name)
    file_path.write_text(render_request_markdown(node), encoding="utf-8")
    return file_path


def _display_url(url: str | UrlSpec | None) -> str:
    """The URL as shown in the page: raw form when present, else the endpoint path."""
    if isinstance(url, str):
        return url
    if url is not None and url.raw:
        return url.raw
    return extract_path(url)


def _table(columns: list[str], rows: list[list[str]]) -> str:
    lines = [
        "| " + " | ".join(columns) + " |",
        "| " + " | ".join("---" for _ in columns) + " |",
    ]
    lines += ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join(lines) + "\n\n"


def _json_block(text: str) -> str:
    return f"```json\n{text}\n```\n\n"
