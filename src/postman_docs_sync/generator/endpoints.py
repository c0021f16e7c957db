"""Endpoint module generator — produces a JavaScript constants file per folder group."""

import json
import re
from pathlib import Path

from postman_docs_sync.naming import extract_path, to_camel_identifier, to_constant_name
from postman_docs_sync.parser.base import RequestNode

DEFAULT_METHOD = "GET"

_QUOTED_KEY = re.compile(r'"([^"]+)":')


def collect_endpoints(requests: list[RequestNode]) -> dict[str, dict[str, str]]:
    """Map each request to {type, endpoint}, keyed by its camelCase name.

    Later requests whose keys collide overwrite earlier ones.
    """
    endpoints: dict[str, dict[str, str]] = {}
    for req in requests:
        endpoints[to_camel_identifier(req.name)] = {
            "type": req.request.method or DEFAULT_METHOD,
            "endpoint": extract_path(req.request.url),
        }
    return endpoints


def render_endpoint_module(folder_name: str, requests: list[RequestNode]) -> str:
    """Render the ES module source exporting the folder's endpoint map."""
    constant_name = to_constant_name(folder_name)
    body = json.dumps(collect_endpoints(requests), indent=2, ensure_ascii=False)
    # Unquoted object keys
    body = _QUOTED_KEY.sub(r"\1:", body)
    return (
        "/**\n"
        f" * {folder_name} API Endpoints\n"
        " */\n"
        f"export const {constant_name} = {body};\n"
        "\n"
        f"export default {constant_name};\n"
    )


def module_filename(folder_name: str) -> str:
    """File name for a folder's module: lower-cased, hyphenated, .js suffix."""
    return re.sub(r"[^a-z0-9]", "-", folder_name.lower()) + ".js"


def write_endpoint_module(folder_name: str, requests: list[RequestNode], directory: Path) -> Path:
    """Render a folder's endpoint module and write it into `directory`."""
    file_path = directory / module_filename(folder_name)
    file_path.write_text(render_endpoint_module(folder_name, requests), encoding="utf-8")
    return file_path
