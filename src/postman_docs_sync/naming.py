"""Name normalization helpers.

Turns collection item names into file names and JavaScript identifiers,
and request URLs into endpoint paths.
"""

import re
from urllib.parse import urlparse

from pydantic import ValidationError

from postman_docs_sync.parser.base import UrlSpec

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WORD_START = re.compile(r"(?:^\w|[A-Z]|\b\w)")


def to_file_safe(name: str) -> str:
    """Replace every character outside [A-Za-z0-9] with an underscore."""
    return _NON_ALNUM.sub("_", name)


def to_constant_name(name: str) -> str:
    """Convert a folder name to a constant name ("ComponentVersions" -> "COMPONENT_VERSIONS")."""
    name = _NON_ALNUM.sub("_", name)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    return name.upper()


def to_camel_identifier(name: str) -> str:
    """Convert a request name to a camelCase key ("Get All Users" -> "getAllUsers")."""
    spaced = _NON_ALNUM.sub(" ", name)

    def _case(match: re.Match) -> str:
        char = match.group(0)
        return char.lower() if match.start() == 0 else char.upper()

    return re.sub(r"\s+", "", _WORD_START.sub(_case, spaced))


def extract_path(url: str | UrlSpec | dict | None) -> str:
    """Extract the endpoint path from a request URL.

    Drops scheme, host and query string and always returns a path that
    starts with '/'. Never raises: URLs that cannot be parsed are used as-is.
    """
    if not url:
        return "/"
    if isinstance(url, dict):
        try:
            url = UrlSpec.model_validate(url)
        except ValidationError:
            return "/"

    path = ""
    if isinstance(url, str):
        path = url
    elif url.path is not None:
        path = "/".join(url.path)
    elif url.raw:
        path = _url_path(url.raw)

    path = path.split("?")[0]
    if not path.startswith("/"):
        path = "/" + path
    return path


def _url_path(raw: str) -> str:
    """Path component of an absolute URL, or the raw string if it is not one."""
    try:
        parsed = urlparse(raw)
    except ValueError:
        return raw
    if not parsed.scheme or not parsed.netloc:
        return raw
    return parsed.path
