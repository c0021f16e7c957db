"""Data models for a parsed Postman collection.

A collection is a tree of nodes. Each node is either a FolderNode
(grouping only) or a RequestNode (one HTTP endpoint); the `kind`
field tags which one it is.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, Field, field_validator


def _as_text(value: Any) -> str:
    """Coerce optional Postman values to plain text.

    Descriptions may arrive as {"content": ..., "type": ...} objects.
    """
    if value is None:
        return ""
    if isinstance(value, dict):
        return _as_text(value.get("content"))
    return str(value)


Text = Annotated[str, BeforeValidator(_as_text)]


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


class Header(BaseModel):
    """A request header row."""

    key: Text = ""
    value: Text = ""
    description: Text = ""


class QueryParam(BaseModel):
    """A query string parameter from a structured URL."""

    key: Text = ""
    value: Text = ""
    description: Text = ""


class UrlSpec(BaseModel):
    """Structured form of a request URL."""

    raw: str | None = None
    path: list[str] | None = None
    query: list[QueryParam] = []

    @field_validator("path", mode="before")
    @classmethod
    def _normalize_path(cls, value: Any) -> list[str] | None:
        if value is None:
            return None
        if isinstance(value, str):
            return [value]
        # Path variables can be given as {"type": ..., "value": ...} objects
        return [_as_text(seg.get("value")) if isinstance(seg, dict) else _as_text(seg) for seg in value]

    @field_validator("query", mode="before")
    @classmethod
    def _normalize_query(cls, value: Any) -> list:
        return _as_list(value)


class FormField(BaseModel):
    """A single multipart form field."""

    key: Text = ""
    value: Text = ""
    type: Text = "text"
    description: Text = ""


class BodySpec(BaseModel):
    """Request body descriptor. Only "raw" and "formdata" modes are rendered."""

    mode: str | None = None
    raw: Text = ""
    formdata: list[FormField] = []

    @field_validator("formdata", mode="before")
    @classmethod
    def _normalize_formdata(cls, value: Any) -> list:
        return _as_list(value)


class RequestSpec(BaseModel):
    """The request payload of a RequestNode."""

    method: str | None = None
    url: str | UrlSpec | None = None
    header: list[Header] = []
    body: BodySpec | None = None
    description: Text = ""

    @field_validator("header", mode="before")
    @classmethod
    def _normalize_header(cls, value: Any) -> list:
        return _as_list(value)


class SampleResponse(BaseModel):
    """A saved example response."""

    name: Text = ""
    code: int | None = None
    status: Text = ""
    body: Text = ""


class RequestNode(BaseModel):
    """A collection item describing one HTTP request."""

    kind: Literal["request"] = "request"
    name: Text = ""
    request: RequestSpec
    response: list[SampleResponse] = []

    @field_validator("response", mode="before")
    @classmethod
    def _normalize_response(cls, value: Any) -> list:
        return _as_list(value)


class FolderNode(BaseModel):
    """A collection item grouping other items."""

    kind: Literal["folder"] = "folder"
    name: Text = ""
    children: list["CollectionNode"] = []


CollectionNode = Annotated[Union[FolderNode, RequestNode], Field(discriminator="kind")]

FolderNode.model_rebuild()


class CollectionInfo(BaseModel):
    """Collection-level metadata."""

    name: Text = ""
    description: Text = ""


class Collection(BaseModel):
    """A parsed collection: its metadata and root-level nodes."""

    info: CollectionInfo = CollectionInfo()
    items: list[CollectionNode] = []
