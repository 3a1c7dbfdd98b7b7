"""Data models for annotation comments and the operations they describe.

The comment scanner produces RawAnnotation values; the field parsers and the
assembler turn a file's annotations into a single OperationSpec.
"""

from enum import Enum

from pydantic import BaseModel


class AnnotationTag(str, Enum):
    """Recognized annotation keywords. Values are the literal keyword text."""

    SUMMARY = "Summary"
    DESCRIPTION = "Description"
    TAGS = "Tags"
    ACCEPT = "Accept"
    PRODUCE = "Produce"
    PARAM = "Param"
    SUCCESS = "Success"
    FAILURE = "Failure"
    ROUTER = "Router"


class RawAnnotation(BaseModel):
    """A single `@Keyword text` comment line."""

    tag: AnnotationTag
    text: str


class Parameter(BaseModel):
    """A decoded `@Param` annotation."""

    name: str
    location: str  # path / query / header / body / formData
    param_type: str
    required: bool
    description: str = ""


class Response(BaseModel):
    """A decoded `@Success` or `@Failure` annotation."""

    code: int
    wrapper: str = ""  # {object} / {array} / {string}, or empty
    data_type: str = ""
    description: str = ""


class OperationSpec(BaseModel):
    """One documented API operation, assembled from a single source file."""

    method: str = ""  # stored as written; upper-cased when rendered
    path: str = ""
    summary: str = ""
    description: str = ""
    tags: list[str] = []
    accept: list[str] = []
    produce: list[str] = []
    params: list[Parameter] = []
    responses: list[Response] = []
