"""Decoders for the positional text of @Param, @Success/@Failure and @Router."""

import logging
import re

from swamd.errors import MalformedRouterAnnotation

from .base import Parameter, Response

logger = logging.getLogger(__name__)

# name in type required description
PARAM_RE = re.compile(
    r"([0-9A-Za-z]+)\s+([0-9A-Za-z]+)\s+([0-9A-Za-z]+)\s+(true|false)\s+(.*)"
)
# code [{wrapper}] dataType description
RESPONSE_RE = re.compile(r"^(\d{3})\s*(\{[^}]*\})?\s*(\S*)\s*(.*)$")
_WHITESPACE_RE = re.compile(r"\s+")


def parse_param(text: str) -> Parameter | None:
    """Decode `@Param` text, e.g. `id path int true user identifier`."""
    match = PARAM_RE.search(text)
    if match is None:
        return None
    name, location, param_type, required, description = match.groups()
    return Parameter(
        name=name,
        location=location,
        param_type=param_type,
        required=required == "true",
        description=description,
    )


def parse_response(text: str) -> Response | None:
    """Decode `@Success`/`@Failure` text, e.g. `200 {object} User success`.

    The remainder after the code and optional wrapper is split positionally:
    its first token is the data type, the rest is the description.
    """
    match = RESPONSE_RE.match(text)
    if match is None:
        return None
    raw_code, wrapper, data_type, description = match.groups()
    try:
        code = int(raw_code)
    except ValueError as e:
        logger.warning("Error parsing response code %r: %s", raw_code, e)
        return None
    return Response(
        code=code,
        wrapper=wrapper or "",
        data_type=data_type,
        description=description,
    )


def parse_router(text: str) -> tuple[str, str]:
    """Split `@Router` text into (path, method).

    Raises MalformedRouterAnnotation when there is no method after the path.
    """
    parts = _WHITESPACE_RE.split(text.strip(), maxsplit=1)
    if len(parts) < 2 or not parts[1].strip():
        raise MalformedRouterAnnotation(text)
    return parts[0].strip(), parts[1].strip()
