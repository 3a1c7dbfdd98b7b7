"""Comment locators.

Each locator turns the text of one source file into the ordered list of its
comment tokens. Only enough of the language is understood to tell comments
apart from string literals; everything else is skipped.
"""

import io
import tokenize
from typing import Callable, NamedTuple

from swamd.errors import ConfigError, SourceParseError


class Language(NamedTuple):
    name: str
    extensions: tuple[str, ...]
    locate: Callable[[str], list[str]]


def locate_go_comments(source: str) -> list[str]:
    """Return Go comments in source order.

    A `//` comment runs to the end of its line and keeps its marker. A
    `/* */` comment is returned whole, newlines included.
    """
    comments = []
    i, n = 0, len(source)
    while i < n:
        ch = source[i]
        if source.startswith("//", i):
            end = source.find("\n", i)
            if end == -1:
                end = n
            comments.append(source[i:end].rstrip("\r"))
            i = end
        elif source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end == -1:
                raise SourceParseError(f"comment not terminated (line {_line_of(source, i)})")
            comments.append(source[i:end + 2])
            i = end + 2
        elif ch in ("\"", "'"):
            i = _skip_quoted(source, i)
        elif ch == "`":
            end = source.find("`", i + 1)
            if end == -1:
                raise SourceParseError(f"raw string literal not terminated (line {_line_of(source, i)})")
            i = end + 1
        else:
            i += 1
    return comments


def locate_python_comments(source: str) -> list[str]:
    """Return `#` comments in source order using the tokenize module."""
    readline = io.StringIO(source).readline
    try:
        return [
            tok.string
            for tok in tokenize.generate_tokens(readline)
            if tok.type == tokenize.COMMENT
        ]
    except (tokenize.TokenError, SyntaxError) as e:
        raise SourceParseError(str(e)) from e


LANGUAGES = {
    "go": Language("go", (".go",), locate_go_comments),
    "python": Language("python", (".py",), locate_python_comments),
}


def get_language(name: str) -> Language:
    """Look up a supported language by name."""
    try:
        return LANGUAGES[name]
    except KeyError:
        supported = ", ".join(sorted(LANGUAGES))
        raise ConfigError(f"unsupported language {name!r} (expected one of: {supported})") from None


def _skip_quoted(source: str, start: int) -> int:
    """Return the index just past the string or rune literal opened at start."""
    quote = source[start]
    i = start + 1
    while i < len(source):
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            break
        i += 1
    raise SourceParseError(f"literal not terminated (line {_line_of(source, start)})")


def _line_of(source: str, index: int) -> int:
    return source.count("\n", 0, index) + 1
