"""Exception hierarchy for swamd.

Everything except ConfigError is local to one source file: the pipeline logs
it, skips the file and moves on.
"""


class SwamdError(Exception):
    """Base exception for swamd failures."""


class FileReadError(SwamdError):
    """A source file could not be opened, read or decoded."""


class SourceParseError(SwamdError):
    """Comments could not be located because the source is not tokenizable."""


class AnnotationDecodeFailure(SwamdError):
    """An annotation's text does not fit its positional pattern."""


class MalformedRouterAnnotation(AnnotationDecodeFailure):
    """A `@Router` annotation without a method after the path."""

    def __init__(self, text: str):
        super().__init__(f"malformed @Router annotation: {text!r} (expected '<path> <method>')")
        self.text = text


class OutputWriteError(SwamdError):
    """The output file could not be removed, opened or appended to."""


class ConfigError(ValueError, SwamdError):
    """Invalid configuration file or option value."""
