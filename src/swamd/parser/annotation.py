"""Annotation scanner.

Finds `@Keyword text` annotations in comment text. The keyword may appear
anywhere in the comment, not only at its start.
"""

import re
from typing import Iterable

from .base import AnnotationTag, RawAnnotation

_KEYWORDS = "|".join(tag.value for tag in AnnotationTag)

ANNOTATION_RE = re.compile(rf"@({_KEYWORDS})")
ANNOTATION_TEXT_RE = re.compile(rf"@({_KEYWORDS})\s+(.*)")


def has_annotation(comment: str) -> bool:
    """Return True if the comment mentions any recognized `@Keyword`."""
    return ANNOTATION_RE.search(comment) is not None


def extract_annotation(comment: str) -> RawAnnotation | None:
    """Split a comment into its annotation tag and text.

    Only the first match is used. Returns None when no keyword is followed by
    whitespace and text, e.g. `@Summary` alone at the end of a comment.
    """
    match = ANNOTATION_TEXT_RE.search(comment)
    if match is None:
        return None
    return RawAnnotation(tag=AnnotationTag(match.group(1)), text=match.group(2).rstrip())


def scan_comments(comments: Iterable[str]) -> list[RawAnnotation]:
    """Return the annotations found in a file's comments, in order."""
    annotations = []
    for comment in comments:
        if not has_annotation(comment):
            continue
        annotation = extract_annotation(comment)
        if annotation is not None:
            annotations.append(annotation)
    return annotations
