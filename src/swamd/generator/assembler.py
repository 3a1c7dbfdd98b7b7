"""Folds a file's annotations into one OperationSpec."""

from typing import Iterable

from swamd.parser.base import AnnotationTag, OperationSpec, RawAnnotation
from swamd.parser.fields import parse_param, parse_response, parse_router


def assemble_spec(annotations: Iterable[RawAnnotation]) -> OperationSpec:
    """Build the OperationSpec described by annotations, in file order.

    Summary, Description and Router are last-write-wins; list fields keep
    every value in encounter order. Undecodable @Param and @Success/@Failure
    lines are dropped. A malformed @Router raises MalformedRouterAnnotation.
    """
    spec = OperationSpec()

    for annotation in annotations:
        tag, text = annotation.tag, annotation.text
        if tag == AnnotationTag.SUMMARY:
            spec.summary = text
        elif tag == AnnotationTag.DESCRIPTION:
            spec.description = text
        elif tag == AnnotationTag.TAGS:
            spec.tags.append(text)
        elif tag == AnnotationTag.ACCEPT:
            spec.accept.append(text)
        elif tag == AnnotationTag.PRODUCE:
            spec.produce.append(text)
        elif tag == AnnotationTag.PARAM:
            param = parse_param(text)
            if param is not None:
                spec.params.append(param)
        elif tag in (AnnotationTag.SUCCESS, AnnotationTag.FAILURE):
            response = parse_response(text)
            if response is not None:
                spec.responses.append(response)
        elif tag == AnnotationTag.ROUTER:
            spec.path, spec.method = parse_router(text)

    return spec
