import pytest
from pydantic import ValidationError

from swamd.parser.base import AnnotationTag, OperationSpec, Parameter, RawAnnotation, Response


class TestAnnotationTag:
    def test_vocabulary(self):
        assert [t.value for t in AnnotationTag] == [
            "Summary", "Description", "Tags", "Accept", "Produce",
            "Param", "Success", "Failure", "Router",
        ]

    def test_raw_annotation_accepts_keyword_text(self):
        ann = RawAnnotation(tag="Router", text="/users get")
        assert ann.tag is AnnotationTag.ROUTER

    def test_raw_annotation_rejects_unknown_keyword(self):
        with pytest.raises(ValidationError):
            RawAnnotation(tag="Security", text="ApiKeyAuth")


class TestParameter:
    def test_description_defaults_to_empty(self):
        p = Parameter(name="id", location="path", param_type="int", required=True)
        assert p.description == ""


class TestResponse:
    def test_optional_parts_default_to_empty(self):
        r = Response(code=204)
        assert (r.wrapper, r.data_type, r.description) == ("", "", "")


class TestOperationSpec:
    def test_empty_spec(self):
        spec = OperationSpec()
        assert spec.method == ""
        assert spec.params == []
        assert spec.responses == []

    def test_serialization_roundtrip(self):
        spec = OperationSpec(
            method="delete",
            path="/users/{id}",
            summary="Delete user",
            params=[Parameter(name="id", location="path", param_type="int", required=True)],
            responses=[Response(code=204, description="deleted")],
        )
        spec2 = OperationSpec(**spec.model_dump())
        assert spec2 == spec
