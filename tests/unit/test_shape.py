"""Shape construction, conversion and record-only checks."""

from google.genai import types as genai_types
import pytest

from gemini_mocks.core import (
    GenerationRequest,
    Shape,
    ShapeType,
    Violation,
    array,
    boolean,
    number,
    obj,
    record,
    string,
)
from gemini_mocks.exceptions import ShapeError, ValidationError

pytestmark = pytest.mark.unit


class TestConstruction:
    def test_required_must_reference_declared_properties(self):
        with pytest.raises(ShapeError, match="required"):
            obj({"name": string()}, required=["name", "email"])

    def test_array_requires_items(self):
        with pytest.raises(ShapeError, match="items"):
            Shape(ShapeType.ARRAY)

    def test_items_only_on_arrays(self):
        with pytest.raises(ShapeError):
            Shape(ShapeType.STRING, items=string())

    def test_properties_only_on_objects(self):
        with pytest.raises(ShapeError):
            Shape(ShapeType.NUMBER, properties={"a": string()})

    def test_enum_only_on_strings(self):
        with pytest.raises(ShapeError, match="enum"):
            Shape(ShapeType.NUMBER, enum=("1",))

    def test_empty_enum_is_rejected(self):
        with pytest.raises(ShapeError):
            string(enum=[])

    def test_shape_error_is_a_validation_error(self):
        assert issubclass(ShapeError, ValidationError)

    def test_properties_are_read_only(self):
        shape = record(name=string())
        with pytest.raises(TypeError):
            shape.properties["other"] = string()  # type: ignore[index]

    def test_shapes_and_requests_carrying_them_are_hashable(self):
        shape = array(record(id=string(), tags=array(string())))
        same = array(record(id=string(), tags=array(string())))

        assert hash(shape) == hash(same)
        assert {shape, same} == {shape}
        assert hash(GenerationRequest("List.", shape=shape)) == hash(
            GenerationRequest("List.", shape=same)
        )

    def test_record_requires_every_field_including_description(self):
        shape = record(title=string(), description=string())
        assert shape.required == ("title", "description")


class TestConversions:
    def test_to_dict(self):
        shape = array(
            record(
                id=string(),
                theme=string(enum=["dark", "light"]),
                score=number("Score"),
            )
        )

        assert shape.to_dict() == {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "id": {"type": "STRING"},
                    "theme": {"type": "STRING", "enum": ["dark", "light"]},
                    "score": {"type": "NUMBER", "description": "Score"},
                },
                "required": ["id", "theme", "score"],
            },
        }

    def test_to_genai_schema(self):
        shape = obj(
            {"flag": boolean(), "tags": array(string())},
            required=["flag"],
        )

        schema = shape.to_genai_schema()

        assert isinstance(schema, genai_types.Schema)
        assert schema.type == genai_types.Type.OBJECT
        assert schema.required == ["flag"]
        assert schema.properties["flag"].type == genai_types.Type.BOOLEAN
        assert schema.properties["tags"].items.type == genai_types.Type.STRING


class TestViolations:
    def setup_method(self):
        self.shape = array(
            record(
                sender=string(enum=["user", "gemini"]),
                content=string(),
            )
        )

    def test_conforming_value_has_no_violations(self):
        value = [{"sender": "user", "content": "hi"}]
        assert self.shape.violations(value) == []

    def test_violations_are_reported_with_paths(self):
        value = [
            {"sender": "user", "content": "hi"},
            {"sender": "robot"},
        ]

        found = self.shape.violations(value)

        assert Violation("$[1]", "missing required field 'content'") in found
        assert any(v.path == "$[1].sender" for v in found)
        assert len(found) == 2

    def test_wrong_kind(self):
        assert self.shape.violations({"not": "a list"}) == [
            Violation("$", "expected an array")
        ]

    def test_booleans_are_not_numbers(self):
        assert number().violations(True) == [Violation("$", "expected a number")]
        assert number().violations(2.5) == []
