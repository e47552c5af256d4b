"""Tests for is_valid()."""

import copy
import itertools

import pytest

from json_shape import (
    ABSENT,
    SchemaDefinitionError,
    array,
    boolean,
    is_valid,
    literal,
    null,
    number,
    object_,
    optional,
    string,
    tuple_,
    union,
)
from json_shape.models import ArrayType, StringType

SAMPLE_VALUES = [
    None,
    True,
    False,
    0,
    4,
    -1.5,
    "",
    "4",
    "null",
    [],
    [1, 2],
    {},
    {"a": 1},
    ABSENT,
]


def _kind(value):
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "other"


class TestPrimitives:
    """Primitive schemas match exactly their own kind."""

    @pytest.mark.parametrize(
        "schema,kind",
        [
            (null(), "null"),
            (boolean(), "boolean"),
            (number(), "number"),
            (string(), "string"),
        ],
    )
    @pytest.mark.parametrize("value", SAMPLE_VALUES, ids=repr)
    def test_kind_matrix(self, schema, kind, value):
        assert is_valid(schema, value) == (_kind(value) == kind)

    def test_no_coercion(self):
        assert not is_valid(number(), "4")
        assert not is_valid(string(), 4)
        assert not is_valid(boolean(), 1)
        assert not is_valid(boolean(), "true")
        assert not is_valid(null(), "null")

    def test_bool_is_not_a_number(self):
        assert not is_valid(number(), True)
        assert not is_valid(number(), False)

    def test_int_and_float_are_numbers(self):
        assert is_valid(number(), 3)
        assert is_valid(number(), 3.25)


class TestLiteral:
    """Literal schemas use structural equality."""

    def test_equal_value(self):
        assert is_valid(literal("POST"), "POST")
        assert not is_valid(literal("POST"), "GET")

    def test_differently_typed_value_rejected(self):
        assert not is_valid(literal(1), "1")
        assert not is_valid(literal(1), True)
        assert not is_valid(literal(True), 1)
        assert not is_valid(literal(None), False)

    def test_numbers_compare_by_value(self):
        assert is_valid(literal(1), 1.0)

    def test_composite_literal(self):
        schema = literal({"tags": ["a", "b"], "n": None})
        assert is_valid(schema, {"tags": ["a", "b"], "n": None})
        # structural, not identity
        assert is_valid(schema, copy.deepcopy({"tags": ["a", "b"], "n": None}))
        assert not is_valid(schema, {"tags": ["b", "a"], "n": None})
        assert not is_valid(schema, {"tags": ["a", "b"], "n": None, "extra": 1})


class TestOptional:
    """Optional only special-cases absence."""

    @pytest.mark.parametrize("element", [null(), boolean(), number(), string(), array(string())])
    def test_absent_always_valid(self, element):
        assert is_valid(optional(element), ABSENT)

    def test_present_value_must_match(self):
        assert is_valid(optional(string()), "x")
        assert not is_valid(optional(string()), 1)

    def test_null_is_not_absent(self):
        assert not is_valid(optional(string()), None)
        assert is_valid(optional(null()), None)

    def test_absent_fails_non_optional(self):
        assert not is_valid(string(), ABSENT)
        assert not is_valid(null(), ABSENT)

    def test_optional_null_field(self):
        schema = object_({"x": optional(null())})
        assert is_valid(schema, {})
        assert is_valid(schema, {"x": None})
        assert not is_valid(schema, {"x": 0})

    def test_required_null_field(self):
        schema = object_({"x": null()})
        assert not is_valid(schema, {})
        assert is_valid(schema, {"x": None})


class TestArray:
    """Homogeneous sequences."""

    @pytest.mark.parametrize("element", [null(), number(), object_({"a": string()}), union()])
    def test_empty_sequence_always_valid(self, element):
        assert is_valid(array(element), [])

    def test_every_item_must_match(self):
        assert is_valid(array(number()), [1, 2.5, -3])
        assert not is_valid(array(number()), [1, "2", 3])

    def test_non_sequences_rejected(self):
        assert not is_valid(array(string()), "abc")
        assert not is_valid(array(string()), {"0": "a"})
        assert not is_valid(array(string()), None)
        assert not is_valid(array(string()), ABSENT)

    def test_tuples_count_as_sequences(self):
        assert is_valid(array(number()), (1, 2))

    def test_nested_arrays(self):
        schema = array(array(number()))
        assert is_valid(schema, [[1], [], [2, 3]])
        assert not is_valid(schema, [[1], 2])


class TestTuple:
    """Fixed-length sequences."""

    def test_matching_tuple(self):
        assert is_valid(tuple_(string(), number()), ["a", 1])

    def test_length_must_match(self):
        schema = tuple_(string(), number())
        assert not is_valid(schema, ["a", 1, True])
        assert not is_valid(schema, ["a"])
        assert not is_valid(schema, [])

    def test_positions_must_match(self):
        schema = tuple_(string(), number())
        assert not is_valid(schema, [1, "a"])

    def test_non_sequences_rejected(self):
        assert not is_valid(tuple_(string()), "a")
        assert not is_valid(tuple_(string()), {"0": "a"})

    def test_optional_position_still_requires_item(self):
        schema = tuple_(string(), optional(number()))
        assert is_valid(schema, ["a", 1])
        assert not is_valid(schema, ["a"])


class TestUnion:
    """Unions are pure disjunction."""

    def test_any_member_matches(self):
        schema = union(number(), boolean())
        assert is_valid(schema, 1)
        assert is_valid(schema, False)
        assert not is_valid(schema, "1")
        assert not is_valid(schema, None)

    def test_literal_union(self):
        schema = union(literal("POST"), literal("GET"))
        assert is_valid(schema, "GET")
        assert not is_valid(schema, "PUT")

    def test_nullable(self):
        schema = union(string(), null())
        assert is_valid(schema, None)
        assert is_valid(schema, "x")
        assert not is_valid(schema, ABSENT)

    @pytest.mark.parametrize("value", SAMPLE_VALUES + [["a", 1], {"a": "x"}], ids=repr)
    def test_member_order_does_not_matter(self, value):
        members = [number(), literal("null"), tuple_(string(), number()), object_({"a": string()})]
        results = {is_valid(union(*perm), value) for perm in itertools.permutations(members)}
        assert len(results) == 1


class TestObject:
    """Keyed records."""

    def test_fields_must_match(self):
        schema = object_({"name": string(), "age": number()})
        assert is_valid(schema, {"name": "jack", "age": 4})
        assert not is_valid(schema, {"name": "jack", "age": True})
        assert not is_valid(schema, {"name": "jack"})

    @pytest.mark.parametrize("value", [None, True, 3, "obj", [], [{"name": "jack"}], ABSENT], ids=repr)
    def test_non_records_rejected(self, value):
        assert not is_valid(object_({"name": optional(string())}), value)
        assert not is_valid(object_(), value)

    @pytest.mark.parametrize(
        "value",
        [
            {"name": "jack", "age": 4},
            {"name": "jack", "age": "4"},
            {"name": "jack"},
            {},
        ],
        ids=repr,
    )
    def test_extra_fields_never_change_result(self, value):
        schema = object_({"name": string(), "age": optional(number())})
        expected = is_valid(schema, value)
        extended = dict(value, isHuman=True, nested={"anything": [1, None]})
        assert is_valid(schema, extended) == expected

    def test_nested_objects(self):
        schema = object_({"boss": object_({"name": string()})})
        assert is_valid(schema, {"boss": {"name": "adam", "age": 8}})
        assert not is_valid(schema, {"boss": {"name": 8}})
        assert not is_valid(schema, {"boss": None})


class TestComposite:
    """End-to-end validation of a schema using every runtime type."""

    def test_conforming_value(self, human_schema, human):
        assert is_valid(human_schema, human)

    def test_optional_field_present(self, human_schema, human):
        human["isHuman"] = True
        assert is_valid(human_schema, human)

    @pytest.mark.parametrize(
        "path,bad_value",
        [
            (("name",), 1),
            (("age",), "4"),
            (("isHuman",), None),
            (("aliases", 1), 2),
            (("myObj", "bosAge"), "8"),
            (("myUnion",), "false"),
            (("objs", 0, "prop1"), None),
            (("myLit",), "GET"),
            (("myLitUnion",), "PUT"),
            (("myNullable",), 0),
            (("onlyNull",), False),
            (("position", 0), "1.5"),
        ],
    )
    def test_single_leaf_perturbation_rejected(self, human_schema, human, path, bad_value):
        target = human
        for step in path[:-1]:
            target = target[step]
        target[path[-1]] = bad_value
        assert not is_valid(human_schema, human)

    @pytest.mark.parametrize("field", ["name", "age", "aliases", "myObj", "onlyNull", "position"])
    def test_missing_required_field_rejected(self, human_schema, human, field):
        del human[field]
        assert not is_valid(human_schema, human)


class TestRuntimeTypeArgument:
    """is_valid accepts bare runtime types as well as schemas."""

    def test_bare_runtime_type(self):
        assert is_valid(StringType(), "x")

    def test_not_a_runtime_type(self):
        with pytest.raises(SchemaDefinitionError, match="Expected a Schema or runtime type, got str"):
            is_valid("string", "x")

    def test_not_a_runtime_type_even_for_absent_value(self):
        with pytest.raises(SchemaDefinitionError):
            is_valid({"base": "string"}, ABSENT)

    def test_bad_nested_node(self):
        with pytest.raises(SchemaDefinitionError, match="Unknown runtime type"):
            is_valid(ArrayType("string"), ["x"])
