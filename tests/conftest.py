"""Test configuration for json_shape."""
import sys
from pathlib import Path

# Add package directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "json_shape"))

import pytest

from json_shape import (
    array,
    boolean,
    literal,
    null,
    number,
    object_,
    optional,
    string,
    tuple_,
    union,
)
from json_shape.schema.definition import clear_cache


@pytest.fixture
def human_schema():
    """Composite schema touching every kind of runtime type."""
    return object_({
        "name": string(),
        "age": number(),
        "isHuman": optional(boolean()),
        "aliases": array(string()),
        "myObj": object_({
            "bos": string(),
            "bosAge": number(),
        }),
        "myUnion": union(number(), boolean()),
        "objs": array(object_({
            "prop1": string(),
            "prop2": number(),
        })),
        "myLit": literal("POST"),
        "myLitUnion": union(literal("POST"), literal("GET")),
        "myNullable": union(string(), null()),
        "onlyNull": null(),
        "position": tuple_(number(), number()),
    })


@pytest.fixture
def human():
    """A value conforming to ``human_schema``."""
    return {
        "name": "jack",
        "age": 4,
        "aliases": ["world", "abc"],
        "myObj": {"bos": "adam", "bosAge": 8},
        "myUnion": False,
        "objs": [{"prop1": "hello", "prop2": 3}],
        "myLit": "POST",
        "myLitUnion": "GET",
        "myNullable": "hey",
        "onlyNull": None,
        "position": [1.5, -2],
    }


@pytest.fixture
def clean_definition_cache():
    """Empty the definition cache before and after a test."""
    clear_cache()
    yield
    clear_cache()
