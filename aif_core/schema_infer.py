# aif_core/schema_infer.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from . import config
from .codec import check_depth, dump_text, load_text

INT64_MIN = -(2 ** 63)
UINT64_MAX = 2 ** 64 - 1


class TypeTag(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


def _detect_type(value):
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, int):
        # integer only when it fits i64 or u64; bigger ints degrade to number
        if INT64_MIN <= value <= UINT64_MAX:
            return TypeTag.INTEGER
        return TypeTag.NUMBER
    if isinstance(value, float):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, dict):
        return TypeTag.OBJECT
    if isinstance(value, list):
        return TypeTag.ARRAY
    raise TypeError(f"not a JSON value: {type(value).__name__}")


@dataclass
class Node:
    """All values observed at one structural position."""

    types: Set[TypeTag] = field(default_factory=set)
    properties: Dict[str, "Node"] = field(default_factory=dict)
    # one node shared by every element of every array seen here
    items: Optional["Node"] = None

    def observe(self, value):
        tag = _detect_type(value)
        self.types.add(tag)
        if tag is TypeTag.ARRAY:
            if self.items is None:
                self.items = Node()
            for el in value:
                self.items.observe(el)
            # an empty array leaves no items node behind
            if not self.items.types:
                self.items = None
        elif tag is TypeTag.OBJECT:
            for k, v in value.items():
                child = self.properties.get(k)
                if child is None:
                    child = self.properties[k] = Node()
                child.observe(v)
        return self

    def merge(self, other):
        """Fold another tree into this one; same result as observing its samples here."""
        self.types |= other.types
        for k, child in other.properties.items():
            mine = self.properties.get(k)
            if mine is None:
                mine = self.properties[k] = Node()
            mine.merge(child)
        if other.items is not None:
            if self.items is None:
                self.items = Node()
            self.items.merge(other.items)
        return self

    def to_json_schema(self, sort_properties=None):
        if sort_properties is None:
            sort_properties = config.SORT_PROPERTIES
        schema: Dict[str, Any] = {}

        types = sorted(t.value for t in self.types)
        if len(types) == 1:
            schema["type"] = types[0]
        elif types:
            schema["type"] = types

        if TypeTag.OBJECT in self.types and self.properties:
            keys = sorted(self.properties) if sort_properties else list(self.properties)
            schema["properties"] = {
                k: self.properties[k].to_json_schema(sort_properties) for k in keys
            }
            # no "required": presence across samples is not tracked

        if TypeTag.ARRAY in self.types and self.items is not None:
            schema["items"] = self.items.to_json_schema(sort_properties)

        return schema


def build_tree(documents):
    root = Node()
    for doc in documents:
        root.observe(doc)
    return root


def parse_samples(samples: List[str]) -> Node:
    """Decode every sample and observe it; the first bad sample aborts with ParseError."""
    if isinstance(samples, (str, bytes)):
        raise TypeError("samples must be a list of JSON strings, not a single string")
    root = Node()
    for i, s in enumerate(samples):
        root.observe(load_text(s, index=i))
    return root


def wrap_root_schema(root, sort_properties=None):
    emitted = root.to_json_schema(sort_properties)
    # top-level documents are treated as objects whatever was observed
    return {
        "$schema": config.SCHEMA_DIALECT,
        "type": "object",
        "properties": emitted.get("properties", {}),
    }


def infer_schema_document(documents, sort_properties=None):
    """Schema dict from already-decoded documents; too-deep documents raise ParseError."""
    documents = list(documents)
    for i, doc in enumerate(documents):
        check_depth(doc, index=i)
    return wrap_root_schema(build_tree(documents), sort_properties)


def infer_schema(samples: List[str], sort_properties=None) -> str:
    """
    infer_schema(samples: list of JSON strings) -> pretty JSON Schema string.
    Raises ParseError on the first invalid sample, SerializeError if the
    result cannot be rendered.
    """
    root = parse_samples(samples)
    return dump_text(wrap_root_schema(root, sort_properties))
