# aif_core/__init__.py
from .errors import ParseError, SchemaToolError, SerializeError
from .schema_diff import collect_paths, compute_path_diff, diff_schemas
from .schema_infer import Node, TypeTag, build_tree, infer_schema, infer_schema_document

__all__ = [
    "infer_schema",
    "diff_schemas",
    "infer_schema_document",
    "compute_path_diff",
    "collect_paths",
    "build_tree",
    "Node",
    "TypeTag",
    "ParseError",
    "SerializeError",
    "SchemaToolError",
]
