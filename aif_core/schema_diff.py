# aif_core/schema_diff.py
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set

from .codec import dump_text, load_text


@dataclass
class PathDiff:
    added: List[str]
    removed: List[str]
    common: List[str]

    def to_dict(self):
        return {"added": self.added, "removed": self.removed, "common": self.common}


def _join(prefix, key):
    return f"{prefix}.{key}" if prefix else key


def collect_paths(schema: Any, prefix: str = "", acc: Optional[Set[str]] = None) -> Set[str]:
    """
    Linearize every reachable property / array position of a schema document:
    "a", "a.b", "tags", "tags[]", "[]" for a root array.
    Fragments that are not objects are skipped, never rejected.
    """
    if acc is None:
        acc = set()
    if not isinstance(schema, dict):
        return acc

    props = schema.get("properties")
    if isinstance(props, dict):
        for k, v in props.items():
            path = _join(prefix, k)
            acc.add(path)
            collect_paths(v, path, acc)

    if "items" in schema:
        path = f"{prefix}[]" if prefix else "[]"
        acc.add(path)
        collect_paths(schema["items"], path, acc)

    return acc


def compute_path_diff(old_schema: Dict[str, Any], new_schema: Dict[str, Any]) -> PathDiff:
    """added = new - old, removed = old - new, common = both; each list sorted."""
    old_paths = collect_paths(old_schema)
    new_paths = collect_paths(new_schema)
    return PathDiff(
        added=sorted(new_paths - old_paths),
        removed=sorted(old_paths - new_paths),
        common=sorted(old_paths & new_paths),
    )


def diff_schemas(a: str, b: str) -> str:
    """diff_schemas(a: JSON schema text, b: JSON schema text) -> pretty JSON diff text."""
    schema_a = load_text(a, side="A")
    schema_b = load_text(b, side="B")
    return dump_text(compute_path_diff(schema_a, schema_b).to_dict())
