# aif_core/codec.py
import orjson

from . import config
from .errors import ParseError, SerializeError


def _label(index, side):
    if side is not None:
        return f"schema {side} parse error"
    if index is not None:
        return f"Invalid JSON in sample {index}"
    return "Invalid JSON"


def nesting_depth(value):
    """Container nesting of a decoded value; scalars are 0."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        v, depth = stack.pop()
        if isinstance(v, dict):
            children = v.values()
        elif isinstance(v, list):
            children = v
        else:
            continue
        if depth > deepest:
            deepest = depth
        stack.extend((c, depth + 1) for c in children)
    return deepest


def check_depth(value, index=None, side=None):
    if nesting_depth(value) > config.MAX_DEPTH:
        raise ParseError(
            f"{_label(index, side)}: nesting deeper than {config.MAX_DEPTH} levels",
            index=index,
            side=side,
        )
    return value


def load_text(text, index=None, side=None):
    """Decode one JSON document, raising ParseError with the decoder message."""
    try:
        value = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"{_label(index, side)}: {e}", index=index, side=side) from e
    return check_depth(value, index=index, side=side)


def dump_text(obj):
    """Pretty-print (2-space indent) to str."""
    try:
        return orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode("utf-8")
    except orjson.JSONEncodeError as e:
        raise SerializeError(f"Serialize error: {e}") from e


def dump_compact(obj):
    # one sample per line, used when splitting array files into samples
    try:
        return orjson.dumps(obj).decode("utf-8")
    except orjson.JSONEncodeError as e:
        raise SerializeError(f"Serialize error: {e}") from e
