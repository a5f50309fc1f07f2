# aif_core/files.py
import orjson

from .codec import dump_compact, load_text
from .schema_infer import infer_schema


def _decode(raw):
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin1", errors="ignore")


def _split_lines(text):
    samples = []
    for i, line in enumerate(text.splitlines()):
        line = line.strip()
        if not line:
            continue
        # raises ParseError carrying the line index
        load_text(line, index=i)
        samples.append(line)
    return samples


def split_samples(text):
    """
    Turn file text into JSON sample strings:
    - a top-level JSON array -> one sample per element
    - any other single JSON document -> one sample
    - otherwise JSON Lines, one sample per non-blank line
    """
    try:
        doc = orjson.loads(text)
    except orjson.JSONDecodeError:
        return _split_lines(text)
    if isinstance(doc, list):
        return [dump_compact(el) for el in doc]
    return [text]


def read_text(path):
    with open(path, "rb") as fh:
        return _decode(fh.read())


def read_samples(path):
    return split_samples(read_text(path))


def infer_from_files(paths):
    """One schema over the samples of every file, in the order given."""
    samples = []
    for path in paths:
        samples.extend(read_samples(path))
    return infer_schema(samples)
