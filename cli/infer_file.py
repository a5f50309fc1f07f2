# cli/infer_file.py

import sys

from aif_core.errors import SchemaToolError
from aif_core.files import infer_from_files

if __name__ == "__main__":

    if len(sys.argv) < 2:

        print("usage: python cli/infer_file.py path [path ...]")

        sys.exit(2)

    try:

        print(infer_from_files(sys.argv[1:]))

    except SchemaToolError as e:

        print(e, file=sys.stderr)

        sys.exit(1)
