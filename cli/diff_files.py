# cli/diff_files.py

import sys

from aif_core.errors import SchemaToolError
from aif_core.files import read_text
from aif_core.schema_diff import diff_schemas

if __name__ == "__main__":

    if len(sys.argv) != 3:

        print("usage: python cli/diff_files.py old_schema.json new_schema.json")

        sys.exit(2)

    try:

        print(diff_schemas(read_text(sys.argv[1]), read_text(sys.argv[2])))

    except SchemaToolError as e:

        print(e, file=sys.stderr)

        sys.exit(1)
