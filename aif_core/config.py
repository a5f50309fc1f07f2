# aif_core/config.py
import os

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

# "1"/"true" -> emit properties with sorted keys at every level
SORT_PROPERTIES = os.getenv("AIF_SORT_PROPERTIES", "0").lower() in ("1", "true", "yes")

# max samples accepted by a single /infer request
API_MAX_SAMPLES = int(os.getenv("API_MAX_SAMPLES", "10000"))

# deepest container nesting accepted in a sample or schema; every object level
# becomes two schema levels and orjson.dumps stops at 254
MAX_DEPTH = 100
