# aif_core/errors.py


class SchemaToolError(ValueError):
    """Base error for the inference and diff entry points."""


class ParseError(SchemaToolError):
    """
    Input text is not valid JSON.
    `index` is set for infer_schema samples, `side` ("A"/"B") for diff_schemas.
    """

    def __init__(self, message, index=None, side=None):
        super().__init__(message)
        self.index = index
        self.side = side


class SerializeError(SchemaToolError):
    pass
