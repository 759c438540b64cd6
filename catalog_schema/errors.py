"""Exceptions raised while deriving catalog schemas."""


class SchemaGenerationError(Exception):
    """Base class for all schema generation failures."""


class FatalSchemaError(SchemaGenerationError):
    """A failure that aborts the whole run."""


class ModelSchemaError(SchemaGenerationError):
    """A failure that excludes a single model while the run continues."""


class MissingClassComment(FatalSchemaError):
    """The source file has no documented class."""

    def __init__(self, model_name: str) -> None:
        """Record the model whose class comment is missing."""
        super().__init__(f"No @class comment in {model_name}")
        self.model_name = model_name


class MissingInheritsDeclaration(ModelSchemaError):
    """No inheritance line could be located in the source file."""

    def __init__(self, filename: str) -> None:
        """Record the file that lacks an inheritance line."""
        super().__init__(f"Couldn't find 'inherits' line in {filename}")
        self.filename = filename


class UnparseableDocumentation(ModelSchemaError):
    """Source or documentation comment text is not well-formed."""


class UnsupportedArrayItemType(ModelSchemaError):
    """An array property has an item type with no known schema mapping."""

    def __init__(self, type_name: str) -> None:
        """Record the offending array type."""
        super().__init__(f"Not an array type: {type_name}")
        self.type_name = type_name
