"""Formwork exception hierarchy.

Invalid submissions are never exceptions: they become ``FieldError`` values
recorded against the field. The types here are for programming and
configuration mistakes only.
"""


class FormworkError(Exception):
    """Base for all formwork-specific errors."""


class ConfigurationError(FormworkError):
    """Raised when configuration is invalid.

    Typically an unknown language tag, or an optional dependency that is
    needed but not installed.
    """


class SchemaError(FormworkError):
    """Raised when a schema is built or chained incorrectly.

    For example a ``field`` continuation that returns something other than
    a ``Schema``.
    """
