"""Formwork — decode HTML form submissions into typed values, or per-field errors.

Build a schema once, then run it against each submission::

    from formwork import Form, Invalid, Valid, field, success
    from formwork import parse_email, parse_int

    schema = field("email", parse_email, lambda email:
        field("age", parse_int.check_int_more_than(17), lambda age:
            success(Person(email=email, age=age))))

    match Form(schema).add_values(pairs).run():
        case Valid(person):
            ...
        case Invalid(form):
            form.field_error_messages("age")  # ["must be more than 17"]

Parse failures stop the remaining checks for that field only; every field
is always decoded, so a failed run reports every problem on the form.
"""

from formwork.config import FormConfig
from formwork.errors import ConfigurationError, FormworkError, SchemaError
from formwork.field_errors import (
    CustomError,
    FieldError,
    MustBeAccepted,
    MustBeColour,
    MustBeDate,
    MustBeDateTime,
    MustBeEmail,
    MustBeFloat,
    MustBeFloatLessThan,
    MustBeFloatMoreThan,
    MustBeInt,
    MustBeIntLessThan,
    MustBeIntMoreThan,
    MustBePhoneNumber,
    MustBePresent,
    MustBeStringLengthLessThan,
    MustBeStringLengthMoreThan,
    MustBeTime,
    MustBeUnique,
    MustBeUrl,
    MustConfirm,
)
from formwork.fields import (
    Colour,
    parse_bool,
    parse_checkbox,
    parse_color,
    parse_colour,
    parse_date,
    parse_date_time,
    parse_email,
    parse_float,
    parse_int,
    parse_phone_number,
    parse_string,
    parse_time,
    parse_url,
)
from formwork.form import Form, Invalid, RunResult, Valid, new
from formwork.parser import Decoded, Parser, Status, parse, parse_list, parse_optional
from formwork.schema import Schema, field, multi, multifield, schema_for, success
from formwork.translate import Translator, en_gb, en_us, translator_for
from formwork.values import Values

__version__ = "0.1.0"
__all__ = [
    "Colour",
    "ConfigurationError",
    "CustomError",
    "Decoded",
    "FieldError",
    "Form",
    "FormConfig",
    "FormworkError",
    "Invalid",
    "MustBeAccepted",
    "MustBeColour",
    "MustBeDate",
    "MustBeDateTime",
    "MustBeEmail",
    "MustBeFloat",
    "MustBeFloatLessThan",
    "MustBeFloatMoreThan",
    "MustBeInt",
    "MustBeIntLessThan",
    "MustBeIntMoreThan",
    "MustBePhoneNumber",
    "MustBePresent",
    "MustBeStringLengthLessThan",
    "MustBeStringLengthMoreThan",
    "MustBeTime",
    "MustBeUnique",
    "MustBeUrl",
    "MustConfirm",
    "Parser",
    "RunResult",
    "Schema",
    "SchemaError",
    "Status",
    "Translator",
    "Valid",
    "Values",
    "en_gb",
    "en_us",
    "field",
    "multi",
    "multifield",
    "new",
    "parse",
    "parse_bool",
    "parse_checkbox",
    "parse_color",
    "parse_colour",
    "parse_date",
    "parse_date_time",
    "parse_email",
    "parse_float",
    "parse_int",
    "parse_list",
    "parse_optional",
    "parse_phone_number",
    "parse_string",
    "parse_time",
    "parse_url",
    "schema_for",
    "success",
    "translator_for",
]
