"""Translators — turn a ``FieldError`` into a message for the user.

A translator is any callable ``(FieldError) -> str``. Two are bundled,
British and American English, which differ only in spelling::

    en_gb(MustBeColour())  # "must be a hex colour code"
    en_us(MustBeColour())  # "must be a hex color code"

Swap the translator on a form with ``Form.language``, or pick one by tag
with ``translator_for``.
"""

from collections.abc import Callable

from formwork.errors import ConfigurationError
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

type Translator = Callable[[FieldError], str]


def en_gb(error: FieldError) -> str:
    """British English messages."""
    match error:
        case MustBeColour():
            return "must be a hex colour code"
        case _:
            return _english(error)


def en_us(error: FieldError) -> str:
    """American English messages."""
    match error:
        case MustBeColour():
            return "must be a hex color code"
        case _:
            return _english(error)


def _english(error: FieldError) -> str:
    match error:
        case MustBePresent():
            return "must not be blank"
        case MustBeInt():
            return "must be a whole number"
        case MustBeFloat():
            return "must be a number"
        case MustBeEmail():
            return "must be an email"
        case MustBePhoneNumber():
            return "must be a phone number"
        case MustBeUrl():
            return "must be a URL"
        case MustBeDate():
            return "must be a date"
        case MustBeTime():
            return "must be a time"
        case MustBeDateTime():
            return "must be a date and time"
        case MustBeStringLengthMoreThan(limit=limit):
            return f"must be more than {limit} characters"
        case MustBeStringLengthLessThan(limit=limit):
            return f"must be less than {limit} characters"
        case MustBeIntMoreThan(limit=limit) | MustBeFloatMoreThan(limit=limit):
            return f"must be more than {limit}"
        case MustBeIntLessThan(limit=limit) | MustBeFloatLessThan(limit=limit):
            return f"must be less than {limit}"
        case MustBeAccepted():
            return "must be accepted"
        case MustConfirm():
            return "doesn't match"
        case MustBeUnique():
            return "is already in use"
        case CustomError(message=message):
            return message
    msg = f"No message for field error {error!r}"
    raise TypeError(msg)


# ---------------------------------------------------------------------------
# Lookup by language tag
# ---------------------------------------------------------------------------

TRANSLATORS: dict[str, Translator] = {
    "en": en_gb,
    "en-gb": en_gb,
    "en-us": en_us,
}


def translator_for(tag: str) -> Translator:
    """Return the bundled translator for a language tag such as ``"en-US"``.

    Tags are case-insensitive and accept ``_`` in place of ``-``.

    Raises:
        ConfigurationError: If no translator is bundled for *tag*.
    """
    key = tag.strip().lower().replace("_", "-")
    try:
        return TRANSLATORS[key]
    except KeyError:
        available = ", ".join(sorted(TRANSLATORS))
        msg = f"No translator for language {tag!r}. Available: {available}"
        raise ConfigurationError(msg) from None
