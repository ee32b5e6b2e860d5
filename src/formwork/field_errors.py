"""Field errors — what went wrong with a single submitted field.

Every variant is a frozen, hashable dataclass, so errors compare by value
and can be deduplicated or used as dict keys. Variants that carry a
threshold keep it so translators can put it in the message::

    MustBeIntLessThan(limit=100) == MustBeIntLessThan(100)  # True
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldError:
    """Base for all field error variants."""


# ---------------------------------------------------------------------------
# Parse failures
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MustBePresent(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeInt(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeFloat(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeEmail(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBePhoneNumber(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeUrl(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeDate(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeTime(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeDateTime(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeColour(FieldError):
    pass


# ---------------------------------------------------------------------------
# Check failures
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MustBeStringLengthMoreThan(FieldError):
    limit: int


@dataclass(frozen=True, slots=True)
class MustBeStringLengthLessThan(FieldError):
    limit: int


@dataclass(frozen=True, slots=True)
class MustBeIntMoreThan(FieldError):
    limit: int


@dataclass(frozen=True, slots=True)
class MustBeIntLessThan(FieldError):
    limit: int


@dataclass(frozen=True, slots=True)
class MustBeFloatMoreThan(FieldError):
    limit: float


@dataclass(frozen=True, slots=True)
class MustBeFloatLessThan(FieldError):
    limit: float


@dataclass(frozen=True, slots=True)
class MustBeAccepted(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustConfirm(FieldError):
    pass


@dataclass(frozen=True, slots=True)
class MustBeUnique(FieldError):
    """Never produced by formwork itself.

    Callers add it with ``Form.add_error`` after checking their own store.
    """


@dataclass(frozen=True, slots=True)
class CustomError(FieldError):
    message: str
