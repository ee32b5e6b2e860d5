"""Parsers and checks — the per-field decoding engine.

A ``Parser`` turns the raw value(s) submitted for one field into a typed
value. Checks are layered on top as methods that return a new parser
wrapping the previous one::

    age = parse_int.check_int_more_than(0).check_int_less_than(150)

Short-circuiting is per field and follows two rules:

- A *parse* failure (the text could not be converted at all) yields the
  type's zero value, one error, and ``Status.DONT_CHECK``. Checks further
  down the chain are skipped.
- A *check* failure adds one error but leaves ``Status.CHECK``, so later
  checks still run and can report their own problems.

Errors are most recent first: the error from the outermost check comes
first in ``Decoded.errors``.
"""

from collections.abc import Callable, Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any

from formwork.field_errors import (
    CustomError,
    FieldError,
    MustBeAccepted,
    MustBeFloatLessThan,
    MustBeFloatMoreThan,
    MustBeIntLessThan,
    MustBeIntMoreThan,
    MustBePresent,
    MustBeStringLengthLessThan,
    MustBeStringLengthMoreThan,
    MustConfirm,
)


class Status(Enum):
    """Whether checks later in a field's chain should still run."""

    CHECK = "check"
    DONT_CHECK = "dont_check"


@dataclass(frozen=True, slots=True)
class Decoded[T]:
    """The outcome of running a parser over one field's raw values."""

    value: T
    status: Status
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


# A rule inspects a decoded value and returns the error to record, if any.
type Rule[T] = Callable[[T], FieldError | None]

# User-supplied check: returns an error message, or None when the value is fine.
type Checker[T] = Callable[[T], str | None]


class Parser[T]:
    """Decodes one field's raw values into a ``T``.

    Parsers are immutable and hold no per-run state, so a single instance
    can be shared by any number of schemas, forms and threads.

    Calling a parser runs it::

        parse_int(["42"], Status.CHECK)
        # Decoded(value=42, status=<Status.CHECK: 'check'>, errors=())
    """

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[list[str], Status], Decoded[T]]) -> None:
        self._run = run

    def __call__(self, inputs: list[str], status: Status = Status.CHECK) -> Decoded[T]:
        return self._run(inputs, status)

    # -- Composition --

    def _checked(self, rule: Rule[T]) -> "Parser[T]":
        run = self._run

        def checked(inputs: list[str], status: Status) -> Decoded[T]:
            decoded = run(inputs, status)
            if decoded.status is Status.DONT_CHECK:
                return decoded
            error = rule(decoded.value)
            if error is None:
                return decoded
            return Decoded(decoded.value, Status.CHECK, (error, *decoded.errors))

        return Parser(checked)

    def check(self, checker: Checker[T]) -> "Parser[T]":
        """Add a custom check.

        *checker* receives the decoded value and returns an error message,
        or ``None`` if the value is acceptable. Messages are recorded as
        ``CustomError``::

            def no_spaces(value: str) -> str | None:
                if " " in value:
                    return "must not contain spaces"
                return None

            username = parse_string.check_not_empty().check(no_spaces)
        """

        def rule(value: T) -> FieldError | None:
            message = checker(value)
            if message is None:
                return None
            return CustomError(message)

        return self._checked(rule)

    # -- Presence --

    def check_not_empty(self) -> "Parser[T]":
        """Value must not be empty (``""``, or an empty list from ``parse_list``)."""

        def rule(value: Any) -> FieldError | None:
            if isinstance(value, Sized) and len(value) == 0:
                return MustBePresent()
            return None

        return self._checked(rule)

    def check_accepted(self) -> "Parser[T]":
        """Value must be ``True``, as for a terms and conditions checkbox."""
        return self._checked(lambda value: None if value is True else MustBeAccepted())

    def check_confirms(self, other: T) -> "Parser[T]":
        """Value must equal *other*, typically a password decoded earlier."""
        return self._checked(lambda value: None if value == other else MustConfirm())

    # -- Numbers --

    def check_int_less_than(self, limit: int) -> "Parser[T]":
        return self._checked(lambda value: None if value < limit else MustBeIntLessThan(limit))

    def check_int_more_than(self, limit: int) -> "Parser[T]":
        return self._checked(lambda value: None if value > limit else MustBeIntMoreThan(limit))

    def check_float_less_than(self, limit: float) -> "Parser[T]":
        return self._checked(
            lambda value: None if value < limit else MustBeFloatLessThan(limit)
        )

    def check_float_more_than(self, limit: float) -> "Parser[T]":
        return self._checked(
            lambda value: None if value > limit else MustBeFloatMoreThan(limit)
        )

    # -- Strings --

    def check_string_length_less_than(self, limit: int) -> "Parser[T]":
        """String must have fewer than *limit* characters."""
        return self._checked(
            lambda value: None if len(value) < limit else MustBeStringLengthLessThan(limit)
        )

    def check_string_length_more_than(self, limit: int) -> "Parser[T]":
        """String must have more than *limit* characters."""
        return self._checked(
            lambda value: None if len(value) > limit else MustBeStringLengthMoreThan(limit)
        )


# ---------------------------------------------------------------------------
# Building parsers
# ---------------------------------------------------------------------------


def single[T](
    convert: Callable[[str], T | None],
    error: FieldError,
    zero: T,
) -> Parser[T]:
    """Build a parser for a single text value.

    *convert* receives the most relevant raw value (``""`` when nothing was
    submitted) and returns the typed value, or ``None`` when the text cannot
    be converted. Conversion failure yields *zero*, *error* and
    ``Status.DONT_CHECK``.
    """

    def run(inputs: list[str], status: Status) -> Decoded[T]:
        raw = inputs[0] if inputs else ""
        value = convert(raw)
        if value is None:
            return Decoded(zero, Status.DONT_CHECK, (error,))
        return Decoded(value, status)

    return Parser(run)


def parse[T](fn: Callable[[list[str]], T], default: Any = None) -> Parser[T]:
    """Escape hatch: decode the raw value list with an arbitrary function.

    *fn* receives every raw value for the field and returns the decoded
    value, or raises ``ValueError`` whose message is recorded as a
    ``CustomError``. On failure the value is *default* and later checks
    are skipped::

        def parse_slug(inputs: list[str]) -> str:
            value = inputs[0] if inputs else ""
            if not value.isidentifier():
                raise ValueError("must be a slug")
            return value

        slug = parse(parse_slug, default="")
    """

    def run(inputs: list[str], status: Status) -> Decoded[T]:
        try:
            value = fn(inputs)
        except ValueError as exc:
            return Decoded(default, Status.DONT_CHECK, (CustomError(str(exc)),))
        return Decoded(value, status)

    return Parser(run)


def parse_list[T](inner: Parser[T]) -> Parser[list[T]]:
    """Apply *inner* to every raw value separately.

    Values keep the order they were handed in. Errors from all items are
    combined with duplicates dropped, so three bad integers report
    ``MustBeInt`` once. The outgoing status is whatever the last item
    produced. Use with ``multifield`` to see every submitted value.
    """

    def run(inputs: list[str], status: Status) -> Decoded[list[T]]:
        values: list[T] = []
        errors: list[FieldError] = []
        outgoing = status
        for raw in inputs:
            decoded = inner([raw], status)
            values.append(decoded.value)
            for error in decoded.errors:
                if error not in errors:
                    errors.append(error)
            outgoing = decoded.status
        return Decoded(values, outgoing, tuple(errors))

    return Parser(run)


def parse_optional[T](inner: Parser[T]) -> Parser[T | None]:
    """Treat a missing or blank field as ``None`` instead of running *inner*.

    Put checks on *inner*, not on the optional parser, since they would
    otherwise receive ``None``::

        parse_optional(parse_int.check_int_more_than(0))
    """

    def run(inputs: list[str], status: Status) -> Decoded[T | None]:
        if not inputs or inputs == [""]:
            return Decoded(None, status)
        return inner(inputs, status)

    return Parser(run)
