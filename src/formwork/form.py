"""Form — a schema paired with submitted values and, after a failed run, errors.

Forms are immutable. Every method that looks like it changes the form
returns a new one::

    form = Form(signup_schema()).add_values(pairs_from_urlencoded(body))

    match form.run():
        case Valid(signup):
            create_account(signup)
        case Invalid(form):
            return render("signup.html", form=form)

In the template, ``form.field_value("email")`` re-populates the input and
``form.field_error_messages("email")`` lists what went wrong.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from formwork.config import FormConfig
from formwork.field_errors import FieldError
from formwork.schema import ErrorRecord, Schema
from formwork.translate import Translator, translator_for
from formwork.values import Entry, Values

logger = logging.getLogger("formwork.form")


@dataclass(frozen=True, slots=True)
class Valid[T]:
    """A successful run. Truthy."""

    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid[T]:
    """A failed run, carrying the form annotated with errors. Falsy.

    Enables the ``if not result:`` pattern::

        result = form.run()
        if not result:
            return render("form.html", form=result.form)
    """

    form: "Form[T]"

    def __bool__(self) -> bool:
        return False


type RunResult[T] = Valid[T] | Invalid[T]


class Form[T]:
    """A schema plus the values submitted for it.

    Args:
        schema: The schema to decode with.
        translator: Turns field errors into messages. Defaults to the
            translator for ``config.language``.
        config: Form defaults. ``FormConfig()`` if omitted.
    """

    __slots__ = ("_errors", "_schema", "_translator", "_values")

    _schema: Schema[T]
    _translator: Translator
    _values: Values
    _errors: tuple[ErrorRecord, ...]

    def __init__(
        self,
        schema: Schema[T],
        *,
        translator: Translator | None = None,
        config: FormConfig | None = None,
    ) -> None:
        if translator is None:
            translator = translator_for((config or FormConfig()).language)
        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_translator", translator)
        object.__setattr__(self, "_values", Values())
        object.__setattr__(self, "_errors", ())

    @classmethod
    def new(cls, schema: Schema[T]) -> "Form[T]":
        """Create an empty form with the default translator."""
        return cls(schema)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Form is immutable"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"Form(values={len(self._values)}, errors={len(self._errors)})"

    def _evolve(
        self,
        *,
        translator: Translator | None = None,
        values: Values | None = None,
        errors: tuple[ErrorRecord, ...] | None = None,
    ) -> "Form[T]":
        form = object.__new__(type(self))
        object.__setattr__(form, "_schema", self._schema)
        object.__setattr__(form, "_translator", translator or self._translator)
        object.__setattr__(form, "_values", self._values if values is None else values)
        object.__setattr__(form, "_errors", self._errors if errors is None else errors)
        return form

    # -- Configuration --

    def language(self, translator: Translator) -> "Form[T]":
        """Return a form that translates errors with *translator*."""
        return self._evolve(translator=translator)

    # -- Values --

    def add_string(self, name: str, value: str) -> "Form[T]":
        return self._evolve(values=self._values.add_string(name, value))

    def add_int(self, name: str, value: int) -> "Form[T]":
        return self._evolve(values=self._values.add_int(name, value))

    def add_values(self, pairs: Iterable[Entry]) -> "Form[T]":
        """Add a batch of submitted values ahead of any already present."""
        return self._evolve(values=self._values.add_values(pairs))

    def set_values(self, pairs: Iterable[Entry]) -> "Form[T]":
        """Replace every submitted value with *pairs*."""
        return self._evolve(values=self._values.set_values(pairs))

    def all_values(self) -> list[Entry]:
        """Every submitted ``(name, value)`` pair, most recent first."""
        return self._values.all()

    def field_value(self, name: str) -> str:
        """The most recent value for *name*, or ``""``, for re-populating inputs."""
        return self._values.field_value(name)

    def field_values(self, name: str) -> list[str]:
        """Every value for *name*, most recent first."""
        return self._values.field_values(name)

    # -- Running --

    def run(self) -> RunResult[T]:
        """Decode the submitted values.

        Every field is decoded, so a failed run reports every problem at
        once. Each run starts from a clean slate: errors recorded by an
        earlier run or by ``add_error`` are replaced.

        Returns:
            ``Valid(model)`` if no field produced an error, otherwise
            ``Invalid(form)`` where *form* keeps these values and carries
            the new errors.
        """
        model, records = self._schema.decode(self._values)
        if not records:
            logger.debug("Form decoded: %d value(s)", len(self._values))
            return Valid(model)
        logger.debug(
            "Form invalid: %s",
            ", ".join(name for name, _ in records),
        )
        return Invalid(self._evolve(errors=tuple(records)))

    # -- Errors --

    def all_errors(self) -> list[ErrorRecord]:
        """Every ``(field name, errors)`` record, most recently processed first."""
        return list(self._errors)

    def field_errors(self, name: str) -> list[FieldError]:
        """Errors recorded for *name*, most recent first."""
        for key, errors in self._errors:
            if key == name:
                return list(errors)
        return []

    def field_error_messages(self, name: str) -> list[str]:
        """Translated messages for *name*, in the same order as ``field_errors``."""
        return [self._translator(error) for error in self.field_errors(name)]

    def add_error(self, name: str, error: FieldError) -> "Form[T]":
        """Record an error found outside the schema, such as a taken username.

        The error goes ahead of any already recorded for *name*. The schema
        is not re-run::

            if await users.exists(signup.email):
                form = form.add_error("email", MustBeUnique())
        """
        for index, (key, errors) in enumerate(self._errors):
            if key == name:
                updated = (*self._errors[:index], (name, (error, *errors)), *self._errors[index + 1 :])
                return self._evolve(errors=updated)
        return self._evolve(errors=((name, (error,)), *self._errors))


def new[T](schema: Schema[T]) -> Form[T]:
    """Create an empty form for *schema* with the default translator."""
    return Form(schema)
