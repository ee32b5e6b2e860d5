"""Schemas — how a whole model is decoded from named fields.

A schema is a chain of steps. Each ``field`` step decodes one field and
hands the value to a continuation that returns the rest of the chain;
``success`` ends it with the finished model::

    def signup() -> Schema[Signup]:
        return field("email", parse_email, lambda email:
            field("password", parse_string.check_not_empty(), lambda password:
                field("confirm", parse_string.check_confirms(password), lambda _:
                    success(Signup(email=email, password=password)))))

The continuation style lets later fields depend on earlier values (the
password confirmation above). When nothing depends on anything,
``schema_for`` builds the same chain from keyword arguments::

    schema = schema_for(Person, name=parse_string, age=parse_int)

Every field is always evaluated, even after an earlier field failed, so a
single run reports every problem on the form.
"""

from collections.abc import Callable
from typing import Any

from formwork.errors import SchemaError
from formwork.field_errors import FieldError
from formwork.parser import Parser, Status
from formwork.values import Values

type ErrorRecord = tuple[str, tuple[FieldError, ...]]


class Schema[T]:
    """Base for schema steps. Build with ``field``, ``multifield``, ``success``."""

    __slots__ = ()

    def decode(self, values: Values) -> tuple[T, list[ErrorRecord]]:
        """Run every step against *values*.

        Returns:
            The model built by the final ``success`` step, and the error
            records, most recently processed field first. The model is only
            meaningful when the record list is empty.
        """
        records: list[ErrorRecord] = []
        step: Schema[Any] = self
        while isinstance(step, _FieldStep):
            inputs = values.field_values(step.name)
            if not step.multi:
                inputs = inputs[:1]
            decoded = step.parser(inputs, Status.CHECK)
            if decoded.errors:
                records.insert(0, (step.name, decoded.errors))
            name = step.name
            step = step.then(decoded.value)
            if not isinstance(step, Schema):
                msg = f"Continuation for field {name!r} must return a Schema, got {type(step).__name__}"
                raise SchemaError(msg)
        if not isinstance(step, _Success):
            msg = f"Schema chains must end with success(), got {type(step).__name__}"
            raise SchemaError(msg)
        return step.model, records


class _FieldStep[A, T](Schema[T]):
    __slots__ = ("multi", "name", "parser", "then")

    def __init__(
        self,
        name: str,
        parser: Parser[A],
        then: Callable[[A], Schema[T]],
        *,
        multi: bool,
    ) -> None:
        if not isinstance(parser, Parser):
            msg = f"Field {name!r} needs a Parser, got {type(parser).__name__}"
            raise SchemaError(msg)
        self.name = name
        self.parser = parser
        self.then = then
        self.multi = multi

    def __repr__(self) -> str:
        kind = "multifield" if self.multi else "field"
        return f"{kind}({self.name!r})"


class _Success[T](Schema[T]):
    __slots__ = ("model",)

    def __init__(self, model: T) -> None:
        self.model = model

    def __repr__(self) -> str:
        return f"success({self.model!r})"


def field[A, T](name: str, parser: Parser[A], then: Callable[[A], Schema[T]]) -> Schema[T]:
    """Decode the most recent value of *name*, then continue with *then*."""
    return _FieldStep(name, parser, then, multi=False)


def multifield[A, T](
    name: str, parser: Parser[A], then: Callable[[A], Schema[T]]
) -> Schema[T]:
    """Decode every value of *name* (most recent first), then continue with *then*.

    Pair with ``parse_list`` for checkbox groups and multi-selects.
    """
    return _FieldStep(name, parser, then, multi=True)


def success[T](model: T) -> Schema[T]:
    """End the chain with *model*."""
    return _Success(model)


# ---------------------------------------------------------------------------
# Declarative builder
# ---------------------------------------------------------------------------


class multi[A]:  # noqa: N801
    """Mark a ``schema_for`` field as a ``multifield``."""

    __slots__ = ("parser",)

    def __init__(self, parser: Parser[A]) -> None:
        self.parser = parser


def schema_for[T](constructor: Callable[..., T], /, **fields: Parser[Any] | multi[Any]) -> Schema[T]:
    """Build a schema that passes every decoded field to *constructor*.

    Fields are decoded in keyword order and passed as keyword arguments::

        @dataclass(frozen=True, slots=True)
        class Order:
            email: str
            quantity: int
            toppings: list[str]

        schema = schema_for(
            Order,
            email=parse_email,
            quantity=parse_int.check_int_more_than(0),
            toppings=multi(parse_list(parse_string)),
        )
    """
    steps: list[tuple[str, Parser[Any], bool]] = []
    for name, entry in fields.items():
        is_multi = isinstance(entry, multi)
        parser = entry.parser if is_multi else entry
        if not isinstance(parser, Parser):
            msg = f"Field {name!r} needs a Parser, got {type(parser).__name__}"
            raise SchemaError(msg)
        steps.append((name, parser, is_multi))

    def step(index: int, decoded: dict[str, Any]) -> Schema[T]:
        if index == len(steps):
            return success(constructor(**decoded))
        name, parser, is_multi = steps[index]

        def then(value: Any) -> Schema[T]:
            return step(index + 1, {**decoded, name: value})

        return _FieldStep(name, parser, then, multi=is_multi)

    return step(0, {})
