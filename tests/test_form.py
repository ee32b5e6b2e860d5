"""Tests for formwork.form — running forms and inspecting results."""

import logging
from dataclasses import dataclass

import pytest

from formwork.config import FormConfig
from formwork.errors import ConfigurationError
from formwork.field_errors import (
    MustBeEmail,
    MustBeInt,
    MustBeIntLessThan,
    MustBePresent,
    MustBeUnique,
    MustConfirm,
)
from formwork.fields import parse_email, parse_int, parse_string
from formwork.form import Form, Invalid, Valid, new
from formwork.schema import Schema, field, success
from formwork.translate import en_us


@dataclass(frozen=True, slots=True)
class Signup:
    email: str
    password: str
    age: int


def signup_schema() -> Schema[Signup]:
    return field("email", parse_email, lambda email:
        field("password", parse_string.check_not_empty(), lambda password:
            field("confirm", parse_string.check_confirms(password), lambda _:
                field("age", parse_int.check_int_less_than(100), lambda age:
                    success(Signup(email=email, password=password, age=age))))))


VALID = [
    ("email", "wib@example.com"),
    ("password", "123"),
    ("confirm", "123"),
    ("age", "42"),
]


class TestRun:
    def test_valid(self) -> None:
        result = Form(signup_schema()).add_values(VALID).run()
        assert result == Valid(Signup("wib@example.com", "123", 42))
        assert result

    def test_invalid(self) -> None:
        result = Form(signup_schema()).run()
        assert isinstance(result, Invalid)
        assert not result
        assert result.form.all_errors() == [
            ("age", (MustBeInt(),)),
            ("password", (MustBePresent(),)),
            ("email", (MustBeEmail(),)),
        ]

    def test_confirmation_mismatch(self) -> None:
        form = Form(signup_schema()).add_values(VALID).add_string("confirm", "")
        result = form.run()
        assert isinstance(result, Invalid)
        assert result.form.all_errors() == [("confirm", (MustConfirm(),))]

    def test_match(self) -> None:
        match Form(signup_schema()).add_values(VALID).run():
            case Valid(signup):
                assert signup.age == 42
            case Invalid():
                pytest.fail("expected a valid run")

    def test_three_required_fields(self) -> None:
        schema = field("a", parse_int, lambda a:
            field("b", parse_int, lambda b:
                field("c", parse_int, lambda c:
                    success((a, b, c)))))
        result = Form(schema).run()
        assert isinstance(result, Invalid)
        assert len(result.form.all_errors()) == 3
        for name in "abc":
            assert result.form.field_errors(name) == [MustBeInt()]

    def test_parse_failure_isolated_to_field(self) -> None:
        form = Form(signup_schema()).add_values(
            [("email", "wib@example.com"), ("password", "x"), ("confirm", "x"), ("age", "abc")]
        )
        result = form.run()
        assert isinstance(result, Invalid)
        assert result.form.all_errors() == [("age", (MustBeInt(),))]

    def test_check_failure(self) -> None:
        form = Form(signup_schema()).add_values(VALID).add_string("age", "150")
        result = form.run()
        assert isinstance(result, Invalid)
        assert result.form.field_errors("age") == [MustBeIntLessThan(100)]

    def test_failed_form_keeps_values(self) -> None:
        pairs = [("email", "nope"), ("age", "x"), ("age", "y")]
        result = Form(signup_schema()).add_values(pairs).run()
        assert isinstance(result, Invalid)
        assert result.form.all_values() == pairs

    def test_rerun_replaces_errors(self) -> None:
        result = Form(signup_schema()).run()
        assert isinstance(result, Invalid)
        fixed = result.form.set_values(VALID)
        assert fixed.run() == Valid(Signup("wib@example.com", "123", 42))

    def test_idempotent(self) -> None:
        form = Form(signup_schema()).add_string("email", "bad")
        first, second = form.run(), form.run()
        assert isinstance(first, Invalid) and isinstance(second, Invalid)
        assert first.form.all_errors() == second.form.all_errors()

    def test_logs_failing_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="formwork.form"):
            Form(signup_schema()).add_values(VALID).add_string("age", "x").run()
        assert "age" in caplog.text


class TestValues:
    def test_field_values_order(self) -> None:
        form = Form(signup_schema()).add_int("one", 100).add_string("one", "Hello")
        assert form.field_values("one") == ["Hello", "100"]
        assert form.field_value("one") == "Hello"

    def test_field_value_missing(self) -> None:
        assert Form(signup_schema()).field_value("missing") == ""

    def test_immutable(self) -> None:
        form = Form(signup_schema())
        form.add_string("email", "x")
        assert form.all_values() == []
        with pytest.raises(AttributeError):
            form._values = None  # type: ignore[misc]


class TestErrors:
    def _failed(self) -> Form[Signup]:
        result = Form(signup_schema()).add_values(VALID).add_string("email", "bad").run()
        assert isinstance(result, Invalid)
        return result.form

    def test_field_errors_missing(self) -> None:
        assert self._failed().field_errors("age") == []

    def test_messages(self) -> None:
        assert self._failed().field_error_messages("email") == ["must be an email"]

    def test_add_error_to_existing_field(self) -> None:
        form = self._failed().add_error("email", MustBeUnique())
        assert form.field_errors("email") == [MustBeUnique(), MustBeEmail()]
        assert len(form.all_errors()) == 1

    def test_add_error_new_field(self) -> None:
        form = self._failed().add_error("username", MustBeUnique())
        assert form.all_errors()[0] == ("username", (MustBeUnique(),))
        assert form.field_error_messages("username") == ["is already in use"]

    def test_add_error_does_not_rerun(self) -> None:
        form = Form(signup_schema()).add_error("email", MustBeUnique())
        assert form.all_errors() == [("email", (MustBeUnique(),))]


class TestTranslator:
    def test_default_is_british(self) -> None:
        assert Form.new(signup_schema()).add_error("c", MustBeIntLessThan(5)).field_error_messages(
            "c"
        ) == ["must be less than 5"]

    def test_language(self) -> None:
        form = new(signup_schema()).language(lambda error: "nope").add_error("x", MustBePresent())
        assert form.field_error_messages("x") == ["nope"]

    def test_language_keeps_values(self) -> None:
        form = Form(signup_schema()).add_string("a", "1").language(en_us)
        assert form.all_values() == [("a", "1")]

    def test_config_language(self) -> None:
        from formwork.field_errors import MustBeColour

        form = Form(signup_schema(), config=FormConfig(language="en-US"))
        form = form.add_error("c", MustBeColour())
        assert form.field_error_messages("c") == ["must be a hex color code"]

    def test_unknown_language(self) -> None:
        with pytest.raises(ConfigurationError, match="fr"):
            Form(signup_schema(), config=FormConfig(language="fr"))
