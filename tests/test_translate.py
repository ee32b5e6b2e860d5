"""Tests for formwork.translate — bundled English translators."""

import pytest

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
from formwork.translate import en_gb, en_us, translator_for


class TestEnglish:
    @pytest.mark.parametrize(
        ("error", "message"),
        [
            (MustBePresent(), "must not be blank"),
            (MustBeInt(), "must be a whole number"),
            (MustBeFloat(), "must be a number"),
            (MustBeEmail(), "must be an email"),
            (MustBePhoneNumber(), "must be a phone number"),
            (MustBeUrl(), "must be a URL"),
            (MustBeDate(), "must be a date"),
            (MustBeTime(), "must be a time"),
            (MustBeDateTime(), "must be a date and time"),
            (MustBeStringLengthMoreThan(3), "must be more than 3 characters"),
            (MustBeStringLengthLessThan(20), "must be less than 20 characters"),
            (MustBeIntMoreThan(0), "must be more than 0"),
            (MustBeIntLessThan(100), "must be less than 100"),
            (MustBeFloatMoreThan(0.5), "must be more than 0.5"),
            (MustBeFloatLessThan(1.0), "must be less than 1.0"),
            (MustBeAccepted(), "must be accepted"),
            (MustConfirm(), "doesn't match"),
            (MustBeUnique(), "is already in use"),
            (CustomError("must be even"), "must be even"),
        ],
    )
    def test_shared_messages(self, error: FieldError, message: str) -> None:
        assert en_gb(error) == message
        assert en_us(error) == message

    def test_colour_spelling(self) -> None:
        assert en_gb(MustBeColour()) == "must be a hex colour code"
        assert en_us(MustBeColour()) == "must be a hex color code"

    def test_unknown_error(self) -> None:
        with pytest.raises(TypeError):
            en_gb(FieldError())


class TestTranslatorFor:
    def test_lookup(self) -> None:
        assert translator_for("en-gb") is en_gb
        assert translator_for("en") is en_gb

    def test_normalizes_tag(self) -> None:
        assert translator_for("en_US") is en_us
        assert translator_for(" EN-US ") is en_us

    def test_unknown(self) -> None:
        with pytest.raises(ConfigurationError, match="Available"):
            translator_for("de")
