"""Tests for formwork.config — FormConfig frozen dataclass."""

import pytest

from formwork.config import FormConfig


class TestFormConfig:
    def test_defaults(self) -> None:
        assert FormConfig().language == "en-gb"

    def test_override(self) -> None:
        assert FormConfig(language="en-us").language == "en-us"

    def test_frozen(self) -> None:
        cfg = FormConfig()

        with pytest.raises(AttributeError):
            cfg.language = "en-us"  # type: ignore[misc]
