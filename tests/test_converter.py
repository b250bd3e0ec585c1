"""Tests for the single-pass converter (core/converter.py)."""

from __future__ import annotations

from typing import Any

import pytest

from cli_playground.core.converter import convert_text, run_conversion
from cli_playground.core.evaluate import format_number
from cli_playground.core.models import Conversion
from cli_playground.exceptions import InputClosedError, ValueParseError


class TestConvertText:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", "32"), ("100", "212"), ("-40", "-40"), ("37.5", "99.5")],
    )
    def test_rendered_results(self, text: str, expected: str) -> None:
        assert format_number(convert_text(text).fahrenheit) == expected

    def test_returns_both_scales(self) -> None:
        assert convert_text("100") == Conversion(celsius=100.0, fahrenheit=212.0)


class TestRunConversion:
    def test_reads_exactly_one_line(self, make_source: Any) -> None:
        source = make_source(["0", "100"])
        result = run_conversion(source)
        assert result.fahrenheit == 32.0
        assert source.reads == 1

    def test_parse_failure_is_fatal(self, make_source: Any) -> None:
        source = make_source(["abc", "100"])
        with pytest.raises(ValueParseError):
            run_conversion(source)
        assert source.reads == 1

    def test_overflowing_result_rejected(self, make_source: Any) -> None:
        with pytest.raises(ValueParseError, match="out of range") as exc_info:
            run_conversion(make_source(["1e308"]))
        assert exc_info.value.text == "1e308"

    def test_closed_input_propagates(self, make_source: Any) -> None:
        with pytest.raises(InputClosedError):
            run_conversion(make_source([]))
