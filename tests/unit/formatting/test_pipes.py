"""Test the decimal, percent and currency entry points."""
import pytest
from numeric_display.errors import InvalidDigitSpecError, InvalidInputError
from numeric_display.formatting.pipes import (
    CurrencyPipe, DecimalPipe, PercentPipe, format_currency, format_decimal, format_percent,
)
from numeric_display.models.options import FormatOptions, Style


class TestEntryPoints:
    def test_decimal_end_to_end(self):
        assert format_decimal(3.14159, "en-US", "1.2-2") == "3.14"

    def test_decimal_numeric_string(self):
        assert format_decimal("-3", "en-US") == format_decimal(-3, "en-US") == "-3"

    def test_percent(self):
        assert format_percent(0.125, "en-US") == "12.5%"

    def test_currency_defaults_to_usd_code(self, mock_formatter):
        format_currency(1, "en-US", formatter=mock_formatter)
        _, _, style, options = mock_formatter.format.call_args.args
        assert style == Style.CURRENCY
        assert options == FormatOptions(currency_code="USD", currency_as_symbol=False)

    def test_decimal_defaults(self, mock_formatter):
        format_decimal(1, "en-US", formatter=mock_formatter)
        mock_formatter.format.assert_called_once_with(
            1, "en-US", Style.DECIMAL,
            FormatOptions(minimum_integer_digits=1, minimum_fraction_digits=0,
                          maximum_fraction_digits=3),
        )

    def test_currency_symbol(self):
        assert format_currency(12.5, "en-US", "USD", True) == "$12.50"

    @pytest.mark.parametrize("entry_point,caller", [
        (format_decimal, "decimal"),
        (format_percent, "percent"),
        (format_currency, "currency"),
    ])
    def test_invalid_input_names_entry_point(self, entry_point, caller):
        with pytest.raises(InvalidInputError) as exc_info:
            entry_point("twelve", "en-US")
        assert exc_info.value.caller == caller
        assert exc_info.value.value == "twelve"

    @pytest.mark.parametrize("entry_point", [format_decimal, format_percent, format_currency])
    def test_blank_returns_none(self, entry_point, mock_formatter):
        assert entry_point(None, "en-US", formatter=mock_formatter) is None
        mock_formatter.format.assert_not_called()

    def test_invalid_digits(self):
        with pytest.raises(InvalidDigitSpecError):
            format_percent(0.5, "en-US", "1.2.3")


class TestPipes:
    def test_explicit_locale(self):
        pipe = DecimalPipe("de-DE")
        assert pipe.locale == "de-DE"
        assert pipe.transform(1234.5) == "1.234,5"

    def test_locale_from_settings(self, monkeypatch):
        monkeypatch.setenv("NUMBER_FORMAT_LOCALE", "de-DE")
        assert DecimalPipe().locale == "de-DE"

    def test_default_locale(self):
        assert PercentPipe().locale == "en-US"

    def test_percent_pipe_digits(self):
        assert PercentPipe("en-US").transform(0.5, "1.1-1") == "50.0%"

    def test_currency_pipe_arguments(self, mock_formatter):
        pipe = CurrencyPipe("fr-FR", formatter=mock_formatter)
        pipe.transform("9.99", "EUR", True, ".1")
        mock_formatter.format.assert_called_once_with(
            9.99, "fr-FR", Style.CURRENCY,
            FormatOptions(minimum_fraction_digits=1, currency_code="EUR",
                          currency_as_symbol=True),
        )

    def test_currency_pipe_defaults(self):
        assert CurrencyPipe("en-US").transform(1).endswith("1.00")

    def test_pipe_errors_name_entry_point(self):
        with pytest.raises(InvalidInputError, match="for pipe 'currency'"):
            CurrencyPipe("en-US").transform([1])

    def test_pipe_blank(self):
        assert DecimalPipe("en-US").transform("") is None
