import pytest

from suite_money.domain.monetary.errors import UnknownLocaleError
from suite_money.domain.monetary.locale import LOCALES, Locale


def test_default():
    locale = Locale.default()
    assert locale.decimal_separator == "."
    assert locale.thousands_separator == ","
    assert Locale() == locale


def test_validation():
    with pytest.raises(ValueError):
        Locale(".", ".")
    with pytest.raises(ValueError):
        Locale("..", ",")


def test_immutable():
    with pytest.raises(AttributeError):
        Locale.default().decimal_separator = ","


def test_wrap():
    custom = Locale(",", " ")
    assert Locale.wrap(custom) is custom
    assert Locale.wrap(None) == Locale.default()
    assert Locale.wrap("DE") is LOCALES["DE"]
    with pytest.raises(TypeError):
        Locale.wrap(3)


@pytest.mark.parametrize(
    "locale_id, decimal_separator, thousands_separator",
    [
        ("en_US", ".", ","),
        ("de_DE", ",", "."),
        ("de-DE", ",", "."),
        ("it", ",", "."),
    ],
)
def test_cldr_lookup(locale_id, decimal_separator, thousands_separator):
    locale = Locale.from_str(locale_id)
    assert locale.decimal_separator == decimal_separator
    assert locale.thousands_separator == thousands_separator


@pytest.mark.parametrize("locale_id", ["xx_YY", "not a locale!"])
def test_unknown_locale(locale_id):
    with pytest.raises(UnknownLocaleError):
        Locale.from_str(locale_id)
