import pytest

from cmdmap.parser.utils import coerce_option_value, normalize_option_name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("false", False),
        ("0", 0),
        ("123", 123),
        ("1.5", 1.5),
        (".5", 0.5),
        ("+2", 2.0),
        ("1.", 1.0),
        ("", ""),
        ("inf", "inf"),
        ("nan", "nan"),
        ("1_000", "1_000"),
        ("١٢", "١٢"),
        ("yes", "yes"),
    ],
)
def test_coerce_option_value(value, expected):
    result = coerce_option_value(value)
    assert result == expected
    assert type(result) is type(expected)


def test_normalize_option_name():
    assert normalize_option_name("dry-run") == "dry_run"
    assert normalize_option_name("max_age") == "max_age"
