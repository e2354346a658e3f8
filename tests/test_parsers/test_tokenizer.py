import pytest

from cmdmap.parser import ArgvTokenizer, ParsedInput


@pytest.fixture
def tokenizer():
    return ArgvTokenizer()


def test_positional_arguments_keep_order_and_content(tokenizer):
    argv = ["deploy", " Staging ", "x=y", "ÆØÅ", "deploy"]
    parsed = tokenizer.tokenize(argv)
    assert parsed.arguments == argv
    assert parsed.options == {}
    assert parsed.short_options == set()


def test_long_option_with_value(tokenizer):
    parsed = tokenizer.tokenize(["--foo=bar"])
    assert parsed.options == {"foo": "bar"}


def test_long_option_flag(tokenizer):
    parsed = tokenizer.tokenize(["--foo"])
    assert parsed.options == {"foo": True}


def test_long_option_value_keeps_later_equals_signs(tokenizer):
    parsed = tokenizer.tokenize(["--filter=a=b"])
    assert parsed.options == {"filter": "a=b"}


def test_long_option_empty_value(tokenizer):
    parsed = tokenizer.tokenize(["--name="])
    assert parsed.options == {"name": ""}


def test_long_option_dashes_become_underscores(tokenizer):
    parsed = tokenizer.tokenize(["--dry-run", "--max-age=3"])
    assert parsed.options == {"dry_run": True, "max_age": 3}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        ("false", False),
        ("42", 42),
        ("007", 7),
        ("3.14", 3.14),
        ("-3", -3.0),
        ("1e3", 1000.0),
        ("abc", "abc"),
        ("True", "True"),
    ],
)
def test_long_option_value_coercion(tokenizer, raw, expected):
    parsed = tokenizer.tokenize([f"--value={raw}"])
    value = parsed.options["value"]
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("token", ["--", "--Foo", "--9lives", "--_x", "--a b"])
def test_malformed_long_options_are_dropped(tokenizer, token):
    parsed = tokenizer.tokenize([token])
    assert parsed.is_empty()


def test_short_option_cluster(tokenizer):
    parsed = tokenizer.tokenize(["-xyz"])
    assert parsed.short_options == {"z", "y", "x"}
    assert parsed.arguments == []


def test_repeated_short_options_collapse(tokenizer):
    parsed = tokenizer.tokenize(["-vv", "-v"])
    assert parsed.short_options == {"v"}


@pytest.mark.parametrize("token", ["-x1", "-5", "-x-y", "-ø"])
def test_malformed_short_clusters_are_dropped(tokenizer, token):
    parsed = tokenizer.tokenize([token])
    assert parsed.is_empty()


def test_empty_tokens_and_lone_dash_are_ignored(tokenizer):
    parsed = tokenizer.tokenize(["", "-", "run", ""])
    assert parsed.arguments == ["run"]


def test_mixed_input(tokenizer):
    parsed = tokenizer(["deploy", "staging", "--force", "-y", "--tag=v1.2"])
    assert parsed == ParsedInput(
        arguments=["deploy", "staging"],
        options={"force": True, "tag": "v1.2"},
        short_options={"y"},
    )


def test_copy_is_independent(tokenizer):
    parsed = tokenizer.tokenize(["a", "--b", "-c"])
    copied = parsed.copy()
    copied.arguments.pop()
    copied.options.clear()
    copied.short_options.clear()
    assert parsed.arguments == ["a"]
    assert parsed.options == {"b": True}
    assert parsed.short_options == {"c"}
