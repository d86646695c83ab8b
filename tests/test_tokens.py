from cronhint.core.tokens import tokenize_command
from cronhint.core.types import TokenKind


def _pairs(command: str) -> list[tuple[str, str]]:
    return [(token.kind.value, token.value) for token in tokenize_command(command)]


def test_whitespace_separates_words() -> None:
    assert _pairs("  node   /app/index.js\t--verbose ") == [
        ("word", "node"),
        ("word", "/app/index.js"),
        ("word", "--verbose"),
    ]


def test_quoted_spans_are_single_words_without_quotes() -> None:
    assert list(tokenize_command("node '/app/my script.js' \"two words\"").words()) == [
        "node",
        "/app/my script.js",
        "two words",
    ]


def test_quoted_span_glues_onto_adjacent_text() -> None:
    assert list(tokenize_command("cat ~/'logs/test.log'").words()) == ["cat", "~/logs/test.log"]


def test_double_quotes_unescape_quote_and_backslash() -> None:
    assert list(tokenize_command(r'echo "say \"hi\" \\ \n"').words()) == ["echo", 'say "hi" \\ \\n']


def test_backslash_escapes_outside_quotes() -> None:
    assert list(tokenize_command(r"/opt/my\ script.sh arg").words()) == ["/opt/my script.sh", "arg"]


def test_unclosed_quote_takes_rest_literally() -> None:
    assert list(tokenize_command("echo 'it is > fine").words()) == ["echo", "it is > fine"]


def test_operators_inside_quotes_stay_in_words() -> None:
    assert _pairs("echo 'a > b' \"c && d\"") == [
        ("word", "echo"),
        ("word", "a > b"),
        ("word", "c && d"),
    ]


def test_operators_split_words_without_whitespace() -> None:
    assert _pairs("cmd>>out.log&&next 2>err.log") == [
        ("word", "cmd"),
        ("redirect", ">>"),
        ("word", "out.log"),
        ("control", "&&"),
        ("word", "next"),
        ("redirect", "2>"),
        ("word", "err.log"),
    ]


def test_longest_redirect_operator_wins() -> None:
    kinds = _pairs("a &>> b &> c 2>> d 2> e >> f > g")
    operators = [value for kind, value in kinds if kind == "redirect"]
    assert operators == ["&>>", "&>", "2>>", "2>", ">>", ">"]


def test_stderr_to_stdout_is_one_duplicate_token() -> None:
    assert _pairs("run.sh 2>&1") == [("word", "run.sh"), ("duplicate", "2>&1")]


def test_other_descriptor_duplications_are_duplicates() -> None:
    assert _pairs("echo oops >&2 1>&2 3>&-") == [
        ("word", "echo"),
        ("word", "oops"),
        ("duplicate", ">&2"),
        ("duplicate", "1>&2"),
        ("duplicate", "3>&-"),
    ]


def test_redirect_to_word_after_greater_ampersand() -> None:
    assert _pairs("run.sh >&all.log") == [("word", "run.sh"), ("redirect", ">&"), ("word", "all.log")]


def test_digit_inside_word_is_not_a_descriptor() -> None:
    assert _pairs("echo abc2>x") == [
        ("word", "echo"),
        ("word", "abc2"),
        ("redirect", ">"),
        ("word", "x"),
    ]


def test_control_operators() -> None:
    controls = [value for kind, value in _pairs("a | b || c ; d && e &") if kind == "control"]
    assert controls == ["|", "||", ";", "&&", "&"]


def test_token_offsets_point_into_source() -> None:
    command = "node  '/a b.js' >>x"
    tokens = list(tokenize_command(command))
    assert [token.start for token in tokens] == [0, 6, 16, 18]
    assert tokens[2].kind is TokenKind.REDIRECT


def test_token_sequence_is_restartable() -> None:
    tokens = tokenize_command("cmd >> a.log | tee b.log")
    assert list(tokens) == list(tokens)


def test_empty_command_has_no_tokens() -> None:
    assert list(tokenize_command("")) == []
    assert list(tokenize_command("   ")) == []


def test_descriptor_digits_followed_by_text_are_a_file_name() -> None:
    assert _pairs("x >&2file") == [("word", "x"), ("redirect", ">&"), ("word", "2file")]
    assert _pairs("x 2>&1;y") == [("word", "x"), ("duplicate", "2>&1"), ("control", ";"), ("word", "y")]


def test_only_ascii_digits_prefix_a_redirect() -> None:
    assert _pairs("run ٣>x.log") == [
        ("word", "run"),
        ("word", "٣"),
        ("redirect", ">"),
        ("word", "x.log"),
    ]
