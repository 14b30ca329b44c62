from redis_shell.interactive.parser import MASK, mask_tokens, tokenize, unquote


def test_tokenize_keeps_quoted_span_as_one_token():
    tokens = tokenize('SET key "hello world"')

    assert tokens == ["SET", "key", '"hello world"']


def test_tokenize_single_quotes():
    assert tokenize("set 'a b' c") == ["set", "'a b'", "c"]


def test_tokenize_collapses_whitespace():
    assert tokenize("  get \t  foo  ") == ["get", "foo"]


def test_tokenize_empty_line_yields_no_tokens():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_unquote_strips_matching_quotes_only():
    assert unquote('"hello world"') == "hello world"
    assert unquote("'x'") == "x"
    assert unquote("\"mixed'") == "\"mixed'"
    assert unquote("plain") == "plain"
    assert unquote('"') == '"'


def test_mask_auth_password():
    assert mask_tokens(["auth", "mypassword"]) == ["auth", MASK]
    assert mask_tokens(["AUTH", "mypassword"]) == ["AUTH", MASK]


def test_mask_leaves_original_untouched():
    tokens = ["auth", "secret"]
    mask_tokens(tokens)
    assert tokens == ["auth", "secret"]


def test_mask_connect_password():
    assert mask_tokens(["connect", "h", "6379", "pw"]) == ["connect", "h", "6379", MASK]


def test_mask_ignores_other_shapes():
    # AUTH with a username is three tokens and is left as-is.
    assert mask_tokens(["auth", "user", "pw"]) == ["auth", "user", "pw"]
    assert mask_tokens(["connect", "h", "6379"]) == ["connect", "h", "6379"]
    assert mask_tokens(["get", "auth"]) == ["get", "auth"]
