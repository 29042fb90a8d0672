# tests/test_tokenizer.py
from suggestion_builder.context import simple_tokenize, tokenize_lines
from suggestion_builder import build


def test_punctuation_becomes_its_own_token():
    text = "The beautiful girl from the farmers market. I like chewing gum."
    assert simple_tokenize(text) == [
        "The", "beautiful", "girl", "from", "the", "farmers", "market", ".",
        "I", "like", "chewing", "gum", ".",
    ]


def test_apostrophes_and_hyphens_stay_in_words():
    assert simple_tokenize("don't over-think it, ok?") == ["don't", "over-think", "it", ",", "ok", "?"]


def test_empty_input():
    assert simple_tokenize("") == []
    assert simple_tokenize(None) == []
    assert simple_tokenize("   \n\t") == []


def test_tokenize_lines_flattens():
    assert tokenize_lines(["hello world.", "", "again"]) == ["hello", "world", ".", "again"]


def test_tokenized_text_feeds_generator():
    toks = simple_tokenize("The beautiful girl from the farmers market. I like chewing gum.")
    gen = build(toks, stop_words=["is", "a", "can", "the"])
    assert len(gen.suggest()) == 15
