# suggestion_builder/context/tokenizer.py
# simple tokenizer feeding the suggestion engine from raw text

import re

# words keep apostrophes/hyphens, any other punctuation becomes its own token
_token_re = re.compile(r"[\w'-]+|[^\w\s]")


def simple_tokenize(s: str):
    """
    Return list of tokens in original order.
    Punctuation is kept as standalone tokens ("market." -> "market", ".")
    since the engine relies on short tokens to end a phrase.
    """
    if not s:
        return []
    return _token_re.findall(s)


def tokenize_lines(lines):
    """Tokenize an iterable of lines into one flat token stream."""
    out = []
    for line in lines:
        out.extend(simple_tokenize(line))
    return out
