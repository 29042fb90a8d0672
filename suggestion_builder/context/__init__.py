# suggestion_builder/context/__init__.py
# tokenizer used by the CLI to turn raw text into a token stream

from .tokenizer import simple_tokenize, tokenize_lines

__all__ = [
    "simple_tokenize",
    "tokenize_lines",
]
