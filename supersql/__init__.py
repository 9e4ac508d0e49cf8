"""Lexical tooling for SuperSQL: tokenizer, formatter and migration fixes."""

__version__ = "0.1.0"
