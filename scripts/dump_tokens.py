#!/usr/bin/env python
"""Write the token stream of a SuperSQL file, one token per line."""

from __future__ import annotations

import argparse
from pathlib import Path

from supersql.lexer import Token, dump_tokens, tokenize


def format_token(idx: int, token: Token) -> str:
    return f"[{idx}] kind={token.kind.name} text={token.text!r}"


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump SuperSQL tokens")
    parser.add_argument("input", type=Path, help="Query file to tokenize")
    parser.add_argument("--output", type=Path, default=None, help="Write here instead of stdout")
    parser.add_argument("--skip-trivia", action="store_true", help="Omit whitespace, newlines and comments")
    args = parser.parse_args()

    tokens = tokenize(args.input.read_text(encoding="utf-8"))
    if args.skip_trivia:
        tokens = [token for token in tokens if not token.kind.is_trivia]
    if args.output is None:
        dump_tokens(tokens)
        return 0

    lines = [format_token(idx, token) for idx, token in enumerate(tokens)]

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    print(f"Wrote {len(tokens)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
