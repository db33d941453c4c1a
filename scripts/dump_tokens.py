#!/usr/bin/env python
import argparse
from pathlib import Path

from cosypy.errors import LexError
from cosypy.lexer import dump_tokens, tokenize


def main() -> int:
    parser = argparse.ArgumentParser(description="Print the token stream of a COSY file")
    parser.add_argument("path", type=Path, help="File to tokenize")
    args = parser.parse_args()

    path: Path = args.path
    text = path.read_text(encoding="utf-8")

    try:
        tokens = tokenize(text, source=str(path))
    except LexError as exc:
        print(exc)
        return 1

    dump_tokens(tokens, text)
    print(f"{len(tokens)} tokens")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
