"""Split a line of Lisp into tokens, and an interactive loop that shows them."""

from __future__ import annotations

import argparse
import re
from typing import List, Optional, Sequence

from numtinker.tokens import Token, TokenSymbol, lisp_zero_token_set

_LEXEME = re.compile(r"(?P<blank>[ \t])|(?P<atom>[0-9]+|[A-Za-z]+)|(?P<other>.)", re.DOTALL)


class Scanner:
    """Turns text into tokens: punctuation, runs of digits or letters, and
    single unknown characters."""

    def __init__(self) -> None:
        self._known_tokens = lisp_zero_token_set()

    def scan(self, line: str) -> List[Token]:
        """Return the tokens of line; spaces and tabs separate but are dropped."""
        tokens: List[Token] = []
        for match in _LEXEME.finditer(line):
            kind = match.lastgroup
            text = match.group()
            if kind == "blank":
                continue
            if kind == "atom":
                tokens.append(Token(text, TokenSymbol.ATOM))
            else:
                tokens.append(Token(text, self._known_tokens.match(text)))
        return tokens


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lines, scan each and print the tokens, until EOF or "exit"."""
    argparse.ArgumentParser(description="Show the tokens of each line typed.").parse_args(
        argv
    )
    scanner = Scanner()
    while True:
        try:
            line = input("> ")
        except EOFError:
            print("Exiting on EOF.")
            break
        if not line:
            continue
        if line == "exit":
            break
        print(f"sending, {line} to the scanner...")
        tokens = scanner.scan(line)
        print("received the following tokens:")
        for token in tokens:
            print(f"{token.trigger}, {token.symbol}")
    print("listen carefully now, my son...")
    print("All Done.")
    return 0