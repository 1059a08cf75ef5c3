"""Tokens of a small Lisp and tables that map trigger text to token kinds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Sequence


class TokenSymbol(enum.Enum):
    """The kinds of token."""

    UNDEFINED = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    QUOTE = enum.auto()
    ATOM = enum.auto()
    DEFINE = enum.auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    """A piece of source text and the kind of token it is."""

    trigger: str = ""
    symbol: TokenSymbol = TokenSymbol.UNDEFINED


class TokenSet:
    """Pairs of trigger text and token kind, looked up in order."""

    def __init__(
        self,
        triggers: Optional[Sequence[str]] = None,
        symbols: Optional[Sequence[TokenSymbol]] = None,
    ) -> None:
        triggers = list(triggers or [])
        symbols = list(symbols or [])
        if len(triggers) != len(symbols):
            raise ValueError("triggers and symbols must be of matching length")
        self._triggers = triggers
        self._symbols = symbols

    def match(self, trigger: str) -> TokenSymbol:
        """Return the kind of the first entry with this trigger, else UNDEFINED."""
        for known, symbol in zip(self._triggers, self._symbols):
            if known == trigger:
                return symbol
        return TokenSymbol.UNDEFINED

    def triggers(self) -> List[str]:
        """Return the triggers in order."""
        return list(self._triggers)

    def symbols(self) -> List[TokenSymbol]:
        """Return the token kinds in order."""
        return list(self._symbols)


def lisp_zero_token_set() -> TokenSet:
    """Return the punctuation of the base language: parentheses and quote."""
    return TokenSet(
        ["(", ")", "'"],
        [TokenSymbol.LPAREN, TokenSymbol.RPAREN, TokenSymbol.QUOTE],
    )