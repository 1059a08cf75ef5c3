import io

from numtinker.scanner import Scanner, main
from numtinker.tokens import Token, TokenSymbol


def test_scan_list():
    tokens = Scanner().scan("(foo 12)")
    assert tokens == [
        Token("(", TokenSymbol.LPAREN),
        Token("foo", TokenSymbol.ATOM),
        Token("12", TokenSymbol.ATOM),
        Token(")", TokenSymbol.RPAREN),
    ]


def test_scan_quote():
    tokens = Scanner().scan("'abc")
    assert [t.symbol for t in tokens] == [TokenSymbol.QUOTE, TokenSymbol.ATOM]
    assert tokens[1].trigger == "abc"


def test_digits_and_letters_split():
    tokens = Scanner().scan("12abc")
    assert [t.trigger for t in tokens] == ["12", "abc"]
    assert all(t.symbol == TokenSymbol.ATOM for t in tokens)


def test_unknown_characters():
    tokens = Scanner().scan("a!b")
    assert tokens[1] == Token("!", TokenSymbol.UNDEFINED)
    assert [t.trigger for t in tokens] == ["a", "!", "b"]


def test_blanks_are_skipped():
    assert Scanner().scan(" \t( )\t") == [
        Token("(", TokenSymbol.LPAREN),
        Token(")", TokenSymbol.RPAREN),
    ]


def test_empty_line():
    assert Scanner().scan("") == []


def test_newline_is_undefined():
    assert Scanner().scan("\n") == [Token("\n", TokenSymbol.UNDEFINED)]


def test_triggers_rebuild_non_blank_text():
    line = "(define (sq x) (mul x x))"
    tokens = Scanner().scan(line)
    assert "".join(t.trigger for t in tokens) == line.replace(" ", "")


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(a)\n\nexit\n(b)\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "sending, (a) to the scanner..." in out
    assert "(, LPAREN" in out
    assert "a, ATOM" in out
    assert "), RPAREN" in out
    assert "(b)" not in out
    assert out.rstrip().endswith("All Done.")


def test_main_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Exiting on EOF." in capsys.readouterr().out