from dataclasses import FrozenInstanceError

import pytest

from arclet.resulttree import CommandResult, Command, ImplicitToken, ParseError, Token, TokenType


def test_token_value():
    token = Token("--foo", TokenType.OPTION, 2)
    assert str(token) == "--foo"
    assert token.is_implicit is False
    assert token == Token("--foo", TokenType.OPTION, 2)
    assert token != Token("--foo", TokenType.ARGUMENT, 2)
    assert Token("a", TokenType.ARGUMENT).position == -1
    with pytest.raises(FrozenInstanceError):
        token.value = "bar"  # type: ignore


def test_implicit_token():
    token = ImplicitToken(42)
    assert token.is_implicit is True
    assert token.type == TokenType.IMPLICIT
    assert token.value == "42"
    assert token.default == 42
    assert ImplicitToken().value == ""
    assert ImplicitToken(1) == ImplicitToken("1")
    assert ImplicitToken(1) != Token("1", TokenType.ARGUMENT)
    assert repr(ImplicitToken([1])) == "ImplicitToken([1])"


def test_parse_error():
    root = CommandResult(Command("x"))
    err = ParseError("boom", root)
    assert str(err) == "boom"
    assert err.result is root
    assert err == ParseError("boom", root)
    assert len({err, ParseError("boom", root), ParseError("bang")}) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-vs"])
