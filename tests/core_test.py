import pytest

from arclet.resulttree import (
    Argument,
    ArgumentArity,
    ArgumentResult,
    Command,
    CommandResult,
    ImplicitToken,
    Option,
    OptionResult,
    ParseError,
    Token,
    TokenType,
)
from devtool import CountingProvider, color_command, feed, implicit_child


def test_color_not_allowed():
    cmd, opt, color = color_command()
    root = CommandResult(cmd, Token("paint", TokenType.COMMAND, 0))
    res = OptionResult(opt, Token("--color", TokenType.OPTION, 1), root)
    res.add_token(Token("purple", TokenType.ARGUMENT, 2))
    err = res.unrecognized_argument_error(color)
    assert isinstance(err, ParseError)
    assert "purple" in err.message
    for value in ("red", "green", "blue"):
        assert f"'{value}'" in err.message
    assert err.result is res


def test_build_default_target():
    provider = CountingProvider(".")
    target = Argument("target", ArgumentArity.ZERO_OR_ONE, default_factory=provider)
    root = CommandResult(Command("build", target))
    implicit_child(root, target)
    assert provider.calls == 1
    assert root.use_default_value_for(target) is True
    assert root.get_default_value_for(target) == "."
    assert root.get_default_value_for(target) == "."
    assert provider.calls == 2
    assert root.children.result_for(target).arity_error() is None


def test_explicit_option_value():
    n = Argument("n")
    opt = Option("-n", n)
    root = CommandResult(Command("head", opt))
    res = OptionResult(opt, parent=root)
    res.add_token(Token("5", TokenType.ARGUMENT))
    assert res.unrecognized_argument_error(n) is None
    assert res.use_default_value_for(n) is False
    res.get_default_value_for(n)
    assert res.use_default_value_for(n) is True


def test_capacity_reached():
    cmd = Command("mv", Argument("src", (1, 1)), Argument("dst", (0, 3)))
    root = CommandResult(cmd)
    assert root.maximum_argument_capacity() == 4
    feed(root, "a", "b", "c")
    assert root.is_argument_limit_reached is False
    feed(root, "d")
    assert root.is_argument_limit_reached is True


def test_collect_diagnostics():
    cmd, opt, color = color_command()
    size = Argument("size", ArgumentArity.EXACTLY_ONE)
    cmd.add(size)
    root = CommandResult(cmd)
    res = feed(OptionResult(opt, parent=root), "purple")
    errors = [
        error
        for result in root.walk()
        for argument in result.symbol.arguments()
        for error in (result.unrecognized_argument_error(argument), argument.arity.validate(result, argument))
        if error is not None
    ]
    assert [e.result for e in errors] == [root, res]
    assert errors[0].message == "Required argument missing for Command: paint"
    assert "purple" in errors[1].message


def test_arity_validate_defaults():
    level = Argument("level", ArgumentArity.EXACTLY_ONE, default=1)
    opt = Option("--level", level)
    root = CommandResult(Command("log", opt))
    implicit = OptionResult(opt, parent=root, is_implicit=True)
    assert level.arity.validate(implicit, level) is None
    assert implicit.get_default_value_for(level) == 1

    child = ArgumentResult(level, root)
    child.add_token(ImplicitToken(1))
    assert level.arity.validate(root, level) is None


def test_arity_validate_too_many():
    files = Argument("files", (0, 2))
    root = feed(CommandResult(Command("rm", files)), "a", "b", "c")
    err = files.arity.validate(root, files)
    assert err.message == "Command 'rm' expects at most 2 arguments but 3 were provided."


if __name__ == "__main__":
    pytest.main([__file__, "-vs"])
