import pytest

from arclet.resulttree import Argument, ArgumentResult, Command, CommandResult, DuplicateResult, Option, OptionResult


def test_result_set_order():
    a, b, c = Argument("a"), Option("-b"), Command("c")
    root = CommandResult(Command("root", a, b, c))
    rc = CommandResult(c, parent=root)
    ra = ArgumentResult(a, root)
    rb = OptionResult(b, parent=root)
    assert list(root.children) == [rc, ra, rb]
    assert root.children.symbols() == [c, a, b]
    assert root.children[0] is rc
    assert root.children[-1] is rb
    assert len(root.children) == 3
    assert a in root.children


def test_result_for():
    a = Argument("a")
    root = CommandResult(Command("root", a))
    assert root.children.result_for(a) is None
    res = ArgumentResult(a, root)
    assert root.children.result_for(a) is res
    assert root.children.result_for(Argument("a")) is None


def test_duplicate():
    a = Argument("a")
    root = CommandResult(Command("root", a))
    ArgumentResult(a, root)
    with pytest.raises(DuplicateResult):
        ArgumentResult(a, root)
    with pytest.raises(KeyError):
        root.children.add(ArgumentResult(a, root, attach=False))


if __name__ == "__main__":
    pytest.main([__file__, "-vs"])
