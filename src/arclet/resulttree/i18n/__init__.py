from pathlib import Path

from tarina.lang import lang

lang.load(Path(__file__).parent)

__all__ = ["lang"]
