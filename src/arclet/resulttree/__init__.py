"""ResultTree 概览"""

from tarina import Empty as Empty  # noqa

from .collection import SymbolResultSet as SymbolResultSet
from .config import global_config as global_config
from .config import messages_scope as messages_scope
from .exceptions import DuplicateResult as DuplicateResult
from .exceptions import InvalidSymbol as InvalidSymbol
from .exceptions import ResultTreeException as ResultTreeException
from .i18n import lang as lang
from .messages import ValidationMessages as ValidationMessages
from .model import ImplicitToken as ImplicitToken
from .model import ParseError as ParseError
from .model import Token as Token
from .model import TokenType as TokenType
from .result import ArgumentResult as ArgumentResult
from .result import CommandResult as CommandResult
from .result import DefaultValueCache as DefaultValueCache
from .result import OptionResult as OptionResult
from .result import SymbolResult as SymbolResult
from .symbol import Argument as Argument
from .symbol import ArgumentArity as ArgumentArity
from .symbol import ArgumentLike as ArgumentLike
from .symbol import Command as Command
from .symbol import Option as Option
from .symbol import Symbol as Symbol

__version__ = "0.1.0"
