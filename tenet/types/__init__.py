from tenet.types.token import Token, TokenKind, qvar
from tenet.types.macro import Macro, is_truthy
from tenet.types.environment import Environment

__all__ = ["Token", "TokenKind", "qvar", "Macro", "is_truthy", "Environment"]
