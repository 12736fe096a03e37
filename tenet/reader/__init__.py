from tenet.reader.lexer import lex, TOKEN_RULES
from tenet.reader.parser import cast, parse, read

__all__ = ["lex", "TOKEN_RULES", "cast", "parse", "read"]
