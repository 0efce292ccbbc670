"""Field statement classification using a Lark token grammar."""

import os

from lark import Lark, Token
from lark.exceptions import LarkError

from .types import FieldDecl, FieldForm

_g_lexer: Lark | None = None


def _lexer() -> Lark:
    global _g_lexer

    if not _g_lexer:
        with open(f"{os.path.dirname(__file__)}/declaration.lark", encoding="utf-8") as f:
            grammar = f.read()
        _g_lexer = Lark(grammar, parser="lalr", lexer="basic")

    return _g_lexer


def tokenize(statement: str) -> list[Token]:
    """Split a statement into WORD, COLON, SEMICOLON, LBRACE, RBRACE and OTHER tokens."""
    tree = _lexer().parse(statement)
    return [t for t in tree.children if isinstance(t, Token)]


def _kinds(tokens: list[Token]) -> tuple[str, ...]:
    return tuple(t.type for t in tokens)


def _is_width(token: Token) -> bool:
    return token.type == "WORD" and token.value.isdecimal()


def classify(statement: str) -> FieldDecl | None:
    """Classify one field statement, or return None if it is not a field.

    Forms are tried in order, first match wins:
      1. `type name : width`  named bit-field
      2. `type : width`       anonymous bit-field
      3. `type name`          plain field
      4. `type name ...`      plain field, trailing tokens ignored
    """
    try:
        tokens = tokenize(statement)
    except LarkError:
        return None

    kinds = _kinds(tokens)

    if kinds == ("WORD", "WORD", "COLON", "WORD") and _is_width(tokens[3]):
        return FieldDecl(
            tokens[0].value, tokens[1].value, int(tokens[3].value), FieldForm.NAMED_BIT_FIELD
        )

    if kinds == ("WORD", "COLON", "WORD") and _is_width(tokens[2]):
        return FieldDecl(tokens[0].value, "", int(tokens[2].value), FieldForm.ANONYMOUS_BIT_FIELD)

    if kinds == ("WORD", "WORD"):
        return FieldDecl(tokens[0].value, tokens[1].value, 0, FieldForm.PLAIN)

    if kinds[:2] == ("WORD", "WORD"):
        return FieldDecl(tokens[0].value, tokens[1].value, 0, FieldForm.LOOSE_PLAIN)

    return None
