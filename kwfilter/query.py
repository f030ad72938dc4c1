import logging
from collections import namedtuple
from functools import lru_cache, partial

from lark import Lark
from lark.exceptions import UnexpectedCharacters, UnexpectedInput
from lark.visitors import Transformer_NonRecursive

from .config import DEFAULT_CONFIG
from .entry import Literal, check_keyword, fold_keyword, fold_vocabulary
from .errors import EmptyExpressionError, KeywordSyntaxError
from .operators import And, Group, Not, Or, normalize
from .regex import IGNORABLE_RE, identifier_regex

# Binary operators share one level and are folded left to right; the
# transformer repairs AND-over-OR binding with `normalize`.
grammar = r"""
?start: expr

?expr: term
     | expr _AND term         -> and_op
     | expr _OR term          -> or_op

?term: ID                     -> literal
     | _NOT term              -> not_op
     | _LPAREN expr _RPAREN   -> group

_AND: "&"
_OR: "|"
_NOT: "!"
_LPAREN: "("
_RPAREN: ")"

%ignore /[ \t]+/
"""

TOKEN_KINDS = {
    "_AND": "AND",
    "_OR": "OR",
    "_NOT": "NOT",
    "_LPAREN": "LPAREN",
    "_RPAREN": "RPAREN",
    "ID": "ID",
}

ScannedToken = namedtuple("ScannedToken", ["kind", "value", "position"])


def _fold_identifier(token, config):
    return token.update(value=fold_keyword(IGNORABLE_RE.sub("", token), config))


@lru_cache(maxsize=None)
def get_parser(config=DEFAULT_CONFIG):
    logging.debug(f"Building keyword parser for {config}")
    id_terminal = f"ID: /{identifier_regex(config.allow_numeric_keywords)}/\n"
    return Lark(
        grammar + id_terminal,
        start="start",
        parser="lalr",
        lexer="basic",
        regex=True,
        lexer_callbacks={"ID": partial(_fold_identifier, config=config)},
    )


def tokenize(text, config=DEFAULT_CONFIG):
    """Scan `text` into `ScannedToken`s.

    Identifiers come out folded. The stream ends with an END token, or with an
    ERROR token at the first character that starts no token.
    """
    try:
        for token in get_parser(config).lex(text):
            yield ScannedToken(TOKEN_KINDS[token.type], token.value, token.start_pos)
    except UnexpectedCharacters as e:
        yield ScannedToken("ERROR", text[e.pos_in_stream], e.pos_in_stream)
        return
    yield ScannedToken("END", "", len(text))


class KeywordTransformer(Transformer_NonRecursive):
    """Turn a parse tree into predicate nodes, bottom-up and without recursion.

    Each binary node is normalized as soon as it is built, so long chains
    come out with AND bound tighter than OR.
    """

    def __init__(self):
        super().__init__(visit_tokens=False)

    def literal(self, args):
        return Literal(str(args[0]))

    def not_op(self, args):
        return Not(args[0])

    def group(self, args):
        return Group(args[0])

    def and_op(self, args):
        left, right = args
        return normalize(And(left, right))

    def or_op(self, args):
        left, right = args
        return normalize(Or(left, right))


def _syntax_error(text, error):
    if isinstance(error, UnexpectedCharacters):
        return KeywordSyntaxError(text, error.pos_in_stream, text[error.pos_in_stream])
    token = getattr(error, "token", None)
    if token is None or token.type == "$END" or token.start_pos is None:
        return KeywordSyntaxError(text, len(text))
    return KeywordSyntaxError(text, token.start_pos, text[token.start_pos : token.end_pos])


def _parse_tree(text, vocabulary, config):
    # Tokens are fed one at a time so that a keyword is checked against the
    # vocabulary once the parser has accepted it and before the next token
    # is scanned; the leftmost problem in the text is the one reported.
    parser = get_parser(config)
    interactive = parser.parse_interactive(text)
    token = None
    for token in parser.lex(text):
        interactive.feed_token(token)
        if token.type == "ID":
            check_keyword(token.value, vocabulary)
    return interactive.feed_eof(token)


def parse_expression(text, vocabulary=None, config=DEFAULT_CONFIG):
    """Compile a keyword expression such as `a | b & !(c | d)`.

    Raises EmptyExpressionError for blank text, KeywordSyntaxError for text
    outside the grammar, and InvalidKeywordError for a keyword missing from
    `vocabulary` (when one is given).
    """
    if text is None or not text.strip():
        raise EmptyExpressionError()

    logging.debug(f"Input keyword expression: {text}")
    try:
        tree = _parse_tree(text, fold_vocabulary(vocabulary, config), config)
    except UnexpectedInput as e:
        raise _syntax_error(text, e) from e

    predicate = KeywordTransformer().transform(tree)
    logging.debug(f"Compiled keyword expression: {predicate}")
    return predicate
