from .config import ParserConfig
from .entry import Literal, MatchAllOf, MatchAnyOf, build_all_of, build_any_of
from .errors import (
    EmptyExpressionError,
    EmptyListError,
    InvalidKeywordError,
    KeywordError,
    KeywordSyntaxError,
    UnknownModeError,
)
from .evaluate import evaluate
from .keywords import ACCEPT_ALL, ALL_OF, ANY_OF, EXPR, IGNORE, Keywords, create
from .operators import And, Group, Not, Or, normalize
from .query import parse_expression, tokenize
from .selection import KeywordSelection, keywords_match, select_tests
