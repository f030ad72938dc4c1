import logging

from .config import DEFAULT_CONFIG
from .entry import build_all_of, build_any_of, fold_keyword
from .errors import UnknownModeError
from .evaluate import evaluate
from .query import parse_expression

IGNORE = "ignore"
ALL_OF = "all of"
ANY_OF = "any of"
EXPR = "expr"

MODES = (IGNORE, ALL_OF, ANY_OF, EXPR)


class Keywords:
    """A compiled keyword filter.

    Built by `create`; holds the `(mode, text)` pair it came from, the
    immutable predicate, and the summary rendered once at construction.
    """

    def __init__(self, mode, text, predicate, config=DEFAULT_CONFIG):
        self.mode = mode
        self.text = text
        self.predicate = predicate
        self.config = config
        self.summary = str(predicate)

    def preprocess(self, keywords):
        """Fold raw test keywords the way the filter's own keywords were."""
        return {fold_keyword(keyword, self.config) for keyword in keywords}

    def accepts(self, keywords):
        """`keywords` must already be folded, see `preprocess`."""
        return evaluate(self.predicate, keywords)

    def filter(self, keyword_sets):
        return [keywords for keywords in keyword_sets if self.accepts(keywords)]

    def __call__(self, keywords):
        return self.accepts(keywords)

    def __eq__(self, other):
        if not isinstance(other, Keywords):
            return NotImplemented
        return self.predicate == other.predicate

    def __hash__(self):
        return hash(self.predicate)

    def __repr__(self):
        return f"Keywords({self.mode!r}, {self.summary!r})"


class _AcceptAll(Keywords):
    def __init__(self):
        self.mode = IGNORE
        self.text = ""
        self.predicate = None
        self.config = DEFAULT_CONFIG
        self.summary = ""

    def accepts(self, keywords):
        return True


ACCEPT_ALL = _AcceptAll()


def create(mode, text, vocabulary=None, config=DEFAULT_CONFIG):
    """Build the keyword filter selected by `mode`.

    mode: None or "ignore" (accept every test), "all of" / "any of" (`text`
        is a whitespace-separated keyword list), or "expr" (`text` is a
        boolean expression over keywords using `&`, `|`, `!` and parentheses).
    vocabulary: keywords the test suite declares, or None to allow any.
    config: a ParserConfig; pass `ParserConfig.from_env()` to take the
        settings from the environment.
    """
    if mode is None or mode == IGNORE:
        return ACCEPT_ALL
    if text is None:
        text = ""

    if mode == ALL_OF:
        predicate = build_all_of(text.split(), vocabulary, config)
    elif mode == ANY_OF:
        predicate = build_any_of(text.split(), vocabulary, config)
    elif mode == EXPR:
        predicate = parse_expression(text, vocabulary, config)
    else:
        raise UnknownModeError(mode)

    keywords = Keywords(mode, text, predicate, config)
    logging.debug(f"Keyword filter ({mode}): {keywords.summary}")
    return keywords
