"""Keyword selection as stored in a saved run configuration.

Only the `(mode, text)` pair is ever persisted; the compiled filter is rebuilt
from it on demand and cached until either half changes.
"""

import logging
import re

from .config import DEFAULT_CONFIG
from .errors import KeywordError
from .keywords import ALL_OF, ANY_OF, EXPR, IGNORE, create
from .regex import WORD_REGEX

KEYWORD_OP_PROPERTY = "selection.keywordOp"
KEYWORDS_PROPERTY = "selection.keywords"

# Saved files spell the list modes without a space.
_OP_TO_MODE = {
    "ignore": IGNORE,
    "expr": EXPR,
    "allOf": ALL_OF,
    "anyOf": ANY_OF,
}
_MODE_TO_OP = {mode: op for op, mode in _OP_TO_MODE.items()}


class KeywordSelection:
    def __init__(self, mode=IGNORE, text=None, vocabulary=None, config=DEFAULT_CONFIG):
        self.vocabulary = vocabulary
        self.config = config
        self._mode = mode
        self._text = text
        self._cached = None
        self._cache_key = None
        self.error = None

    @property
    def mode(self):
        return self._mode

    @property
    def text(self):
        return self._text

    def set(self, mode, text):
        self._mode = mode
        self._text = text

    @property
    def keywords(self):
        """The compiled filter, or None when ignoring keywords or on error."""
        return self._refresh()

    def _refresh(self):
        if self._mode is None or self._mode == IGNORE:
            self._cached = None
            self._cache_key = None
            self.error = None
            return None

        key = (self._mode, self._text)
        if key != self._cache_key:
            self._cache_key = key
            try:
                self._cached = create(self._mode, self._text, self.vocabulary, self.config)
                self.error = None
            except KeywordError as e:
                self._cached = None
                self.error = f"bad keywords: {e}"
        return self._cached

    def is_valid(self):
        self._refresh()
        return self.error is None

    @classmethod
    def from_properties(cls, properties, vocabulary=None, config=DEFAULT_CONFIG):
        op = properties.get(KEYWORD_OP_PROPERTY)
        text = properties.get(KEYWORDS_PROPERTY)
        if op is None or text is None:
            mode = IGNORE
        elif op in _OP_TO_MODE:
            mode = _OP_TO_MODE[op]
        else:
            logging.warning(f"Unknown keyword operator {op!r}, ignoring keywords")
            mode = IGNORE
        return cls(mode, text, vocabulary, config)

    def to_properties(self):
        properties = {KEYWORD_OP_PROPERTY: _MODE_TO_OP.get(self._mode, "ignore")}
        if self._text is not None:
            properties[KEYWORDS_PROPERTY] = self._text
        return properties


def keywords_of(test, keywords):
    """Return the folded keyword set of a test description."""
    words = re.findall(WORD_REGEX, test.get("keywords") or "")
    return keywords.preprocess(words)


def select_tests(tests, keywords):
    """Yield the test descriptions accepted by `keywords`.

    Each test is a mapping whose optional "keywords" entry is a
    whitespace-separated keyword list. `keywords=None` selects every test.
    """
    for test in tests:
        if keywords is None or keywords.accepts(keywords_of(test, keywords)):
            yield test


def keywords_match(a, b):
    """Whether two keyword lists hold the same words in any order."""
    return sorted(re.findall(WORD_REGEX, a)) == sorted(re.findall(WORD_REGEX, b))
