from dataclasses import dataclass, field

from unidecode import unidecode

from .config import DEFAULT_CONFIG
from .errors import EmptyListError, InvalidKeywordError

PRECEDENCE_TERM = 2


def fold_keyword(word, config=DEFAULT_CONFIG):
    word = word.lower()
    if config.ignore_accent:
        word = unidecode(word)
    return word


def fold_vocabulary(vocabulary, config=DEFAULT_CONFIG):
    if vocabulary is None:
        return None
    return frozenset(fold_keyword(word, config) for word in vocabulary)


def check_keyword(keyword, vocabulary, original=None):
    if vocabulary is not None and keyword not in vocabulary:
        raise InvalidKeywordError(keyword if original is None else original)
    return keyword


@dataclass(frozen=True)
class Literal:
    keyword: str

    precedence = PRECEDENCE_TERM

    def __str__(self):
        return self.keyword


@dataclass(frozen=True)
class MatchAllOf:
    """Accepts a keyword set that holds every one of `keys`."""

    keys: frozenset
    words: tuple = field(default=(), compare=False)

    precedence = PRECEDENCE_TERM

    def __str__(self):
        return f"all of ({' '.join(self.words)})"


@dataclass(frozen=True)
class MatchAnyOf:
    """Accepts a keyword set that holds at least one of `keys`."""

    keys: frozenset
    words: tuple = field(default=(), compare=False)

    precedence = PRECEDENCE_TERM

    def __str__(self):
        return f"any of ({' '.join(self.words)})"


def _fold_words(words, vocabulary, config):
    if not words:
        raise EmptyListError()
    vocabulary = fold_vocabulary(vocabulary, config)
    folded = []
    for word in words:
        folded.append(check_keyword(fold_keyword(word, config), vocabulary, word))
    return tuple(folded)


def build_all_of(words, vocabulary=None, config=DEFAULT_CONFIG):
    """Build a predicate matching test keyword sets that contain all `words`.

    The display words keep their order and duplicates; the key set does not.
    """
    folded = _fold_words(words, vocabulary, config)
    return MatchAllOf(frozenset(folded), folded)


def build_any_of(words, vocabulary=None, config=DEFAULT_CONFIG):
    folded = _fold_words(words, vocabulary, config)
    return MatchAnyOf(frozenset(folded), folded)
