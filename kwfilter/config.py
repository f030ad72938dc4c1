import os
from dataclasses import dataclass

ALLOW_NUMERIC_KEYWORDS_ENV = "KWFILTER_ALLOW_NUMERIC_KEYWORDS"
IGNORE_ACCENT_ENV = "KWFILTER_IGNORE_ACCENT"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(environ, name):
    return environ.get(name, "").strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class ParserConfig:
    """Options that change how keyword text is scanned and compared.

    allow_numeric_keywords: identifiers may start with a decimal digit.
    ignore_accent: keywords are transliterated to ASCII with unidecode before
        they are compared, so `café` and `cafe` name the same keyword.
    """

    allow_numeric_keywords: bool = False
    ignore_accent: bool = False

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            environ = os.environ
        return cls(
            allow_numeric_keywords=_env_flag(environ, ALLOW_NUMERIC_KEYWORDS_ENV),
            ignore_accent=_env_flag(environ, IGNORE_ACCENT_ENV),
        )


DEFAULT_CONFIG = ParserConfig()
