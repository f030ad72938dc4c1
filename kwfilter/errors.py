class KeywordError(ValueError):
    """Base class for errors raised while building a keyword filter."""


class EmptyExpressionError(KeywordError):
    def __init__(self):
        super().__init__("no keyword expression given")


class EmptyListError(KeywordError):
    def __init__(self):
        super().__init__("no keywords given")


class InvalidKeywordError(KeywordError):
    def __init__(self, keyword):
        super().__init__(f"invalid keyword: {keyword}")
        self.keyword = keyword


class KeywordSyntaxError(KeywordError):
    """The expression text could not be parsed.

    `position` is the offset of the offending token in `text`, and `token`
    its text (empty at the end of input).
    """

    def __init__(self, text, position, token=""):
        if token:
            detail = f"unexpected {token!r} at position {position}"
        else:
            detail = f"unexpected end of expression at position {position}"
        super().__init__(f"bad keyword expression {text!r}: {detail}")
        self.text = text
        self.position = position
        self.token = token


class UnknownModeError(KeywordError):
    def __init__(self, mode):
        super().__init__(f"unknown keyword match mode: {mode!r}")
        self.mode = mode
