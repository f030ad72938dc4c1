import regex

# Identifier-ignorable characters: ISO controls that are not whitespace, plus
# the format (Cf) characters.
IGNORABLE = r"\x00-\x08\x0e-\x1b\x7f-\x9f\p{Cf}"

ID_START_REGEX = r"[\p{L}\p{Nl}]"
NUMERIC_ID_START_REGEX = r"[\p{L}\p{Nl}\p{Nd}]"
ID_PART_REGEX = r"[\p{L}\p{Nl}\p{Nd}\p{Mn}\p{Mc}\p{Pc}" + IGNORABLE + r"]"

IGNORABLE_RE = regex.compile(f"[{IGNORABLE}]+")

WORD_REGEX = r"\S+"


def identifier_regex(allow_numeric=False):
    start = NUMERIC_ID_START_REGEX if allow_numeric else ID_START_REGEX
    return f"{start}{ID_PART_REGEX}*"
