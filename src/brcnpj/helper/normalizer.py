"""
Strip a CNPJ candidate down to its digits
"""

import regex

from typing import Optional


# Only ASCII digits survive; other Unicode digits are dropped as well
_NON_DIGIT = regex.compile(r"[^0-9]+", flags=regex.VERSION0)


def sanitize(text: Optional[str]) -> str:
    """
    Remove every character that is not a decimal digit, keeping the order
    of the remaining ones. An absent value produces an empty string
    """
    if text is None:
        return ""
    return _NON_DIGIT.sub("", text)
