"""
Detection of valid CNPJ numbers inside free text
"""

import re

from typing import Iterable

from .cnpj import is_valid


# Punctuated form, or a standalone run of 14 digits
_CNPJ_PATTERN = r"""
  (?<![\d./-])
  (?: \d{2} \. \d{3} \. \d{3} / \d{4} - \d{2} | \d{14} )
  (?![\d./-]?\d)
"""
_CNPJ_REGEX = re.compile(_CNPJ_PATTERN, flags=re.X)


def find_cnpj(doc: str) -> Iterable[str]:
    """
    Brazilian número de inscrição no CNPJ (detect and validate)
    """
    for candidate in _CNPJ_REGEX.findall(doc):
        if is_valid(candidate):
            yield candidate
