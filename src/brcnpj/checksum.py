"""
Check-digit computation for CNPJ numbers

Each of the two check digits is a weighted sum modulo 11 over the digits
preceding it: the first one over the 12-digit base, the second one over the
base plus the first check digit.
"""

from typing import Dict, Tuple

from .helper.exception import InvArgException


WEIGHTS_FIRST = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
WEIGHTS_SECOND = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_WEIGHTS: Dict[int, Tuple[int, ...]] = {
    len(WEIGHTS_FIRST): WEIGHTS_FIRST,
    len(WEIGHTS_SECOND): WEIGHTS_SECOND,
}


def calc_digit(base: str) -> int:
    """
    Compute a single check digit over a base of 12 or 13 digits
    """
    weights = _WEIGHTS.get(len(base))
    if weights is None:
        raise InvArgException(
            "check digit base must have 12 or 13 digits, got {}: {!r}",
            len(base),
            base,
        )
    if not all("0" <= c <= "9" for c in base):
        raise InvArgException("check digit base must be all digits: {!r}", base)

    total = sum(int(c) * w for c, w in zip(base, weights))
    mod = total % 11
    return 0 if mod < 2 else 11 - mod


def calc_check_digits(base: str) -> str:
    """
    Compute the two check digits for a 12-digit base, returned as a
    two-character string
    """
    if len(base) != len(WEIGHTS_FIRST):
        raise InvArgException("CNPJ base must have 12 digits, got {}", len(base))
    dv1 = calc_digit(base)
    dv2 = calc_digit(base + str(dv1))
    return f"{dv1}{dv2}"
