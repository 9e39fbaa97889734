"""
Validation and normalization of Brazilian CNPJ numbers (Cadastro Nacional
da Pessoa Jurídica)

A CNPJ has 14 digits, the last two being check digits. It is usually
written as XX.XXX.XXX/XXXX-XX, but any punctuation is accepted on input.
"""

import logging

from typing import Optional

from stdnum.exceptions import (
    InvalidChecksum,
    InvalidFormat,
    InvalidLength,
    ValidationError,
)

from .checksum import calc_check_digits
from .helper.exception import InvArgException, CnpjRangeException
from .helper.normalizer import sanitize


CNPJ_LENGTH = 14

logger = logging.getLogger(__name__)


def validate(cnpj: Optional[str]) -> str:
    """
    Check a CNPJ and return its digit string. Raise a
    stdnum.exceptions.ValidationError subclass if it is not valid
    """
    if cnpj is None:
        raise InvalidFormat("no CNPJ given")

    digits = sanitize(cnpj)
    if len(digits) != CNPJ_LENGTH:
        raise InvalidLength()
    # Repeated sequences (00000000000000 and the like) pass the checksum
    if len(set(digits)) == 1:
        raise InvalidFormat("CNPJ made of a single repeated digit")

    base, suffix = digits[:12], digits[12:]
    if calc_check_digits(base) != suffix:
        raise InvalidChecksum()
    return digits


def is_valid(cnpj: Optional[str]) -> bool:
    """
    Check if a CNPJ is structurally valid (length, non-trivial digits and
    both check digits). Never raises on bad input
    """
    try:
        validate(cnpj)
    except ValidationError as e:
        logger.debug("invalid CNPJ %r: %s", cnpj, e)
        return False
    return True


def normalize(cnpj: Optional[str]) -> Optional[str]:
    """
    Remove punctuation and left-pad with zeros up to 14 digits. The check
    digits are not verified.

    The digit string is read as an unsigned integer, so extra leading zeros
    are dropped. Values needing more than 14 digits raise
    CnpjRangeException, and a candidate with no digits at all raises
    InvArgException
    """
    if cnpj is None:
        return None

    digits = sanitize(cnpj)
    if not digits:
        raise InvArgException("no digits in CNPJ candidate: {!r}", cnpj)
    # Width check on the string itself, before any integer conversion
    significant = digits.lstrip("0")
    if len(significant) > CNPJ_LENGTH:
        raise CnpjRangeException(
            "CNPJ value out of range ({} significant digits, max {})",
            len(significant),
            CNPJ_LENGTH,
        )
    value = int(significant or "0")
    return f"{value:0{CNPJ_LENGTH}d}"


def format_cnpj(cnpj: Optional[str]) -> str:
    """
    Render a CNPJ in its usual punctuated form, XX.XXX.XXX/XXXX-XX
    """
    if cnpj is None:
        raise InvArgException("cannot format an absent CNPJ")
    d = normalize(cnpj)
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"
