VERSION = "0.3.0"

from .cnpj import is_valid, normalize, validate, format_cnpj
from .checksum import calc_digit, calc_check_digits
from .helper.normalizer import sanitize
from .detect import find_cnpj
