from .exception import CnpjException, InvArgException, CnpjRangeException
from .normalizer import sanitize
