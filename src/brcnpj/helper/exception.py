"""
Errors raised by brcnpj on misuse of its functions. Invalid CNPJ input as
such is reported by is_valid() returning False, or by validate() raising
the stdnum.exceptions errors
"""


class CnpjException(Exception):
    """
    Base brcnpj error. The message is formatted with the positional arguments
    """

    def __init__(self, msg="invalid CNPJ operation", *args):
        super().__init__(msg.format(*args))


class InvArgException(CnpjException):
    """
    An argument breaks a function contract (wrong check digit base, CNPJ
    candidate with no digits, absent value where one is required)
    """


class CnpjRangeException(CnpjException):
    """
    A CNPJ value needs more than 14 significant digits
    """
