"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InputError(DomainException):
    """A required token or number could not be read from the input stream"""

    pass


class LoanValidationError(DomainException):
    """Loan terms for which no APR is defined (zero or negative principal/term)"""

    pass


class UnknownJurisdictionError(DomainException):
    """Jurisdiction code has no configured APR cap"""

    pass
