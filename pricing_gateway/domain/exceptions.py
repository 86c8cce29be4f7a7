"""Domain-specific exceptions"""

from typing import List

from pricing_gateway.domain.models import ValidationResult


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanRequestError(DomainException):
    """Loan principal or term failed validation"""

    def __init__(self, failures: List[ValidationResult]):
        self.failures = failures
        super().__init__("; ".join(f.message or "" for f in failures))


class InvalidLoanAmount(InvalidLoanRequestError):
    """Principal outside the lendable range"""

    pass


class InvalidLoanTerm(InvalidLoanRequestError):
    """Term outside the lendable range"""

    pass
