"""Domain models - pure Python dataclasses representing loan checks"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoanTerms:
    """Principal, total interest and term of a simple loan"""

    principal: float
    interest: float
    term_years: int
    fees: float = 0.0  # Up-front fees counted as interest


@dataclass(frozen=True)
class AmortizedLoan:
    """Monthly-payment loan priced from a nominal annual rate"""

    principal: float
    annual_rate_percent: float
    term_months: int
    monthly_payment: float
    apr: float  # Annual effective rate in percent
    fees: float = 0.0
    include_fees: bool = True


@dataclass(frozen=True)
class Jurisdiction:
    """Legal APR ceiling for a region"""

    code: str
    name: str
    max_apr_percent: float  # <= 0 means no cap configured
    description: str = ""

    @property
    def has_cap(self) -> bool:
        return self.max_apr_percent > 0


@dataclass(frozen=True)
class UsuryVerdict:
    """Output of a usury assessment"""

    apr: float
    threshold: float
    usurious: bool
    jurisdiction: Optional[str] = None
    capped: bool = True  # False when the jurisdiction has no cap to check against

    @property
    def outcome(self) -> str:
        if not self.capped:
            return "uncapped"
        return "usurious" if self.usurious else "compliant"
