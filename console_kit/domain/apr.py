"""APR calculation and usury assessment - core business logic"""

from typing import Callable, Optional

from console_kit.domain.exceptions import LoanValidationError
from console_kit.domain.models import AmortizedLoan, Jurisdiction, LoanTerms, UsuryVerdict

# Amortized APRs come out of a root search; ignore drift below this (percent)
APR_TOLERANCE_PERCENT = 1e-7


def calculate_apr(principal: float, interest: float, term_years: int, fees: float = 0.0) -> float:
    """
    Calculate the simplified Annual Percentage Rate of a loan.

    APR = (interest + fees) / principal / term_years * 100

    Requirements:
    - Principal and term must be positive; there is no APR for a zero
      principal, so it is rejected instead of producing inf/NaN
    - Negative interest or fees are accepted as given

    Example:
        principal=1000, interest=400, term=1 -> 40.0
    """
    if principal <= 0:
        raise LoanValidationError(f"Principal must be positive, got {principal:.2f}")
    if term_years <= 0:
        raise LoanValidationError(f"Term must be at least one year, got {term_years}")

    return ((interest + fees) / principal) / term_years * 100.0


def monthly_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """
    Level payment of a standard amortizing loan.

    payment = P * r * (1+r)^n / ((1+r)^n - 1) with r the monthly nominal rate,
    or P / n when the rate is zero.
    """
    r = annual_rate_percent / 100.0 / 12.0
    if r == 0:
        return principal / term_months

    factor = (1 + r) ** term_months
    return principal * (r * factor) / (factor - 1)


def annual_rate_from_cashflows(received: float, payment: float, term_months: int) -> float:
    """
    Annual effective rate (as a decimal) of receiving `received` now and paying
    `payment` at the end of each of `term_months` months.

    Bisects NPV(r) = received - sum(payment / (1+r)^t) for the monthly rate r,
    then annualizes as (1+r)^12 - 1.
    """
    if abs(payment) < 1e-12:
        return 0.0

    def npv(rate: float) -> float:
        if rate <= -1.0:
            return float("inf")
        total = received
        discount = 1.0
        for _ in range(term_months):
            discount *= 1.0 + rate
            if discount == 0.0:
                return float("-inf")
            total -= payment / discount
        return total

    low, high = -0.9999999, 10.0
    f_low, f_high = npv(low), npv(high)

    # Widen until the root is bracketed
    for _ in range(200):
        if f_low * f_high <= 0:
            break
        high *= 2
        f_high = npv(high)
    else:
        raise LoanValidationError("APR search did not find a rate for these cash flows")

    return _bisect(npv, low, high, f_low)


def _bisect(npv: Callable[[float], float], a: float, b: float, fa: float) -> float:
    c = 0.5 * (a + b)
    for _ in range(200):
        c = 0.5 * (a + b)
        fc = npv(c)
        if abs(fc) < 1e-12 or (b - a) < 1e-12:
            break
        if fa * fc <= 0:
            b = c
        else:
            a, fa = c, fc

    return (1.0 + c) ** 12 - 1.0


def amortized_apr(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    fees: float = 0.0,
    include_fees: bool = True,
) -> AmortizedLoan:
    """
    Price a monthly-payment loan and solve for its APR.

    Requirements:
    - Principal and term positive, rate and fees non-negative
    - Included fees are netted out of the amount received up front, so they
      must be smaller than the principal

    Example:
        $1000 at 12% nominal over 12 months -> $88.85/month, APR 12.68%
    """
    if principal <= 0:
        raise LoanValidationError(f"Principal must be positive, got {principal:.2f}")
    if annual_rate_percent < 0:
        raise LoanValidationError(f"Annual rate must not be negative, got {annual_rate_percent:.2f}")
    if term_months <= 0:
        raise LoanValidationError(f"Term must be at least one month, got {term_months}")
    if fees < 0:
        raise LoanValidationError(f"Fees must not be negative, got {fees:.2f}")

    received = principal - (fees if include_fees else 0.0)
    if received <= 0:
        raise LoanValidationError("Included fees must be smaller than the principal")

    payment = monthly_payment(principal, annual_rate_percent, term_months)
    # Payments never total less than what is received, so the rate is >= 0
    apr = max(0.0, annual_rate_from_cashflows(received, payment, term_months) * 100.0)

    return AmortizedLoan(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        term_months=term_months,
        monthly_payment=payment,
        apr=apr,
        fees=fees,
        include_fees=include_fees,
    )


def is_usury(apr: float, threshold: float) -> bool:
    """APR strictly above the threshold is usury; equal to it is not"""
    return apr > threshold


def judge_apr(
    apr: float,
    threshold: float,
    jurisdiction: Optional[Jurisdiction] = None,
    tolerance: float = 0.0,
) -> UsuryVerdict:
    """
    Compare an APR to a ceiling.

    When a jurisdiction is given its cap replaces the threshold. A jurisdiction
    without a cap yields an uncapped verdict instead of a compliance one.
    """
    if jurisdiction is None:
        return UsuryVerdict(apr=apr, threshold=threshold, usurious=is_usury(apr, threshold + tolerance))

    if not jurisdiction.has_cap:
        return UsuryVerdict(
            apr=apr,
            threshold=jurisdiction.max_apr_percent,
            usurious=False,
            jurisdiction=jurisdiction.name,
            capped=False,
        )

    cap = jurisdiction.max_apr_percent
    return UsuryVerdict(
        apr=apr,
        threshold=cap,
        usurious=is_usury(apr, cap + tolerance),
        jurisdiction=jurisdiction.name,
    )


def assess_loan(
    terms: LoanTerms,
    threshold: float,
    jurisdiction: Optional[Jurisdiction] = None,
) -> UsuryVerdict:
    """Main entry point: compute APR for the terms and compare it to a ceiling"""
    apr = calculate_apr(terms.principal, terms.interest, terms.term_years, terms.fees)
    return judge_apr(apr, threshold, jurisdiction)


def assess_amortized(
    loan: AmortizedLoan,
    threshold: float,
    jurisdiction: Optional[Jurisdiction] = None,
) -> UsuryVerdict:
    return judge_apr(loan.apr, threshold, jurisdiction, tolerance=APR_TOLERANCE_PERCENT)
