"""usury-check: APR checks for a simple example loan plus override, or for an amortized loan"""

import argparse
import logging
import math
import sys
from typing import List, Optional, TextIO

from console_kit.cli.prompts import PromptReader
from console_kit.config import Settings, settings as default_settings
from console_kit.domain.apr import amortized_apr, assess_amortized, assess_loan
from console_kit.domain.exceptions import InputError, LoanValidationError, UnknownJurisdictionError
from console_kit.domain.jurisdictions import get_jurisdiction, list_codes
from console_kit.domain.models import Jurisdiction, LoanTerms, UsuryVerdict
from console_kit.infrastructure.observability.logging import log_assessment, setup_logging
from console_kit.infrastructure.observability.metrics import input_error_counter, record_assessment


def _jurisdiction_arg(value: str) -> Jurisdiction:
    try:
        return get_jurisdiction(value)
    except UnknownJurisdictionError as e:
        raise argparse.ArgumentTypeError(str(e))


def _finite_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}") from None
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"expected a finite number, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="usury-check",
        description="Check whether a loan's APR exceeds the legal usury threshold.",
    )
    ceiling = p.add_mutually_exclusive_group()
    ceiling.add_argument(
        "--threshold",
        type=_finite_float,
        help="Legal APR ceiling in percent (default from USURY_THRESHOLD_PERCENT)",
    )
    ceiling.add_argument(
        "--jurisdiction",
        type=_jurisdiction_arg,
        help=f"Use a jurisdiction's APR cap instead ({', '.join(list_codes())})",
    )
    p.add_argument(
        "--fees",
        type=_finite_float,
        default=0.0,
        help="Up-front fees counted as interest in both checks",
    )
    p.add_argument(
        "--amortized",
        action="store_true",
        help="Prompt for principal, nominal annual rate and term in months; solve APR from monthly payments",
    )
    p.add_argument(
        "--exclude-fees",
        action="store_true",
        help="With --amortized, leave fees out of the APR",
    )
    return p


def report_usury(verdict: UsuryVerdict, stdout: TextIO) -> None:
    """Print APR and a verdict line that tells the outcomes apart"""
    stdout.write(f"APR is {verdict.apr:.2f}\n")
    if not verdict.capped:
        stdout.write(f"ℹ️ No cap configured for {verdict.jurisdiction}; usury not checked.\n")
    elif verdict.usurious:
        stdout.write(f"⚠️ Usury detected! APR exceeds {verdict.threshold:.2f}% legal threshold.\n")
    else:
        stdout.write("✅ Loan is within legal interest limits.\n")


def _write_jurisdiction(jurisdiction: Optional[Jurisdiction], stdout: TextIO) -> None:
    if jurisdiction is None:
        return
    stdout.write(f"Jurisdiction: {jurisdiction.name}\n")
    if jurisdiction.description:
        stdout.write(f"Note: {jurisdiction.description}\n")


def run(
    reader: PromptReader,
    stdout: TextIO,
    example: LoanTerms,
    threshold: float,
    jurisdiction: Optional[Jurisdiction] = None,
) -> List[UsuryVerdict]:
    """
    Two-phase check.

    Flow:
    1. Report the example loan and its verdict
    2. Read a new principal and interest
    3. Report again with the new amounts and the example's term and fees
    """
    verdict = assess_loan(example, threshold, jurisdiction)

    stdout.write(f"Loan principal: {example.principal:.2f}\n")
    stdout.write(f"Total interest: {example.interest:.2f}\n")
    if example.fees:
        stdout.write(f"Up-front fees: {example.fees:.2f}\n")
    stdout.write(f"Term: {example.term_years} year(s)\n")
    _write_jurisdiction(jurisdiction, stdout)
    stdout.write(f"APR: {verdict.apr:.2f}%\n")
    report_usury(verdict, stdout)
    record_assessment(verdict)
    log_assessment("example", verdict)

    principal = reader.read_float("Enter principal: ")
    interest = reader.read_float("Enter interest: ")
    override = LoanTerms(
        principal=principal,
        interest=interest,
        term_years=example.term_years,
        fees=example.fees,
    )

    second = assess_loan(override, threshold, jurisdiction)
    report_usury(second, stdout)
    record_assessment(second)
    log_assessment("override", second)

    return [verdict, second]


def run_amortized(
    reader: PromptReader,
    stdout: TextIO,
    threshold: float,
    jurisdiction: Optional[Jurisdiction] = None,
    fees: float = 0.0,
    include_fees: bool = True,
) -> UsuryVerdict:
    """Single interactive pass for a monthly-payment loan"""
    principal = reader.read_float("Enter principal: ")
    annual_rate = reader.read_float("Enter annual rate (%): ")
    months = reader.read_int("Enter term (months): ")

    loan = amortized_apr(principal, annual_rate, months, fees=fees, include_fees=include_fees)
    verdict = assess_amortized(loan, threshold, jurisdiction)

    stdout.write(f"Nominal annual rate: {loan.annual_rate_percent:.2f}%\n")
    stdout.write(f"Monthly payment: {loan.monthly_payment:.2f}\n")
    stdout.write(f"APR ({'fees included' if include_fees else 'fees excluded'}): {loan.apr:.2f}%\n")
    _write_jurisdiction(jurisdiction, stdout)
    report_usury(verdict, stdout)
    record_assessment(verdict)
    log_assessment("amortized", verdict)

    return verdict


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    settings: Optional[Settings] = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or default_settings
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    setup_logging(settings.log_level, settings.service_name)

    loan = settings.example_loan
    example = LoanTerms(
        principal=loan.principal,
        interest=loan.interest,
        term_years=loan.term_years,
        fees=args.fees,
    )
    threshold = args.threshold if args.threshold is not None else settings.usury_threshold_percent

    reader = PromptReader(stdin, stdout)
    try:
        if args.amortized:
            run_amortized(
                reader,
                stdout,
                threshold,
                args.jurisdiction,
                fees=args.fees,
                include_fees=not args.exclude_fees,
            )
        else:
            run(reader, stdout, example, threshold, args.jurisdiction)
    except (InputError, LoanValidationError) as e:
        input_error_counter.labels(program="usury-check").inc()
        logging.warning(f"Usury check aborted: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
