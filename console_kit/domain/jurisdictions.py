"""Jurisdiction APR caps"""

from typing import Dict, List

from console_kit.domain.exceptions import UnknownJurisdictionError
from console_kit.domain.models import Jurisdiction

JURISDICTIONS: Dict[str, Jurisdiction] = {
    j.code: j
    for j in [
        Jurisdiction(
            "US_FEDERAL",
            "U.S. federal (typical consumer cap proxy)",
            36.0,
            "36% proxy for consumer loan caps; not legal advice",
        ),
        Jurisdiction(
            "PHILIPPINES",
            "Philippines (placeholder cap)",
            60.0,
            "Placeholder value; replace with the applicable legal cap",
        ),
        Jurisdiction(
            "EU_GENERIC",
            "EU generic (illustrative)",
            20.0,
            "Illustrative ceiling; member states set their own limits",
        ),
        Jurisdiction(
            "NONE",
            "No selected jurisdiction (no cap applied)",
            0.0,
            "No cap configured",
        ),
    ]
}


def get_jurisdiction(code: str) -> Jurisdiction:
    """Look up a jurisdiction by code, ignoring case and dashes"""
    key = code.strip().upper().replace("-", "_")
    try:
        return JURISDICTIONS[key]
    except KeyError:
        raise UnknownJurisdictionError(
            f"Unknown jurisdiction {code!r} (choose from {', '.join(list_codes())})"
        ) from None


def list_codes() -> List[str]:
    return sorted(JURISDICTIONS)
