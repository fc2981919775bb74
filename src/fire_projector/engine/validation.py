import math

from ..config import SimulationInput
from ..errors import AllocationError, DegenerateRateError, HorizonError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def validate_allocations(allocations) -> float:
    """Allocation percentages must add up to exactly 100 (no tolerance)."""
    total = sum(allocations)
    if total != 100:
        logger.warning(f"Allocation rejected: total={total!r}")
        raise AllocationError(total)
    return total


def validate_rates(inp: SimulationInput):
    rates = {
        "annual_inflation_rate": inp.annual_inflation_rate,
        "withdrawal_rate": inp.withdrawal_rate,
        "tax_rate": inp.tax_rate,
        "stock_cagr": inp.stock_cagr,
        "reit_cagr": inp.reit_cagr,
        "crypto_cagr": inp.crypto_cagr,
        "bond_cagr": inp.bond_cagr,
        "real_estate_cagr": inp.real_estate_cagr,
    }
    for name, value in rates.items():
        if not math.isfinite(value):
            _reject(DegenerateRateError(name, value, "rate must be a finite number"))

    # target and tax gross-up divide by (1 - tax_rate/100)
    if not 0 <= inp.tax_rate < 100:
        _reject(DegenerateRateError("tax_rate", inp.tax_rate, "tax rate must be in [0, 100)"))
    # target divides by withdrawal_rate
    if inp.withdrawal_rate <= 0:
        _reject(DegenerateRateError("withdrawal_rate", inp.withdrawal_rate, "withdrawal rate must be positive"))


def _reject(error: DegenerateRateError):
    logger.warning(f"Rate rejected: {error}")
    raise error


def validate_input(inp: SimulationInput):
    """Reject an input wholesale before any simulation state exists."""
    validate_allocations([a.allocation for a in inp.asset_classes()])
    validate_rates(inp)
    if inp.years < 0:
        logger.warning(f"Horizon rejected: years={inp.years!r}")
        raise HorizonError(f"Projection horizon must be non-negative, got {inp.years!r} years")
