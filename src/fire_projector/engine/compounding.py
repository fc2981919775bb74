from enum import Enum

import numpy as np


class Regime(Enum):
    ACCUMULATING = "accumulating"
    RETIRED = "retired"


def adjusted_monthly_investment(monthly_contribution: float, regime: Regime, deflators, i: int) -> float:
    """Contribution for month i in today's money; nothing is paid in once retired."""
    if regime is Regime.RETIRED:
        return 0.0
    return monthly_contribution * deflators[i]


def update_asset_values(balances, allocations, cagrs, deposit: float, apply_taxes: bool, tax_rate: float):
    """
    One month for every asset class at once.

    balances: (N,) current balances
    allocations: (N,) percent shares of `deposit`
    cagrs: (N,) annual growth rates in percent, applied as cagr/1200 per month
    deposit: amount paid in this month, split by `allocations`
    Returns the new (N,) balances: old + share of deposit + (taxed) growth.
    """
    balances = np.asarray(balances, dtype=float)
    growth = balances * (cagrs / 100 / 12)
    if apply_taxes:
        growth = growth * (1 - tax_rate / 100)
    return balances + (deposit * allocations) / 100 + growth
