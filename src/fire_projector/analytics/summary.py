from datetime import date
from typing import List, Optional

from ..config import ASSET_NAMES
from ..engine.inflation import month_diff
from ..engine.results import AssetGrowthSummary, ProjectionPoint


def asset_growth_summary(balances, terminal_deflator: float) -> List[AssetGrowthSummary]:
    return [AssetGrowthSummary(name, float(v * terminal_deflator)) for name, v in zip(ASSET_NAMES, balances)]


def net_worth_at_fire_date(points: List[ProjectionPoint], fire_date: Optional[date]) -> Optional[float]:
    """Real net worth on the independence date; the last projected value otherwise."""
    projected = [p for p in points if not p.is_progress_marker]
    if fire_date is not None:
        for p in projected:
            if p.date == fire_date:
                return p.net_worth
    return projected[-1].net_worth if projected else None


def years_to_fire(initial_date: date, fire_date: date) -> float:
    return month_diff(initial_date, fire_date, exact=True) / 12


def age_at_fire(current_age: float, years: float) -> int:
    return round(current_age + years)


def annual_withdrawal(net_worth: float, withdrawal_rate: float) -> float:
    return net_worth * (withdrawal_rate / 100)


def format_summary(inp, result, current_age: Optional[float] = None) -> str:
    """Plain-text version of the projection summary panel."""
    def money(x): return f"${x:,.2f}"

    nw = net_worth_at_fire_date(result.points, result.independence_date) or 0.0
    lines = []
    if result.independence_date is not None:
        yrs = years_to_fire(inp.initial_date, result.independence_date)
        lines.append(
            f"Starting with {money(inp.initial_net_worth)} and investing {money(inp.monthly_contribution)} monthly, "
            f"you'll reach your F.I.R.E. goal in approximately {round(yrs)} years with a net worth of {money(nw)}, "
            f"also considering a tax rate of {inp.tax_rate}% and inflation of {inp.annual_inflation_rate}% yearly."
        )
    else:
        yrs = None
        lines.append(
            f"Starting with {money(inp.initial_net_worth)} and investing {money(inp.monthly_contribution)} monthly, "
            f"you'll have a net worth of {money(nw)} after {inp.years} years."
        )

    line = (
        f"Your annual withdrawal at a {inp.withdrawal_rate}% rate would be "
        f"{money(annual_withdrawal(nw, inp.withdrawal_rate))}, to cover for your annual expenses of "
        f"{money(inp.annual_expenses)} + taxes."
    )
    if result.independence_date is None:
        line += f" This is not enough to cover your annual expenses of {money(inp.annual_expenses)}."
    lines.append(line)

    if yrs is not None and current_age is not None:
        lines.append(
            f"Based on your current age of {current_age}, you are projected to reach your F.I.R.E. date by "
            f"{result.independence_date.strftime('%B %d, %Y')}, at which point you will be approximately "
            f"{age_at_fire(current_age, yrs)} years old."
        )
    return "\n".join(lines)
