from ..analytics.summary import asset_growth_summary
from ..config import SimulationInput
from ..utils.logger import get_logger
from .compounding import Regime, adjusted_monthly_investment, update_asset_values
from .detector import IndependenceDetector, fire_target
from .inflation import add_months, deflator_series, horizon
from .results import ProjectionResult
from .sampling import insert_progress_marker, is_sampled, make_point, progress_marker
from .validation import validate_input
from .withdrawals import calculate_withdrawals, gross_up, monthly_surplus

logger = get_logger(__name__)


def project(inp: SimulationInput) -> ProjectionResult:
    """
    Month-by-month projection of `inp` from month 0 to the horizon.

    Raises AllocationError / DegenerateRateError / HorizonError before any
    state is built. Returns sampled points (today's money), the independence
    date (None when the target is never reached) and the terminal value of
    each asset class.
    """
    validate_input(inp)

    total_months, progress_month = horizon(inp.initial_date, inp.current_date, inp.years)
    deflators = deflator_series(total_months, inp.annual_inflation_rate)
    allocations = inp.allocations()
    cagrs = inp.cagrs()

    # expenses and target are both held at the horizon-end price level
    adjusted_annual_expenses = float(inp.annual_expenses * deflators[total_months])
    target = fire_target(adjusted_annual_expenses, inp.withdrawal_rate, inp.tax_rate)
    detector = IndependenceDetector(target)
    logger.debug(
        f"Projecting {total_months} months from {inp.initial_date} "
        f"(progress month {progress_month}, target {target:,.2f})"
    )

    balances = (inp.initial_net_worth * allocations) / 100
    net_worth = float(inp.initial_net_worth)
    regime = Regime.ACCUMULATING
    surplus = 0.0
    points = []
    progress_attached = False

    for i in range(total_months + 1):
        when = add_months(inp.initial_date, i)

        if i > 0:
            retired = regime is Regime.RETIRED
            # 1) deposit then grow
            deposit = adjusted_monthly_investment(inp.monthly_contribution, regime, deflators, i) + surplus
            balances = update_asset_values(balances, allocations, cagrs, deposit, retired, inp.tax_rate)
            net_worth = float(balances.sum())

            # 2) withdraw, sizing next month's surplus from the pre-withdrawal value
            if retired:
                withdrawal = gross_up(adjusted_annual_expenses / 12, inp.tax_rate)
                if inp.reinvest_surplus:
                    surplus = monthly_surplus(net_worth, inp.withdrawal_rate, adjusted_annual_expenses)
                else:
                    surplus = 0.0
                balances = calculate_withdrawals(withdrawal, balances, net_worth)
                net_worth = float(balances.sum())

        if not is_sampled(i, total_months, inp.is_monthly):
            continue

        # 3) sample
        current_progress = None
        if i == progress_month:
            current_progress = inp.current_net_worth
            progress_attached = True
        points.append(make_point(when, net_worth, balances, deflators[i], surplus, current_progress))

        # 4) detect; the regime flips for the following month
        if detector.observe(i, when, net_worth * deflators[i]) and inp.include_withdrawals:
            regime = Regime.RETIRED
            logger.info(f"Withdrawals start after {when}")

    if not progress_attached:
        # overlay carries the end-of-run balances, undeflated
        marker = progress_marker(inp.current_date, inp.current_net_worth, balances)
        points = insert_progress_marker(points, marker)
        logger.debug(f"Progress marker spliced in at {inp.current_date}")

    return ProjectionResult(
        points=points,
        independence_date=detector.independence_date,
        asset_growth=asset_growth_summary(balances, deflators[total_months]),
        total_months=total_months,
        target_net_worth=float(target),
    )
