from datetime import date

from fire_projector.config import SimulationInput
from fire_projector.engine.projector import project
from fire_projector.analytics.summary import format_summary
from fire_projector.errors import ProjectionError
from fire_projector.utils.logger import get_logger, setup_logging, timer

logger = get_logger("quickstart")


def main():
    setup_logging(console_level="INFO")

    # 1) Inputs
    inp = SimulationInput(
        initial_net_worth=100_000,
        monthly_contribution=1_000,
        years=30,
        stock_allocation=60, reit_allocation=10, crypto_allocation=5, bond_allocation=20, real_estate_allocation=5,
        stock_cagr=7, reit_cagr=6, crypto_cagr=10, bond_cagr=3, real_estate_cagr=4,
        annual_inflation_rate=2,
        initial_date=date(2024, 1, 1),
        current_date=date(2024, 7, 1),
        current_net_worth=105_000,
        is_monthly=False,
        annual_expenses=40_000,
        withdrawal_rate=4,
        include_withdrawals=True,
        tax_rate=20,
        reinvest_surplus=False,
    )

    # 2) Run
    try:
        with timer("projection", logger):
            result = project(inp)
    except ProjectionError as e:
        logger.error(str(e))
        return 1

    # 3) Summary
    df = result.to_frame()
    print("=== Yearly projection (today's money) ===")
    print(df[["net_worth", "stocks", "bonds", "current_progress"]].round(0).to_string())
    print()
    print("=== Asset growth at horizon ===")
    print(result.asset_growth_frame().round(0).to_string())
    print()
    print(format_summary(inp, result, current_age=35))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
