from datetime import date

import pytest

from fire_projector.config import SimulationInput


@pytest.fixture
def scenario_a():
    return SimulationInput(
        initial_net_worth=100_000,
        monthly_contribution=1_000,
        years=30,
        stock_allocation=60, reit_allocation=10, crypto_allocation=5, bond_allocation=20, real_estate_allocation=5,
        stock_cagr=7, reit_cagr=6, crypto_cagr=10, bond_cagr=3, real_estate_cagr=4,
        annual_inflation_rate=2,
        initial_date=date(2024, 1, 1),
        current_date=date(2024, 7, 1),
        current_net_worth=105_000,
        is_monthly=True,
        annual_expenses=40_000,
        withdrawal_rate=4,
        include_withdrawals=True,
        tax_rate=20,
        reinvest_surplus=False,
    )


@pytest.fixture
def already_independent():
    """Starts above the target so independence is reached at month 0."""
    return SimulationInput(
        initial_net_worth=2_000_000,
        monthly_contribution=1_000,
        years=5,
        stock_allocation=60, reit_allocation=10, crypto_allocation=5, bond_allocation=20, real_estate_allocation=5,
        stock_cagr=7, reit_cagr=6, crypto_cagr=10, bond_cagr=3, real_estate_cagr=4,
        annual_inflation_rate=0,
        initial_date=date(2024, 1, 1),
        current_date=date(2024, 1, 1),
        current_net_worth=2_000_000,
        is_monthly=True,
        annual_expenses=40_000,
        withdrawal_rate=4,
        include_withdrawals=True,
        tax_rate=20,
        reinvest_surplus=False,
    )
