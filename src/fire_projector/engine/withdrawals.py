import numpy as np


def gross_up(monthly_expenses: float, tax_rate: float) -> float:
    """Amount to withdraw so that `monthly_expenses` remain after tax."""
    monthly_taxes = (monthly_expenses * tax_rate) / (100 - tax_rate)
    return monthly_expenses + monthly_taxes


def calculate_withdrawals(monthly_withdrawal: float, balances, net_worth: float):
    """
    Take `monthly_withdrawal` out of the portfolio, each class paying its
    current share of net worth. A zero net worth has nothing to draw from.
    """
    balances = np.asarray(balances, dtype=float)
    if net_worth == 0:
        return balances.copy()
    return balances - monthly_withdrawal * (balances / net_worth)


def monthly_surplus(net_worth: float, withdrawal_rate: float, annual_expenses: float) -> float:
    """Growth allowed by the withdrawal rate beyond what expenses use, per month."""
    annual_growth = net_worth * (withdrawal_rate / 100)
    return max(0.0, annual_growth - annual_expenses) / 12
