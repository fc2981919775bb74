from dataclasses import dataclass, field, fields, replace as dc_replace
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Tuple

# (key, display name) in the fixed order used everywhere
ASSET_CLASSES: Tuple[Tuple[str, str], ...] = (
    ("stocks", "Stocks"),
    ("reit", "REIT"),
    ("crypto", "Crypto"),
    ("bonds", "Bonds"),
    ("real_estate", "Real Estate"),
)

ASSET_KEYS = tuple(k for k, _ in ASSET_CLASSES)
ASSET_NAMES = tuple(n for _, n in ASSET_CLASSES)

# Keys used by the persisted-field store for the same inputs
_STORE_KEYS = {
    "initialNetWorth": "initial_net_worth",
    "monthlyContribution": "monthly_contribution",
    "years": "years",
    "stockAllocation": "stock_allocation",
    "reitAllocation": "reit_allocation",
    "cryptoAllocation": "crypto_allocation",
    "bondAllocation": "bond_allocation",
    "realEstateAllocation": "real_estate_allocation",
    "stockCAGR": "stock_cagr",
    "reitCAGR": "reit_cagr",
    "cryptoCAGR": "crypto_cagr",
    "bondCAGR": "bond_cagr",
    "realEstateCAGR": "real_estate_cagr",
    "annualInflationRate": "annual_inflation_rate",
    "initialDate": "initial_date",
    "currentDate": "current_date",
    "currentNetWorth": "current_net_worth",
    "isMonthly": "is_monthly",
    "annualExpenses": "annual_expenses",
    "withdrawalRate": "withdrawal_rate",
    "includeWithdrawals": "include_withdrawals",
    "taxRate": "tax_rate",
    "reinvestExcessAfterFire": "reinvest_surplus",
}


@dataclass(frozen=True)
class AssetClass:
    key: str
    name: str
    allocation: float  # percent, 0..100
    cagr: float        # percent per year, may be <= 0


def _as_date(value) -> date:
    # pandas.Timestamp is a datetime subclass
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


@dataclass(frozen=True)
class SimulationInput:
    initial_net_worth: float = 1000.0
    monthly_contribution: float = 500.0
    years: int = 40

    stock_allocation: float = 50.0
    reit_allocation: float = 10.0
    crypto_allocation: float = 5.0
    bond_allocation: float = 25.0
    real_estate_allocation: float = 10.0

    stock_cagr: float = 7.0
    reit_cagr: float = 8.0
    crypto_cagr: float = 25.0
    bond_cagr: float = 4.0
    real_estate_cagr: float = 6.0

    annual_inflation_rate: float = 3.0
    initial_date: date = field(default_factory=date.today)
    current_date: date = field(default_factory=date.today)
    current_net_worth: float = 1000.0
    is_monthly: bool = True

    annual_expenses: float = 40_000.0
    withdrawal_rate: float = 4.0
    include_withdrawals: bool = False
    tax_rate: float = 0.0
    reinvest_surplus: bool = False

    def __post_init__(self):
        object.__setattr__(self, "initial_date", _as_date(self.initial_date))
        object.__setattr__(self, "current_date", _as_date(self.current_date))

    def allocation_list(self) -> List[float]:
        return [
            self.stock_allocation,
            self.reit_allocation,
            self.crypto_allocation,
            self.bond_allocation,
            self.real_estate_allocation,
        ]

    def cagr_list(self) -> List[float]:
        return [
            self.stock_cagr,
            self.reit_cagr,
            self.crypto_cagr,
            self.bond_cagr,
            self.real_estate_cagr,
        ]

    def allocations(self):
        import numpy as np
        return np.array([a.allocation for a in self.asset_classes()], dtype=float)

    def cagrs(self):
        import numpy as np
        return np.array([a.cagr for a in self.asset_classes()], dtype=float)

    def asset_classes(self) -> List[AssetClass]:
        return [
            AssetClass(key, name, alloc, cagr)
            for (key, name), alloc, cagr in zip(ASSET_CLASSES, self.allocation_list(), self.cagr_list())
        ]

    def horizon_months(self) -> int:
        return int(self.years * 12)

    def replace(self, **changes) -> "SimulationInput":
        return dc_replace(self, **changes)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "SimulationInput":
        """Build an input from already-typed values.

        Accepts the dataclass field names or the camelCase keys of the
        persisted-field store. Unknown keys are ignored; missing keys fall
        back to the defaults.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = _STORE_KEYS.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)
