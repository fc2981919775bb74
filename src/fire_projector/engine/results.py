from dataclasses import asdict, dataclass
from datetime import date
from typing import Dict, List, Optional

import pandas as pd

from ..config import ASSET_KEYS, ASSET_NAMES


@dataclass(frozen=True)
class ProjectionPoint:
    date: date
    net_worth: Optional[float]           # today's money; None on the progress marker
    nominal_net_worth: Optional[float]
    stocks: float
    reit: float
    crypto: float
    bonds: float
    real_estate: float
    current_progress: Optional[float] = None
    reinvested_surplus: Optional[float] = None

    @property
    def is_progress_marker(self) -> bool:
        return self.net_worth is None

    @property
    def balances(self) -> Dict[str, float]:
        return {name: getattr(self, key) for key, name in zip(ASSET_KEYS, ASSET_NAMES)}


@dataclass(frozen=True)
class AssetGrowthSummary:
    name: str
    value: float


@dataclass(frozen=True)
class ProjectionResult:
    points: List[ProjectionPoint]
    independence_date: Optional[date]
    asset_growth: List[AssetGrowthSummary]
    total_months: int
    target_net_worth: float

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame([asdict(p) for p in self.points])
        if df.empty:
            return df
        df["date"] = pd.to_datetime(df["date"])
        return df.set_index("date")

    def asset_growth_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(a) for a in self.asset_growth]).set_index("name")
