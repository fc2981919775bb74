from datetime import date
from typing import List, Optional

from ..config import ASSET_KEYS
from .results import ProjectionPoint


def is_sampled(i: int, total_months: int, monthly: bool) -> bool:
    return monthly or i % 12 == 0 or i == total_months


def make_point(when: date, net_worth: float, balances, deflator: float,
               surplus: float, current_progress: Optional[float] = None) -> ProjectionPoint:
    """A projected sample; every amount is deflated except the observed progress."""
    values = {k: float(v * deflator) for k, v in zip(ASSET_KEYS, balances)}
    return ProjectionPoint(
        date=when,
        net_worth=float(net_worth * deflator),
        nominal_net_worth=float(net_worth),
        current_progress=current_progress,
        reinvested_surplus=float(surplus * deflator),
        **values,
    )


def progress_marker(when: date, current_net_worth: float, balances) -> ProjectionPoint:
    """Overlay point for the reported net worth; balances are left nominal."""
    values = {k: float(v) for k, v in zip(ASSET_KEYS, balances)}
    return ProjectionPoint(
        date=when,
        net_worth=None,
        nominal_net_worth=None,
        current_progress=current_net_worth,
        **values,
    )


def insert_progress_marker(points: List[ProjectionPoint], marker: ProjectionPoint) -> List[ProjectionPoint]:
    """Insert before the first point dated after the marker, else append."""
    out = list(points)
    for idx, p in enumerate(out):
        if p.date > marker.date:
            out.insert(idx, marker)
            return out
    out.append(marker)
    return out
