from datetime import date, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Type

from airport_ops.errors import ValidationError
from airport_ops.schemas.enums import FlightStatus, GateStatus
from airport_ops.schemas.stats import DailyTraffic


def traffic_window(days: int, today: date) -> List[date]:
    """``days`` consecutive dates ending at ``today``, oldest first."""
    if days < 1:
        raise ValidationError({"days": "must be greater than or equal to 1"})
    start = today - timedelta(days=days - 1)
    return [start + timedelta(days=i) for i in range(days)]


def build_daily_traffic(window: List[date], flights: Iterable[Tuple[date, str]]) -> List[DailyTraffic]:
    counts = {day: [0, 0] for day in window}
    for departure_date, status in flights:
        bucket = counts.get(departure_date)
        if bucket is None:
            continue
        if status == FlightStatus.arrived.value:
            bucket[0] += 1
        elif status == FlightStatus.departed.value:
            bucket[1] += 1
    return [
        DailyTraffic(date=day.isoformat(), arrivals=arrivals, departures=departures)
        for day, (arrivals, departures) in counts.items()
    ]


def ordered_distribution(counts: Dict[str, int], enum_cls: Type[Enum]) -> Dict[str, int]:
    # enumeration order, zero counts dropped
    return {member.value: counts[member.value] for member in enum_cls if counts.get(member.value)}


def on_time_percentage(flight_distribution: Dict[str, int]) -> int:
    total = sum(flight_distribution.values())
    if total == 0:
        return 0
    scheduled = flight_distribution.get(FlightStatus.scheduled.value, 0)
    # half-up, round() would send 12.5 to 12
    return (scheduled * 200 + total) // (2 * total)


def active_gates(gate_distribution: Dict[str, int]) -> str:
    total = sum(gate_distribution.values())
    available = gate_distribution.get(GateStatus.available.value, 0)
    return f"{total - available}/{total}"
