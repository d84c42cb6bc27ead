"""Mark component analysis - weighted totals and weakest-component detection"""

from typing import Dict, List, Optional, Sequence, Tuple

from campus_analytics.domain.models import ComponentDeviation, ComponentScores, MarkEntry, Weightage
from campus_analytics.domain.thresholds import DEFAULT_WEIGHTAGE, PRACTICAL_COMPONENT_MAX
from campus_analytics.utils.numeric import round_half_up, safe

# Fixed order also decides ties for the weakest component
COMPONENTS: List[Tuple[str, str]] = [
    ("test1", "Test 1"),
    ("test2", "Test 2"),
    ("assignment", "Assignment"),
]


def weighted_total(entry: MarkEntry, weightage: Optional[Weightage] = None) -> float:
    """Total = T1*w1 + T2*w2 + A*w3, rounded to 1 decimal"""
    w = weightage or DEFAULT_WEIGHTAGE
    total = (
        safe(entry.test1) * w.test1
        + safe(entry.test2) * w.test2
        + safe(entry.assignment) * w.assignment
    )
    return round_half_up(total, 1)


def get_component_deviation(marks: Optional[Sequence[MarkEntry]]) -> ComponentDeviation:
    """
    Find the class's weakest mark component.

    Each component is averaged only over entries where it was entered, then
    normalized against its practical max: the highest observed value, or 50
    when nothing positive was observed. The lowest percentage among
    components with at least one entry wins; ties keep the earlier one.
    """
    if not marks:
        return ComponentDeviation(
            weak_component="None",
            averages=ComponentScores(),
            percentages=ComponentScores(),
        )

    averages: Dict[str, float] = {}
    percentages: Dict[str, float] = {}
    counts: Dict[str, int] = {}

    for key, _ in COMPONENTS:
        total = 0.0
        count = 0
        practical_max = 0.0
        for entry in marks:
            raw = getattr(entry, key)
            if raw is None:
                continue
            value = safe(raw)
            total += value
            count += 1
            if value > practical_max:
                practical_max = value

        average = total / count if count else 0.0
        averages[key] = average
        percentages[key] = average / (practical_max or PRACTICAL_COMPONENT_MAX) * 100
        counts[key] = count

    weak_component = "None"
    lowest = float("inf")
    for key, label in COMPONENTS:
        if counts[key] > 0 and percentages[key] < lowest:
            lowest = percentages[key]
            weak_component = label

    return ComponentDeviation(
        weak_component=weak_component,
        averages=ComponentScores(**{k: round_half_up(v, 1) for k, v in averages.items()}),
        percentages=ComponentScores(**{k: round_half_up(v, 1) for k, v in percentages.items()}),
    )
