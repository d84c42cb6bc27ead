"""Plain-language class insights derived from student risk profiles"""

from typing import List, Optional, Sequence

from campus_analytics.domain.models import RiskProfile

DECLINING_MESSAGE_ABOVE = 3
IMPROVING_MESSAGE_ABOVE = 5


def generate_class_insights(profiles: Optional[Sequence[RiskProfile]]) -> List[str]:
    """
    Summarize a class's risk profiles into short advisory messages.

    - any High risk profile: intervention warning
    - more than 3 declining performers: decline notice
    - more than 5 improving performers: momentum notice
    """
    insights: List[str] = []
    if not profiles:
        return insights

    high_risk = sum(1 for p in profiles if p.risk_level == "High")
    declining = sum(1 for p in profiles if p.trends.performance == "Declining")
    improving = sum(1 for p in profiles if p.trends.performance == "Improving")

    if high_risk > 0:
        insights.append(
            f"{high_risk} students are in the High risk zone. Immediate intervention advised."
        )
    if declining > DECLINING_MESSAGE_ABOVE:
        insights.append(f"Performance is declining for {declining} students.")
    if improving > IMPROVING_MESSAGE_ABOVE:
        insights.append(f"Momentum! {improving} students are showing consistent improvement.")
    return insights
