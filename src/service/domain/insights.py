"""
Canned insights feed shown on the monitoring dashboard.
"""
from typing import Any, List

from ...common.exceptions import DatasetError
from ...common.schemas import Insight, BaselineComparison

ALERT_REGION = "JATENG"
ALERT_NOW_MBPS = 15

def regional_throughput(baseline: Any, region: str) -> float:
    """Looks up regional_baseline.<region>.throughput_mbps in the baseline dataset."""
    try:
        value = baseline["regional_baseline"][region]["throughput_mbps"]
    except (KeyError, TypeError) as e:
        raise DatasetError(f"Baseline has no throughput for region {region}") from e
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DatasetError(f"Baseline throughput for region {region} is not a number")
    return value

def build_insights(baseline: Any) -> List[Insight]:
    """
    Builds the insights feed. The alert entry compares current throughput
    against the regional baseline.
    """
    baseline_mbps = regional_throughput(baseline, ALERT_REGION)
    return [
        Insight(
            type="info",
            message="[Roaming Insight] POI Wisatawan Asing Tertinggi: Candi Borobudur (+15% inbound roamer).",
            time="baru saja",
        ),
        Insight(
            type="alert",
            message="[Baseline Alarm] Avg Throughput JATENG turun 40% di bawah baseline.",
            time="2 menit lalu",
            compare=BaselineComparison(
                region=ALERT_REGION,
                now_mbps=ALERT_NOW_MBPS,
                baseline_mbps=baseline_mbps,
            ),
        ),
        Insight(
            type="warning",
            message="Potensi congestion di Denpasar. Kepadatan naik 30%.",
            time="5 menit lalu",
        ),
        Insight(
            type="info",
            message="Region JABAR trafik naik 8% dibanding kemarin.",
            time="7 menit lalu",
        ),
    ]
