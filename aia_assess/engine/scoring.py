# aia_assess/engine/scoring.py
from typing import Iterable, Tuple

from .catalog import QuestionCatalog
from .errors import ConfigurationError
from .models import AssessmentResult, ImpactLevel, QuestionKind, Response

MITIGATION_THRESHOLD = 0.8
MITIGATION_DISCOUNT = 0.85

# (upper bound inclusive, level, description)
IMPACT_BANDS: Tuple[Tuple[float, ImpactLevel, str], ...] = (
    (25.0, ImpactLevel.I, "Little to no impact"),
    (50.0, ImpactLevel.II, "Moderate impact"),
    (75.0, ImpactLevel.III, "High impact"),
)
TOP_BAND = (ImpactLevel.IV, "Very high impact")


def round2(value: float) -> float:
    """
    Two-decimal rounding used for every percentage the engine reports.
    Python's round() is round-half-even on the exact float value, so
    round2(0.125) == 0.12 and round2(0.375) == 0.38.
    """
    return round(value, 2)


def classify_impact(score_percentage: float) -> Tuple[ImpactLevel, str]:
    for upper, level, description in IMPACT_BANDS:
        if score_percentage <= upper:
            return level, description
    return TOP_BAND


def apply_mitigation(raw_impact_score: float, mitigation_score: float, max_mitigation_score: float) -> float:
    """
    Step function: sufficient mitigation (>= 80% of the catalog maximum)
    reduces the effective risk by a flat 15%.
    """
    if mitigation_score >= MITIGATION_THRESHOLD * max_mitigation_score:
        return raw_impact_score * MITIGATION_DISCOUNT
    return raw_impact_score


def score(responses: Iterable[Response], catalog: QuestionCatalog) -> AssessmentResult:
    """
    Aggregate validated responses into an AssessmentResult.

    Responses whose question is not in the catalog are skipped. Maximums are
    catalog-wide, so partial response sets are measured against the full
    questionnaire.
    """
    raw_impact_score = 0.0
    mitigation_score = 0.0
    for r in responses:
        q = catalog.get(r.question_id)
        if q is None:
            continue
        if q.kind is QuestionKind.RISK:
            raw_impact_score += r.score
        elif q.kind is QuestionKind.MITIGATION:
            mitigation_score += r.score

    max_risk_score = catalog.max_score(QuestionKind.RISK)
    max_mitigation_score = catalog.max_score(QuestionKind.MITIGATION)
    if max_risk_score <= 0:
        raise ConfigurationError("Catalog has no risk score to measure against (max risk score is 0)")

    current_score = apply_mitigation(raw_impact_score, mitigation_score, max_mitigation_score)
    score_percentage = round2(current_score / max_risk_score * 100)
    level, description = classify_impact(score_percentage)

    return AssessmentResult(
        raw_impact_score=raw_impact_score,
        mitigation_score=mitigation_score,
        current_score=current_score,
        impact_level=level,
        impact_level_description=description,
        score_percentage=score_percentage,
    )
