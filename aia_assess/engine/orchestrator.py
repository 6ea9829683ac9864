# aia_assess/engine/orchestrator.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional, Union

from aia_assess.logging_config import log_event

from .catalog import QuestionCatalog
from .classifier import classify
from .errors import ValidationError
from .models import AnalysisResult, AssessmentReport, PartialAssessment, QuestionPrompt, Response
from .scoring import round2, score

PROMPT_MESSAGE = "Please provide responses to the following questions to complete the assessment:"


def _require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Missing required field: {field_name}")
    return value


def analyze(project_name: str, description: str, catalog: QuestionCatalog) -> AnalysisResult:
    """
    Auto-answer what the description allows and score the partial answer set.
    partial_assessment stays None when nothing could be inferred.
    """
    _require_text(project_name, "projectName")
    _require_text(description, "projectDescription")

    auto_answered, needs_manual = classify(description, catalog)
    out = AnalysisResult(
        project_name=project_name,
        project_description=description,
        auto_answered=auto_answered,
        needs_manual_input=needs_manual,
        completion_percentage=round2(len(auto_answered) / len(catalog) * 100) if len(catalog) else 0.0,
    )

    if auto_answered:
        responses = [catalog.build_response(a.question_id, a.selected_option) for a in auto_answered]
        out.partial_assessment = PartialAssessment(
            result=score(responses, catalog),
            completion_percentage=out.completion_percentage,
        )

    log_event(
        "ANALYZE",
        f"Analyzed project '{project_name}'",
        {
            "auto_answered": len(auto_answered),
            "needs_manual_input": len(needs_manual),
            "impact_level": out.partial_assessment.result.impact_level.value if out.partial_assessment else None,
        },
    )
    return out


def assess(
    project_name: str,
    description: str,
    responses: Optional[Iterable[Mapping[str, Any]]],
    catalog: QuestionCatalog,
    timestamp: Optional[datetime] = None,
) -> Union[QuestionPrompt, AssessmentReport]:
    """
    Full assessment from explicit answers.

    With no responses the caller gets the questionnaire back. Otherwise every
    response is validated first; a single bad entry rejects the whole call.
    """
    _require_text(project_name, "projectName")
    _require_text(description, "projectDescription")

    raw = list(responses or [])
    if not raw:
        return QuestionPrompt(message=PROMPT_MESSAGE, questions=catalog.questions)

    validated: list[Response] = []
    for item in raw:
        if not isinstance(item, Mapping) or "questionId" not in item or "selectedOption" not in item:
            raise ValidationError("Each response needs questionId and selectedOption")
        validated.append(catalog.build_response(item["questionId"], item["selectedOption"]))

    result = score(validated, catalog)
    when = timestamp or datetime.now(timezone.utc)

    log_event(
        "ASSESS",
        f"Assessed project '{project_name}'",
        {
            "responses": len(validated),
            "impact_level": result.impact_level.value,
            "score_percentage": result.score_percentage,
        },
    )
    return AssessmentReport(
        project_name=project_name,
        project_description=description,
        responses=tuple(validated),
        result=result,
        timestamp=when.isoformat(),
    )


def get_questions(catalog: QuestionCatalog, category: Optional[str] = None, kind: Optional[str] = None):
    return catalog.filter(category=category, kind=kind)
