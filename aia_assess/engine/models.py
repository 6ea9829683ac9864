# aia_assess/engine/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Category(str, Enum):
    PROJECT = "Project"
    SYSTEM = "System"
    ALGORITHM = "Algorithm"
    DECISION = "Decision"
    IMPACT = "Impact"
    DATA = "Data"
    CONSULTATIONS = "Consultations"
    DE_RISKING = "De-risking"


class QuestionKind(str, Enum):
    RISK = "risk"
    MITIGATION = "mitigation"


class ImpactLevel(str, Enum):
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class AnswerOption:
    text: str
    score: float


@dataclass(frozen=True)
class Question:
    id: str
    category: Category
    subcategory: str
    text: str
    kind: QuestionKind
    max_score: float
    options: Tuple[AnswerOption, ...]


@dataclass(frozen=True)
class Response:
    """A validated answer. Build through QuestionCatalog.build_response."""
    question_id: str
    selected_option: int
    score: float


@dataclass(frozen=True)
class AssessmentResult:
    raw_impact_score: float
    mitigation_score: float
    current_score: float
    impact_level: ImpactLevel
    impact_level_description: str
    score_percentage: float


@dataclass(frozen=True)
class PartialAssessment:
    result: AssessmentResult
    completion_percentage: float


@dataclass(frozen=True)
class AutoAnsweredQuestion:
    question_id: str
    question: str
    selected_option: int
    selected_option_text: str
    score: float
    confidence: Confidence
    reasoning: str
    matched_rule: str


@dataclass(frozen=True)
class ManualQuestion:
    question_id: str
    category: Category
    subcategory: str
    question: str
    kind: QuestionKind
    options: Tuple[AnswerOption, ...]
    reasoning: str


@dataclass
class AnalysisResult:
    project_name: str
    project_description: str
    auto_answered: list[AutoAnsweredQuestion] = field(default_factory=list)
    needs_manual_input: list[ManualQuestion] = field(default_factory=list)
    completion_percentage: float = 0.0
    partial_assessment: Optional[PartialAssessment] = None


@dataclass(frozen=True)
class QuestionPrompt:
    message: str
    questions: Tuple[Question, ...]


@dataclass(frozen=True)
class AssessmentReport:
    project_name: str
    project_description: str
    responses: Tuple[Response, ...]
    result: AssessmentResult
    timestamp: str
