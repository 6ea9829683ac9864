# aia_assess/schemas.py
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from aia_assess.engine.models import (
    AnalysisResult,
    AssessmentReport,
    AssessmentResult,
    AutoAnsweredQuestion,
    Category,
    Confidence,
    ImpactLevel,
    ManualQuestion,
    Question,
    QuestionKind,
    QuestionPrompt,
)

# empty strings are rejected, the value itself is echoed back untouched
RequiredText = Annotated[str, StringConstraints(min_length=1)]


class CamelModel(BaseModel):
    # wire format is camelCase, python side stays snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- requests ----------
class ResponseIn(CamelModel):
    question_id: str
    selected_option: int


class AnalyzeIn(CamelModel):
    project_name: RequiredText
    project_description: RequiredText


class AssessIn(AnalyzeIn):
    responses: Optional[List[ResponseIn]] = None


# ---------- catalog ----------
class OptionOut(CamelModel):
    text: str
    score: float


class QuestionOut(CamelModel):
    id: str
    category: Category
    subcategory: str
    question: str
    kind: QuestionKind = Field(alias="type")
    max_score: float
    options: List[OptionOut]

    @classmethod
    def from_question(cls, q: Question) -> "QuestionOut":
        return cls(
            id=q.id,
            category=q.category,
            subcategory=q.subcategory,
            question=q.text,
            kind=q.kind,
            max_score=q.max_score,
            options=[OptionOut(text=o.text, score=o.score) for o in q.options],
        )


# ---------- analysis ----------
class AutoAnsweredOut(CamelModel):
    question_id: str
    question: str
    selected_option: int
    selected_option_text: str
    score: float
    confidence: Confidence
    reasoning: str
    matched_rule: str

    @classmethod
    def from_auto(cls, a: AutoAnsweredQuestion) -> "AutoAnsweredOut":
        return cls(
            question_id=a.question_id,
            question=a.question,
            selected_option=a.selected_option,
            selected_option_text=a.selected_option_text,
            score=a.score,
            confidence=a.confidence,
            reasoning=a.reasoning,
            matched_rule=a.matched_rule,
        )


class ManualQuestionOut(CamelModel):
    question_id: str
    category: Category
    subcategory: str
    question: str
    kind: QuestionKind = Field(alias="type")
    options: List[OptionOut]
    reasoning: str

    @classmethod
    def from_manual(cls, m: ManualQuestion) -> "ManualQuestionOut":
        return cls(
            question_id=m.question_id,
            category=m.category,
            subcategory=m.subcategory,
            question=m.question,
            kind=m.kind,
            options=[OptionOut(text=o.text, score=o.score) for o in m.options],
            reasoning=m.reasoning,
        )


class AssessmentResultOut(CamelModel):
    raw_impact_score: float
    mitigation_score: float
    current_score: float
    impact_level: ImpactLevel
    impact_level_description: str
    score_percentage: float

    @staticmethod
    def fields_from(r: AssessmentResult) -> dict:
        return {
            "raw_impact_score": r.raw_impact_score,
            "mitigation_score": r.mitigation_score,
            "current_score": r.current_score,
            "impact_level": r.impact_level,
            "impact_level_description": r.impact_level_description,
            "score_percentage": r.score_percentage,
        }


class PartialAssessmentOut(AssessmentResultOut):
    completion_percentage: float


class AnalysisOut(CamelModel):
    project_name: str
    project_description: str
    auto_answered: List[AutoAnsweredOut] = Field(default_factory=list)
    needs_manual_input: List[ManualQuestionOut] = Field(default_factory=list)
    completion_percentage: float = 0.0
    partial_assessment: Optional[PartialAssessmentOut] = None

    @classmethod
    def from_result(cls, res: AnalysisResult) -> "AnalysisOut":
        partial = None
        if res.partial_assessment is not None:
            partial = PartialAssessmentOut(
                **AssessmentResultOut.fields_from(res.partial_assessment.result),
                completion_percentage=res.partial_assessment.completion_percentage,
            )
        return cls(
            project_name=res.project_name,
            project_description=res.project_description,
            auto_answered=[AutoAnsweredOut.from_auto(a) for a in res.auto_answered],
            needs_manual_input=[ManualQuestionOut.from_manual(m) for m in res.needs_manual_input],
            completion_percentage=res.completion_percentage,
            partial_assessment=partial,
        )


# ---------- assessment ----------
class PromptQuestionOut(CamelModel):
    # questionnaire view for clients, scoring ceilings stay server-side
    id: str
    category: Category
    subcategory: str
    question: str
    kind: QuestionKind = Field(alias="type")
    options: List[OptionOut]

    @classmethod
    def from_question(cls, q: Question) -> "PromptQuestionOut":
        return cls(
            id=q.id,
            category=q.category,
            subcategory=q.subcategory,
            question=q.text,
            kind=q.kind,
            options=[OptionOut(text=o.text, score=o.score) for o in q.options],
        )


class QuestionPromptOut(CamelModel):
    message: str
    questions: List[PromptQuestionOut]

    @classmethod
    def from_prompt(cls, p: QuestionPrompt) -> "QuestionPromptOut":
        return cls(message=p.message, questions=[PromptQuestionOut.from_question(q) for q in p.questions])


class ResponseOut(CamelModel):
    question_id: str
    selected_option: int
    score: float


class AssessmentReportOut(AssessmentResultOut):
    project_name: str
    project_description: str
    responses: List[ResponseOut]
    timestamp: str

    @classmethod
    def from_report(cls, rep: AssessmentReport) -> "AssessmentReportOut":
        return cls(
            project_name=rep.project_name,
            project_description=rep.project_description,
            responses=[
                ResponseOut(question_id=r.question_id, selected_option=r.selected_option, score=r.score)
                for r in rep.responses
            ],
            timestamp=rep.timestamp,
            **AssessmentResultOut.fields_from(rep.result),
        )
