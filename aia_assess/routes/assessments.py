# aia_assess/routes/assessments.py
from __future__ import annotations

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Response

from .. import schemas
from ..dependencies import get_catalog
from ..engine.catalog import QuestionCatalog
from ..engine.models import AssessmentReport
from ..engine.orchestrator import analyze, assess, get_questions
from ..settings import get_settings

router = APIRouter(prefix="/api", tags=["assessment"])
settings = get_settings()


@router.post("/analyze", response_model=schemas.AnalysisOut, response_model_exclude_none=True)
def analyze_project(
    body: schemas.AnalyzeIn,
    response: Response,
    catalog: QuestionCatalog = Depends(get_catalog),
):
    response.headers["X-App-Version"] = settings.APP_VERSION
    response.headers["X-Catalog-Version"] = catalog.version

    result = analyze(body.project_name, body.project_description, catalog)
    return schemas.AnalysisOut.from_result(result)


@router.post(
    "/assess",
    response_model=Union[schemas.AssessmentReportOut, schemas.QuestionPromptOut],
)
def assess_project(
    body: schemas.AssessIn,
    response: Response,
    catalog: QuestionCatalog = Depends(get_catalog),
):
    response.headers["X-App-Version"] = settings.APP_VERSION
    response.headers["X-Catalog-Version"] = catalog.version

    raw = [r.model_dump(by_alias=True) for r in body.responses or []]
    out = assess(body.project_name, body.project_description, raw, catalog)
    if isinstance(out, AssessmentReport):
        return schemas.AssessmentReportOut.from_report(out)
    return schemas.QuestionPromptOut.from_prompt(out)


@router.get("/questions", response_model=List[schemas.QuestionOut])
def list_questions(
    category: Optional[str] = None,
    kind: Optional[str] = Query(None, alias="type"),
    catalog: QuestionCatalog = Depends(get_catalog),
):
    return [schemas.QuestionOut.from_question(q) for q in get_questions(catalog, category, kind)]


@router.get("/docs")
def api_docs():
    return {
        "title": settings.API_TITLE,
        "version": settings.APP_VERSION,
        "endpoints": {
            "POST /api/analyze": {
                "description": "Analyze project description and auto-answer questions",
                "body": {
                    "projectName": "string (required)",
                    "projectDescription": "string (required)",
                },
            },
            "POST /api/assess": {
                "description": "Complete AIA assessment with responses",
                "body": {
                    "projectName": "string (required)",
                    "projectDescription": "string (required)",
                    "responses": "array (optional) - [{questionId: string, selectedOption: number}]",
                },
            },
            "GET /api/questions": {
                "description": "Get AIA questions",
                "query": {
                    "category": "string (optional) - Project|System|Algorithm|Decision|Impact|Data|Consultations|De-risking",
                    "type": "string (optional) - risk|mitigation",
                },
            },
        },
    }
