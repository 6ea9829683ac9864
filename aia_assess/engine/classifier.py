# aia_assess/engine/classifier.py
from __future__ import annotations

import re
from typing import List, Tuple

from .catalog import QuestionCatalog
from .models import AutoAnsweredQuestion, ManualQuestion, Question
from .rules import first_match

MANUAL_INPUT_REASONING = "Could not be determined from the project description; manual input required"

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Lower-case and collapse whitespace so multi-word patterns survive line breaks."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def _manual(q: Question) -> ManualQuestion:
    return ManualQuestion(
        question_id=q.id,
        category=q.category,
        subcategory=q.subcategory,
        question=q.text,
        kind=q.kind,
        options=q.options,
        reasoning=MANUAL_INPUT_REASONING,
    )


def classify(text: str | None, catalog: QuestionCatalog) -> Tuple[List[AutoAnsweredQuestion], List[ManualQuestion]]:
    """
    Infer answers from free text.

    Each question is tried against its bound rules in priority order; the first
    match answers it. Unbound or unmatched questions are returned for manual
    input. Both lists follow catalog order.
    """
    normalized = normalize_text(text)
    auto_answered: List[AutoAnsweredQuestion] = []
    needs_manual: List[ManualQuestion] = []

    for q in catalog:
        binding = first_match(q.id, normalized) if normalized else None
        # bindings pointing past the options of a replacement catalog are ignored
        if binding is None or binding.selected_option >= len(q.options):
            needs_manual.append(_manual(q))
            continue

        option = q.options[binding.selected_option]
        auto_answered.append(
            AutoAnsweredQuestion(
                question_id=q.id,
                question=q.text,
                selected_option=binding.selected_option,
                selected_option_text=option.text,
                score=option.score,
                confidence=binding.confidence,
                reasoning=binding.reasoning,
                matched_rule=binding.rule,
            )
        )

    return auto_answered, needs_manual
