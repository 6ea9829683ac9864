# aia_assess/engine/catalog.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from .errors import ConfigurationError, InvalidOptionError, UnknownQuestionError
from .models import AnswerOption, Category, Question, QuestionKind, Response
from .question_bank import CATALOG_VERSION, QUESTION_BANK


def _question_from_record(record: Dict[str, Any]) -> Question:
    try:
        return Question(
            id=str(record["id"]),
            category=Category(record["category"]),
            subcategory=str(record.get("subcategory", "")),
            text=str(record["question"]),
            kind=QuestionKind(record["type"]),
            max_score=float(record["maxScore"]),
            options=tuple(
                AnswerOption(text=str(o["text"]), score=float(o["score"]))
                for o in record.get("options") or []
            ),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        rid = record.get("id", "?") if isinstance(record, dict) else record
        raise ConfigurationError(f"Malformed question record {rid!r}: {e}")


class QuestionCatalog:
    """
    Immutable, ordered set of questions.

    Construct one per process (or per test) and pass it to the scoring,
    classification and orchestration functions. Nothing here is global.
    """

    def __init__(self, questions: Iterable[Question], version: str = "custom"):
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._by_id: Dict[str, Question] = {}
        self.version = version

        for q in self._questions:
            if q.id in self._by_id:
                raise ConfigurationError(f"Duplicate question ID: {q.id}")
            if not q.options:
                raise ConfigurationError(f"Question {q.id} has no options")
            if q.max_score < 0:
                raise ConfigurationError(f"Question {q.id} has a negative maxScore")
            if q.kind is QuestionKind.RISK and any(o.score > q.max_score for o in q.options):
                raise ConfigurationError(f"Question {q.id} has an option scored above maxScore")
            self._by_id[q.id] = q

    # ---------- construction ----------
    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]], version: str = "custom") -> "QuestionCatalog":
        return cls((_question_from_record(r) for r in records), version=version)

    @classmethod
    def from_json(cls, path: str | Path) -> "QuestionCatalog":
        """
        Load a catalog file. Accepts either a bare list of question records or
        an object of the form {"version": ..., "questions": [...]}.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Missing catalog file: {path}")
        with path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Catalog file {path} is not valid JSON: {e}")

        if isinstance(data, dict):
            return cls.from_records(data.get("questions") or [], version=str(data.get("version", path.stem)))
        return cls.from_records(data, version=path.stem)

    # ---------- queries ----------
    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self):
        return iter(self._questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def get(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def require(self, question_id: str) -> Question:
        q = self._by_id.get(question_id)
        if q is None:
            raise UnknownQuestionError(question_id)
        return q

    def filter(self, category: str | Category | None = None, kind: str | QuestionKind | None = None) -> Tuple[Question, ...]:
        # exact, case-sensitive match; a value nothing carries just yields ()
        return tuple(
            q for q in self._questions
            if (not category or q.category == category) and (not kind or q.kind == kind)
        )

    def max_score(self, kind: QuestionKind) -> float:
        return sum(q.max_score for q in self._questions if q.kind is kind)

    # ---------- validation ----------
    def build_response(self, question_id: str, selected_option: Any) -> Response:
        """Validate a raw (questionId, selectedOption) pair. Never clamps."""
        q = self.require(question_id)
        if isinstance(selected_option, bool) or not isinstance(selected_option, int):
            raise InvalidOptionError(question_id, selected_option)
        if selected_option < 0 or selected_option >= len(q.options):
            raise InvalidOptionError(question_id, selected_option)
        return Response(
            question_id=q.id,
            selected_option=selected_option,
            score=q.options[selected_option].score,
        )


def default_catalog() -> QuestionCatalog:
    return QuestionCatalog.from_records(QUESTION_BANK, version=CATALOG_VERSION)
