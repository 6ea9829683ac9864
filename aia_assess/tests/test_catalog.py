# aia_assess/tests/test_catalog.py
import dataclasses
import json

import pytest

from aia_assess.dependencies import load_catalog
from aia_assess.engine.catalog import QuestionCatalog, default_catalog
from aia_assess.engine.errors import (
    ConfigurationError,
    InvalidOptionError,
    UnknownQuestionError,
)
from aia_assess.engine.models import Category, QuestionKind
from aia_assess.settings import Settings


def record(qid="q1", kind="risk", max_score=2, scores=(0, 1, 2), category="Project"):
    return {
        "id": qid,
        "category": category,
        "subcategory": "Test",
        "question": "Test question?",
        "type": kind,
        "maxScore": max_score,
        "options": [{"text": f"opt {i}", "score": s} for i, s in enumerate(scores)],
    }


# -------------------------
# DEFAULT CATALOG
# -------------------------
def test_default_catalog_shape():
    cat = default_catalog()
    assert len(cat) == 20
    assert cat.max_score(QuestionKind.RISK) == 49
    assert cat.max_score(QuestionKind.MITIGATION) == 18
    assert cat.version == "aia-sample-20"


def test_catalog_records_are_frozen():
    q = default_catalog().get("project_001")
    with pytest.raises(dataclasses.FrozenInstanceError):
        q.max_score = 100


def test_separate_catalogs_coexist():
    a = default_catalog()
    b = QuestionCatalog.from_records([record()], version="tiny")
    assert len(a) == 20 and len(b) == 1
    assert "q1" in b and "q1" not in a


# -------------------------
# INVARIANTS
# -------------------------
def test_duplicate_ids_rejected():
    with pytest.raises(ConfigurationError):
        QuestionCatalog.from_records([record("dup"), record("dup")])


def test_empty_options_rejected():
    with pytest.raises(ConfigurationError):
        QuestionCatalog.from_records([record(scores=())])


def test_risk_option_above_max_rejected():
    with pytest.raises(ConfigurationError):
        QuestionCatalog.from_records([record(max_score=2, scores=(0, 3))])


def test_negative_max_rejected():
    with pytest.raises(ConfigurationError):
        QuestionCatalog.from_records([record(max_score=-1, scores=(-1,))])


def test_non_monotonic_scores_allowed():
    cat = QuestionCatalog.from_records([record(max_score=4, scores=(4, 0, 2))])
    assert [o.score for o in cat.get("q1").options] == [4, 0, 2]


def test_malformed_record_is_configuration_error():
    with pytest.raises(ConfigurationError):
        QuestionCatalog.from_records([record(category="Astrology")])


def test_non_dict_record_is_configuration_error(tmp_path):
    path = tmp_path / "ints.json"
    path.write_text(json.dumps([1]))
    with pytest.raises(ConfigurationError, match="1"):
        QuestionCatalog.from_json(path)


# -------------------------
# FILTERING
# -------------------------
def test_filter_by_category_preserves_order():
    qs = default_catalog().filter(category="Data")
    assert [q.id for q in qs] == ["data_001", "data_002", "data_003"]


def test_filter_by_kind_and_category():
    cat = default_catalog()
    assert len(cat.filter(kind="mitigation")) == 6
    assert [q.id for q in cat.filter(category=Category.CONSULTATIONS, kind="mitigation")] == ["consultation_001"]
    assert cat.filter(category="Consultations", kind="risk") == ()


def test_filter_without_arguments_returns_everything():
    cat = default_catalog()
    assert cat.filter() == cat.questions


def test_filter_unknown_value_matches_nothing():
    cat = default_catalog()
    assert cat.filter(kind="benefit") == ()
    assert cat.filter(category="Astrology") == ()
    # matching is case-sensitive
    assert cat.filter(category="data") == ()


# -------------------------
# RESPONSE VALIDATION
# -------------------------
def test_build_response_derives_score():
    r = default_catalog().build_response("decision_001", 3)
    assert r.score == 8


def test_out_of_range_option():
    # project_003 has two options
    with pytest.raises(InvalidOptionError):
        default_catalog().build_response("project_003", 99)
    with pytest.raises(InvalidOptionError):
        default_catalog().build_response("project_003", -1)


def test_non_integer_option():
    with pytest.raises(InvalidOptionError):
        default_catalog().build_response("project_003", True)
    with pytest.raises(InvalidOptionError):
        default_catalog().build_response("project_003", "1")


def test_unknown_question():
    with pytest.raises(UnknownQuestionError) as ei:
        default_catalog().build_response("nope_001", 0)
    assert ei.value.question_id == "nope_001"


# -------------------------
# LOADING
# -------------------------
def test_from_json_list(tmp_path):
    path = tmp_path / "catalog_v2.json"
    path.write_text(json.dumps([record("a"), record("b", kind="mitigation", category="De-risking")]))
    cat = QuestionCatalog.from_json(path)
    assert [q.id for q in cat] == ["a", "b"]
    assert cat.version == "catalog_v2"


def test_from_json_object_with_version(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"version": "2025.1", "questions": [record()]}))
    assert QuestionCatalog.from_json(path).version == "2025.1"


def test_from_json_missing_or_broken(tmp_path):
    with pytest.raises(ConfigurationError):
        QuestionCatalog.from_json(tmp_path / "absent.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigurationError):
        QuestionCatalog.from_json(bad)


def test_load_catalog_prefers_configured_file(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps([record()]))

    settings = Settings()
    settings.CATALOG_PATH = None
    assert len(load_catalog(settings)) == 20

    settings.CATALOG_PATH = str(path)
    assert [q.id for q in load_catalog(settings)] == ["q1"]
