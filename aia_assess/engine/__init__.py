# aia_assess/engine/__init__.py
from .catalog import QuestionCatalog, default_catalog
from .classifier import classify
from .scoring import score, classify_impact, round2
from .orchestrator import analyze, assess, get_questions
