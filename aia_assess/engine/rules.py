# aia_assess/engine/rules.py
#
# Decision table for auto-answering questions from free text.
# Patterns are plain substring/alternation regexes (no word boundaries);
# changing their granularity changes classification outcomes.
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Pattern, Tuple

from .models import Confidence


@dataclass(frozen=True)
class RuleBinding:
    rule: str
    selected_option: int
    confidence: Confidence
    reasoning: str


def _rx(pattern: str) -> Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


DETECTION_RULES: Dict[str, Pattern[str]] = {
    # ---------- populations / scrutiny ----------
    "vulnerablePopulations": _rx(
        r"vulnerable|children|minors|youth|elderly|seniors|disabilit|indigenous|refugee|low-income"
    ),
    "publicScrutiny": _rx(r"litigation|lawsuit|public scrutiny|controversial|media attention|court challenge"),

    # ---------- explainability ----------
    "blackBox": _rx(
        r"black box|black-box|not explainable|unexplainable|cannot be explained|deep learning|neural network"
    ),
    "explainable": _rx(r"explainable|interpretable|transparent logic|rule-based|rules-based|decision tree"),

    # ---------- who built it ----------
    "jointDeveloped": _rx(r"co-developed|jointly developed|developed in partnership|in collaboration with"),
    "thirdPartyDeveloped": _rx(
        r"third[- ]party|vendor|contractor|outsourc|external (company|provider|supplier|firm)"
        r"|commercial (product|solution|off-the-shelf)|purchased from|licensed from"
    ),
    "otherDepartmentDeveloped": _rx(r"another department|other department|shared services|another agency"),
    "internalDeveloped": _rx(
        r"in-house|in house|developed internally|internally developed|built internally|our own team|internal team"
    ),

    # ---------- learning ----------
    "staticModel": _rx(
        r"does not continue to learn|doesn't continue to learn|does not learn|no longer learns"
        r"|static model|frozen model|not retrained"
    ),
    "continuousLearning": _rx(
        r"continues to learn|continue to learn|continuously learn|continuous learning|online learning"
        r"|self-learning|learns from new data|retrained automatically|automatically retrained"
    ),
    "limitedOversightLearning": _rx(r"unsupervised|without oversight|minimal oversight|limited oversight"),
    "machineLearning": _rx(
        r"machine learning|machine-learning|artificial intelligence|neural network|deep learning"
        r"|predictive model|trained model|classifier"
    ),
    "ruleBased": _rx(r"rule-based|rules-based|business rules|deterministic rules|decision tree"),

    # ---------- automation ----------
    "fullAutomation": _rx(
        r"fully automated|fully-automated|full automation"
        r"|without human (intervention|involvement|review|oversight)"
        r"|no human (intervention|involvement|review|in the loop)"
        r"|automatically (approve|deny|reject|decide|grant|issue)"
    ),
    "partialAutomation": _rx(
        r"human oversight|human-in-the-loop|human in the loop|semi-automated|partially automated"
        r"|with oversight from"
    ),
    "humanReview": _rx(
        r"human review|reviewed by (a |an )?(human|officer|caseworker|staff|analyst)"
        r"|officer reviews|manual review"
    ),
    "decisionSupport": _rx(
        r"recommendation|recommends|decision support|decision-support|assists? (staff|officers|caseworkers)"
        r"|final decision (is )?made by"
    ),

    # ---------- impacts ----------
    "safetyImpact": _rx(
        r"liberty|detention|parole|policing|law enforcement|criminal|physical safety|immigration|border|child welfare"
    ),
    "economicImpact": _rx(
        r"benefit|loan|credit|taxation|tax return|employment|hiring|eligibility|funding|grant|payment|pension"
    ),
    "irreversibleImpact": _rx(r"irreversible|cannot be reversed|cannot be undone|permanent"),
    "reversibleImpact": _rx(r"reversible|can be reversed|can be undone|can be corrected"),

    # ---------- data ----------
    "noPersonalData": _rx(
        r"no personal (data|information)|does not (use|collect) personal|without personal (data|information)"
    ),
    "sensitiveData": _rx(
        r"health|medical|biometric|criminal record|genetic|sexual orientation|religio|ethnic|financial record"
    ),
    "personalData": _rx(
        r"personal (data|information)|personally identifiable|pii|date of birth|home address|names and addresses"
    ),
    "anonymizedData": _rx(r"anonymi[sz]ed|de-identified|aggregated data|aggregate data"),
    "externalData": _rx(
        r"third-party data|external data|data broker|social media|publicly available data|scraped|web data"
    ),

    # ---------- consultation ----------
    "noConsultation": _rx(r"no consultation|not consulted|without consult|no stakeholder"),
    "extensiveConsultation": _rx(
        r"extensive(ly)? consult|public consultation|community engagement|consulted (widely|extensively)|town hall"
    ),
    "consultation": _rx(r"consult|stakeholder|engaged with|engagement with|focus group|user research"),

    # ---------- de-risking ----------
    "biasTesting": _rx(
        r"bias (testing|audit|detection|mitigation)|fairness (testing|audit|assessment)"
        r"|audited for bias|tested for bias|disparate impact"
    ),
    "qualityChecks": _rx(r"data quality|quality checks|quality assurance|data validation|validation checks"),
    "appealProcess": _rx(r"appeal|recourse|contest the decision|request a review|redress"),
    "privacyAssessment": _rx(r"privacy impact assessment|pia completed|privacy assessment"),
    "privacyReview": _rx(r"privacy review|privacy by design|privacy officer"),
    "monitoring": _rx(r"monitor|audit trail|audit log|periodic review|periodic audit"),
    "transparencyNotice": _rx(
        r"notif(y|ied|ies|ication)|notice to (clients|individuals|applicants|users)|plain language"
        r"|informed that"
    ),
}


def _b(rule: str, option: int, confidence: Confidence, reasoning: str) -> RuleBinding:
    return RuleBinding(rule, option, confidence, reasoning)


H, M, L = Confidence.HIGH, Confidence.MEDIUM, Confidence.LOW

# question id -> bindings in priority order (first match wins)
QUESTION_RULES: Dict[str, Tuple[RuleBinding, ...]] = {
    "project_001": (
        _b("vulnerablePopulations", 2, L, "Description mentions vulnerable populations"),
    ),
    "project_003": (
        _b("publicScrutiny", 1, M, "Description mentions litigation or public scrutiny"),
    ),
    "system_001": (
        _b("blackBox", 3, M, "Description indicates decisions cannot be explained"),
        _b("explainable", 0, M, "Description indicates an explainable or rule-based system"),
    ),
    "system_002": (
        _b("jointDeveloped", 2, M, "Description indicates joint development with external partners"),
        _b("thirdPartyDeveloped", 3, H, "Description indicates the system is developed by a third party"),
        _b("otherDepartmentDeveloped", 1, M, "Description indicates another department developed the system"),
        _b("internalDeveloped", 0, H, "Description indicates the system is developed internally"),
    ),
    "algorithm_001": (
        _b("limitedOversightLearning", 2, L, "Machine learning with limited oversight detected"),
        _b("machineLearning", 1, M, "Machine learning detected; human oversight assumed"),
        _b("ruleBased", 0, M, "Rule-based system does not learn through use"),
    ),
    "algorithm_002": (
        _b("staticModel", 0, M, "Description states the model does not keep learning"),
        _b("continuousLearning", 1, M, "Description indicates the algorithm continues to learn"),
    ),
    "decision_001": (
        _b("fullAutomation", 3, H, "Description indicates fully automated decisions"),
        _b("partialAutomation", 2, M, "System decides with human oversight"),
        _b("humanReview", 1, M, "A human reviews system decisions before they take effect"),
        _b("decisionSupport", 0, M, "System provides recommendations; a human makes the final decision"),
    ),
    "impact_001": (
        _b("safetyImpact", 2, L, "Decision area touches liberty, security or safety"),
    ),
    "impact_002": (
        _b("economicImpact", 2, L, "Decision affects benefits, credit or other economic interests"),
    ),
    "impact_003": (
        _b("irreversibleImpact", 3, M, "Description indicates impacts are irreversible"),
        _b("reversibleImpact", 1, L, "Description indicates impacts can be reversed"),
    ),
    "data_001": (
        _b("noPersonalData", 0, H, "Description states no personal information is used"),
        _b("sensitiveData", 3, M, "Sensitive categories of personal information detected"),
        _b("personalData", 1, M, "Personal information detected"),
        _b("anonymizedData", 0, L, "Only anonymized or aggregated data mentioned"),
    ),
    "data_003": (
        _b("externalData", 1, M, "Description mentions external or unstructured data sources"),
    ),
    "consultation_001": (
        _b("noConsultation", 0, M, "Description states no consultations were held"),
        _b("extensiveConsultation", 3, M, "Extensive public or community consultation mentioned"),
        _b("consultation", 1, L, "Some stakeholder consultation mentioned"),
    ),
    "mitigation_001": (
        _b("biasTesting", 3, M, "Bias detection or fairness testing mentioned"),
        _b("qualityChecks", 1, L, "Data quality checks mentioned"),
    ),
    "mitigation_002": (
        _b("appealProcess", 2, M, "An appeal or recourse process is mentioned"),
    ),
    "mitigation_003": (
        _b("privacyAssessment", 2, H, "A privacy impact assessment is mentioned"),
        _b("privacyReview", 1, M, "A privacy review is mentioned"),
    ),
    "mitigation_004": (
        _b("monitoring", 1, L, "Monitoring or auditing of outcomes is mentioned"),
    ),
    "mitigation_005": (
        _b("transparencyNotice", 1, M, "Affected individuals are notified of the automated decision"),
    ),
}


def bindings_for(question_id: str) -> Tuple[RuleBinding, ...]:
    return QUESTION_RULES.get(question_id, ())


def first_match(question_id: str, normalized_text: str) -> RuleBinding | None:
    for binding in bindings_for(question_id):
        if DETECTION_RULES[binding.rule].search(normalized_text):
            return binding
    return None
