# aia_assess/engine/question_bank.py
#
# Sample of the Algorithmic Impact Assessment questionnaire.
# Records use the same shape as catalog JSON files (see QuestionCatalog.from_json).

CATALOG_VERSION = "aia-sample-20"

QUESTION_BANK = [
    # ---------- Risk: Project ----------
    {
        "id": "project_001",
        "category": "Project",
        "subcategory": "Risk Profile",
        "question": "Will the system be used to make decisions about vulnerable populations "
                    "(e.g., children, elderly, persons with disabilities)?",
        "type": "risk",
        "maxScore": 4,
        "options": [
            {"text": "No", "score": 0},
            {"text": "Yes, but with limited impact", "score": 1},
            {"text": "Yes, with moderate impact", "score": 2},
            {"text": "Yes, with significant impact", "score": 4},
        ],
    },
    {
        "id": "project_002",
        "category": "Project",
        "subcategory": "Risk Profile",
        "question": "Could the system result in discrimination or unfair treatment of individuals or groups?",
        "type": "risk",
        "maxScore": 4,
        "options": [
            {"text": "Very unlikely", "score": 0},
            {"text": "Unlikely", "score": 1},
            {"text": "Possible", "score": 2},
            {"text": "Likely", "score": 4},
        ],
    },
    {
        "id": "project_003",
        "category": "Project",
        "subcategory": "Risk Profile",
        "question": "Is the project within an area of intense public scrutiny and/or frequent litigation?",
        "type": "risk",
        "maxScore": 2,
        "options": [
            {"text": "No", "score": 0},
            {"text": "Yes", "score": 2},
        ],
    },

    # ---------- Risk: System ----------
    {
        "id": "system_001",
        "category": "System",
        "subcategory": "About the System",
        "question": "Is the system a black box (i.e., decisions cannot be explained)?",
        "type": "risk",
        "maxScore": 3,
        "options": [
            {"text": "No, fully explainable", "score": 0},
            {"text": "Partially explainable", "score": 1},
            {"text": "Limited explainability", "score": 2},
            {"text": "Not explainable (black box)", "score": 3},
        ],
    },
    {
        "id": "system_002",
        "category": "System",
        "subcategory": "About the System",
        "question": "Who developed the system?",
        "type": "risk",
        "maxScore": 3,
        "options": [
            {"text": "Internal government team", "score": 0},
            {"text": "Another government department", "score": 1},
            {"text": "Government and external partners jointly", "score": 2},
            {"text": "Non-government third party", "score": 3},
        ],
    },

    # ---------- Risk: Algorithm ----------
    {
        "id": "algorithm_001",
        "category": "Algorithm",
        "subcategory": "About the Algorithm",
        "question": "Does the algorithm learn and evolve through use (machine learning)?",
        "type": "risk",
        "maxScore": 2,
        "options": [
            {"text": "No", "score": 0},
            {"text": "Yes, with human oversight", "score": 1},
            {"text": "Yes, with limited oversight", "score": 2},
        ],
    },
    {
        "id": "algorithm_002",
        "category": "Algorithm",
        "subcategory": "About the Algorithm",
        "question": "Does the algorithm continue to learn after it has been deployed?",
        "type": "risk",
        "maxScore": 2,
        "options": [
            {"text": "No", "score": 0},
            {"text": "Yes", "score": 2},
        ],
    },

    # ---------- Risk: Decision ----------
    {
        "id": "decision_001",
        "category": "Decision",
        "subcategory": "About the Decision",
        "question": "What is the level of human involvement in the decision-making process?",
        "type": "risk",
        "maxScore": 8,
        "options": [
            {"text": "Human makes final decision with system recommendation", "score": 0},
            {"text": "Human reviews system decision before implementation", "score": 2},
            {"text": "System makes decision with human oversight", "score": 4},
            {"text": "Fully automated decision-making", "score": 8},
        ],
    },

    # ---------- Risk: Impact ----------
    {
        "id": "impact_001",
        "category": "Impact",
        "subcategory": "Impact Assessment",
        "question": "Could the decision impact an individual's liberty, security, or physical safety?",
        "type": "risk",
        "maxScore": 5,
        "options": [
            {"text": "No impact", "score": 0},
            {"text": "Minor impact", "score": 1},
            {"text": "Moderate impact", "score": 3},
            {"text": "Significant impact", "score": 5},
        ],
    },
    {
        "id": "impact_002",
        "category": "Impact",
        "subcategory": "Impact Assessment",
        "question": "Could the decision significantly impact an individual's economic interests?",
        "type": "risk",
        "maxScore": 4,
        "options": [
            {"text": "No economic impact", "score": 0},
            {"text": "Minor economic impact", "score": 1},
            {"text": "Moderate economic impact", "score": 2},
            {"text": "Significant economic impact", "score": 4},
        ],
    },
    {
        "id": "impact_003",
        "category": "Impact",
        "subcategory": "Impact Assessment",
        "question": "How reversible are the impacts of the decision?",
        "type": "risk",
        "maxScore": 4,
        "options": [
            {"text": "Easily reversible", "score": 0},
            {"text": "Likely reversible", "score": 1},
            {"text": "Difficult to reverse", "score": 2},
            {"text": "Irreversible", "score": 4},
        ],
    },

    # ---------- Risk: Data ----------
    {
        "id": "data_001",
        "category": "Data",
        "subcategory": "About the Data",
        "question": "Does the system use personal information?",
        "type": "risk",
        "maxScore": 3,
        "options": [
            {"text": "No personal information", "score": 0},
            {"text": "Non-sensitive personal information", "score": 1},
            {"text": "Sensitive personal information", "score": 2},
            {"text": "Highly sensitive personal information", "score": 3},
        ],
    },
    {
        "id": "data_002",
        "category": "Data",
        "subcategory": "About the Data",
        "question": "What is the quality and representativeness of the training data?",
        "type": "risk",
        "maxScore": 3,
        "options": [
            {"text": "High quality, representative data", "score": 0},
            {"text": "Good quality, mostly representative", "score": 1},
            {"text": "Moderate quality, some gaps", "score": 2},
            {"text": "Poor quality or unrepresentative data", "score": 3},
        ],
    },
    {
        "id": "data_003",
        "category": "Data",
        "subcategory": "About the Data",
        "question": "Will the system use data collected from external or unstructured sources?",
        "type": "risk",
        "maxScore": 2,
        "options": [
            {"text": "No", "score": 0},
            {"text": "Yes", "score": 2},
        ],
    },

    # ---------- Mitigation: Consultations ----------
    {
        "id": "consultation_001",
        "category": "Consultations",
        "subcategory": "About the Consultations",
        "question": "Have you consulted with affected communities or stakeholders?",
        "type": "mitigation",
        "maxScore": 3,
        "options": [
            {"text": "No consultations conducted", "score": 0},
            {"text": "Limited consultations", "score": 1},
            {"text": "Moderate consultations", "score": 2},
            {"text": "Extensive consultations", "score": 3},
        ],
    },

    # ---------- Mitigation: De-risking ----------
    {
        "id": "mitigation_001",
        "category": "De-risking",
        "subcategory": "Data Quality",
        "question": "Are there processes in place to ensure data quality and reduce bias?",
        "type": "mitigation",
        "maxScore": 4,
        "options": [
            {"text": "No specific processes", "score": 0},
            {"text": "Basic quality checks", "score": 1},
            {"text": "Regular quality assurance", "score": 2},
            {"text": "Comprehensive bias detection and mitigation", "score": 4},
        ],
    },
    {
        "id": "mitigation_002",
        "category": "De-risking",
        "subcategory": "Procedural Fairness",
        "question": "Is there a clear recourse process for individuals affected by decisions?",
        "type": "mitigation",
        "maxScore": 4,
        "options": [
            {"text": "No recourse process", "score": 0},
            {"text": "Limited recourse options", "score": 1},
            {"text": "Clear recourse process", "score": 3},
            {"text": "Comprehensive appeal and review process", "score": 4},
        ],
    },
    {
        "id": "mitigation_003",
        "category": "De-risking",
        "subcategory": "Privacy",
        "question": "Have privacy impact assessments been completed?",
        "type": "mitigation",
        "maxScore": 3,
        "options": [
            {"text": "No privacy assessment", "score": 0},
            {"text": "Basic privacy review", "score": 1},
            {"text": "Privacy impact assessment completed", "score": 2},
            {"text": "Comprehensive privacy protection measures", "score": 3},
        ],
    },
    {
        "id": "mitigation_004",
        "category": "De-risking",
        "subcategory": "Monitoring",
        "question": "Will the system's outcomes be monitored for unintended effects?",
        "type": "mitigation",
        "maxScore": 2,
        "options": [
            {"text": "No monitoring planned", "score": 0},
            {"text": "Occasional monitoring", "score": 1},
            {"text": "Continuous monitoring with periodic audits", "score": 2},
        ],
    },
    {
        "id": "mitigation_005",
        "category": "De-risking",
        "subcategory": "Transparency",
        "question": "Will affected individuals be notified that an automated system is involved in the decision?",
        "type": "mitigation",
        "maxScore": 2,
        "options": [
            {"text": "No", "score": 0},
            {"text": "Yes", "score": 2},
        ],
    },
]
