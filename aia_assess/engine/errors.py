# aia_assess/engine/errors.py


class AssessmentError(Exception):
    """Base class for every failure the engine reports to its callers."""

    code = "ASSESSMENT_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AssessmentError):
    """Missing or malformed required input."""

    code = "VALIDATION_ERROR"


class UnknownQuestionError(AssessmentError):
    code = "UNKNOWN_QUESTION"

    def __init__(self, question_id: str):
        super().__init__(f"Unknown question ID: {question_id}")
        self.question_id = question_id


class InvalidOptionError(AssessmentError):
    code = "INVALID_OPTION"

    def __init__(self, question_id: str, selected_option):
        super().__init__(f"Invalid option {selected_option!r} for question {question_id}")
        self.question_id = question_id
        self.selected_option = selected_option


class ConfigurationError(AssessmentError):
    """
    Catalog invariant violated (duplicate ids, empty options, no risk questions).
    Indicates a broken deployment, not a user error.
    """

    code = "CONFIGURATION_ERROR"
