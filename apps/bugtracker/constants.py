# apps/bugtracker/constants.py
# Shared between the endpoint and the form. No Django imports here so the
# client side (client.py, report_form.py) works without a settings module.

TITLE_MAX_LENGTH = 100

SEVERITY_LOW = "low"
SEVERITY_MEDIUM = "medium"
SEVERITY_HIGH = "high"
SEVERITIES = (SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH)
DEFAULT_SEVERITY = SEVERITY_MEDIUM

DRAFT_FIELDS = ("title", "description", "severity")
INITIAL_DRAFT = {"title": "", "description": "", "severity": DEFAULT_SEVERITY}

# ---- wire contract ----
API_PATH = "/api/bug-reports"
REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "X-Requested-With": "XMLHttpRequest",
}

# ---- server messages ----
CREATED_MESSAGE = "Bug reported successfully!"
INVALID_DATA_MESSAGE = "The given data was invalid."
TITLE_FIELD_REQUIRED = "The title field is required."
TITLE_TOO_LONG = f"The title must not be greater than {TITLE_MAX_LENGTH} characters."
TITLE_NOT_STRING = "The title must be a string."
DESCRIPTION_NOT_STRING = "The description must be a string."
SEVERITY_INVALID = "The selected severity is invalid."

# ---- form messages ----
TITLE_REQUIRED = "Title is required."
SUCCESS_MESSAGE = "Bug reported!"
GENERAL_ERROR = "An error occurred. Please try again."
SUBMIT_LABEL = "Report Bug"
SUBMITTING_LABEL = "Submitting..."
