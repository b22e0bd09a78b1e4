from enum import Enum


class DiagnosticCode(str, Enum):
    """Known failure signatures of the generation service."""

    WORKFLOW_NOT_ACTIVE = "workflow_not_active"
    CONFIGURATION = "configuration"


NOT_REGISTERED_MARKER = "not registered"

_CONFIGURATION_HELP = {
    DiagnosticCode.WORKFLOW_NOT_ACTIVE: (
        "The n8n workflow webhook is not active. Please activate the "
        '"InsightsLM - Generate Notebook Details" workflow in your n8n instance by toggling '
        "the Active switch in the top-right corner of the workflow editor."
    ),
    DiagnosticCode.CONFIGURATION: (
        "Please ensure your n8n workflows are active and properly configured. Check that the "
        "NOTEBOOK_GENERATION_URL points to an active n8n workflow webhook."
    ),
}


def classify_downstream_error(body: str) -> DiagnosticCode:
    # n8n answers 404 with "... webhook ... is not registered" for inactive workflows
    if NOT_REGISTERED_MARKER in (body or ""):
        return DiagnosticCode.WORKFLOW_NOT_ACTIVE
    return DiagnosticCode.CONFIGURATION


def configuration_help(code: DiagnosticCode) -> str:
    return _CONFIGURATION_HELP[code]
