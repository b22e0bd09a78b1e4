from typing import Any

from notebook_content.pipeline.diagnostics import classify_downstream_error, configuration_help


class NotebookContentError(Exception):
    """Handler failure that maps onto a JSON error response."""

    status_code = 500

    def __init__(self, error: str, details: str | None = None, configuration_help: str | None = None) -> None:
        super().__init__(error)
        self.error = error
        self.details = details
        self.configuration_help = configuration_help

    def as_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        if self.configuration_help is not None:
            payload["configurationHelp"] = self.configuration_help
        return payload


class MissingInputError(NotebookContentError):
    status_code = 400

    def __init__(self) -> None:
        super().__init__("notebookId and sourceType are required")


class ConfigurationMissingError(NotebookContentError):
    def __init__(self, missing: list[str]) -> None:
        names = " and/or ".join(missing)
        super().__init__(
            "Web service configuration missing",
            details=f"Required environment variables {names} are missing from the service environment.",
            configuration_help=(
                "Please set these variables in the service environment (or its .env file) "
                "and restart the service."
            ),
        )
        self.missing = missing


class GenerationServiceError(NotebookContentError):
    """Non-2xx answer from the generation service."""

    def __init__(self, status_code: int, body: str) -> None:
        self.diagnostic = classify_downstream_error(body)
        super().__init__(
            "Failed to generate content from web service",
            details=body,
            configuration_help=configuration_help(self.diagnostic),
        )
        self.upstream_status = status_code
        self.body = body


class InvalidResponseFormatError(NotebookContentError):
    def __init__(self) -> None:
        super().__init__("Invalid response format from web service")


class MissingTitleError(NotebookContentError):
    def __init__(self) -> None:
        super().__init__("No title in response from web service")


class NotebookUpdateError(NotebookContentError):
    def __init__(self) -> None:
        super().__init__("Failed to update notebook")
