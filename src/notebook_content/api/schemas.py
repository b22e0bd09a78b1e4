from pydantic import BaseModel, ConfigDict, Field


class GenerateNotebookRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    notebook_id: str | None = Field(default=None, alias="notebookId", description="Notebook to populate.")
    file_path: str | None = Field(
        default=None,
        alias="filePath",
        description="Storage path or URL of a file/URL source. Absent for text sources.",
    )
    source_type: str | None = Field(
        default=None,
        alias="sourceType",
        description="Source kind, e.g. pdf/text/website/youtube/audio.",
    )

    def is_complete(self) -> bool:
        return bool(self.notebook_id) and bool(self.source_type)


class GenerateNotebookResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    title: str
    description: str | None = None
    icon: str
    color: str
    example_questions: list[str] = Field(default_factory=list, alias="exampleQuestions")
    message: str = "Notebook content generated successfully"


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    details: str | None = None
    configuration_help: str | None = Field(default=None, alias="configurationHelp")
