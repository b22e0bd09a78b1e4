import pytest

from notebook_content.errors import InvalidResponseFormatError, MissingTitleError
from notebook_content.pipeline.diagnostics import (
    DiagnosticCode,
    classify_downstream_error,
    configuration_help,
)
from notebook_content.pipeline.payload import FileReference, InlineContent, inline_content
from notebook_content.pipeline.result import apply_defaults, parse_generation_response


def test_classify_not_registered() -> None:
    body = '{"code":404,"message":"The requested webhook \\"abc\\" is not registered.","hint":"..."}'
    assert classify_downstream_error(body) is DiagnosticCode.WORKFLOW_NOT_ACTIVE
    assert classify_downstream_error("plain text: not registered") is DiagnosticCode.WORKFLOW_NOT_ACTIVE


def test_classify_other_errors() -> None:
    assert classify_downstream_error('{"message":"Internal error"}') is DiagnosticCode.CONFIGURATION
    assert classify_downstream_error("") is DiagnosticCode.CONFIGURATION


def test_configuration_help_texts_differ() -> None:
    activation = configuration_help(DiagnosticCode.WORKFLOW_NOT_ACTIVE)
    generic = configuration_help(DiagnosticCode.CONFIGURATION)
    assert "Active switch" in activation
    assert "NOTEBOOK_GENERATION_URL" in generic
    assert activation != generic


def test_file_reference_payload() -> None:
    assert FileReference(source_type="youtube", file_path="https://youtu.be/x").as_payload() == {
        "sourceType": "youtube",
        "filePath": "https://youtu.be/x",
    }


def test_inline_content_truncates() -> None:
    source = inline_content("text", "0123456789", char_limit=4)
    assert source == InlineContent(source_type="text", content="0123")
    assert inline_content("text", "", char_limit=4).as_payload() == {"sourceType": "text"}
    assert inline_content("text", None, char_limit=4).as_payload() == {"sourceType": "text"}


def test_parse_requires_output_envelope() -> None:
    for data in (None, [], {}, {"output": None}, {"output": "text"}, {"title": "T"}):
        with pytest.raises(InvalidResponseFormatError):
            parse_generation_response(data)


def test_parse_requires_title() -> None:
    with pytest.raises(MissingTitleError):
        parse_generation_response({"output": {"summary": "S"}})
    with pytest.raises(MissingTitleError):
        parse_generation_response({"output": {"title": ""}})
    with pytest.raises(MissingTitleError):
        parse_generation_response({"output": {}})


def test_apply_defaults() -> None:
    result = parse_generation_response({"output": {"title": "T", "summary": "", "example_questions": None}})
    content = apply_defaults(result, default_icon="📝", default_color="bg-gray-100")
    assert content.as_record() == {
        "title": "T",
        "description": None,
        "icon": "📝",
        "color": "bg-gray-100",
        "example_questions": [],
    }


def test_parse_normalizes_field_types() -> None:
    result = parse_generation_response(
        {
            "output": {
                "title": "T",
                "summary": ["a"],
                "notebook_icon": 5,
                "background_color": {"name": "green"},
                "example_questions": ["Why?", 3, None, {"q": "x"}],
            }
        }
    )
    assert result.summary is None
    assert result.notebook_icon == "5"
    assert result.background_color is None
    assert result.example_questions == ["Why?", "3"]


def test_parse_ignores_non_list_questions() -> None:
    result = parse_generation_response({"output": {"title": "T", "example_questions": "What is it?"}})
    assert result.example_questions == []
