"""Unit tests for functions defined in utils/rendering module."""

from models.responses import ChatResponse
from utils.rendering import format_usage, print_answer, print_diagnostic, render_response


def test_print_answer(capsys) -> None:
    """Test that answer is printed verbatim to stdout."""
    print_answer("# Heading\n\n[link](http://x) :smile: *bold*")
    captured = capsys.readouterr()
    assert captured.out == "# Heading\n\n[link](http://x) :smile: *bold*\n"
    assert captured.err == ""


def test_print_diagnostic(capsys) -> None:
    """Test that diagnostics go to stderr without markup processing."""
    print_diagnostic("[bold]not markup[/bold] :smile:")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[bold]not markup[/bold] :smile:\n"


def test_print_diagnostic_long_line_is_not_wrapped(capsys) -> None:
    """Test that long lines are not wrapped."""
    line = " ".join(["word"] * 100)
    print_diagnostic(line)
    assert line in capsys.readouterr().err


def test_format_usage() -> None:
    """Test usage summary."""
    response = ChatResponse.model_validate(
        {"usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12}}
    )
    summary = format_usage(response, 3.7)
    assert "10 prompt + 2 completion = 12 total" in summary
    assert "3s" in summary


def test_format_usage_without_usage() -> None:
    """Test that only elapsed time is reported without usage."""
    summary = format_usage(ChatResponse(), 42.0)
    assert summary.strip() == "⏱ 42s"


def test_format_usage_null_counters() -> None:
    """Test that null usage counters are shown as zero."""
    response = ChatResponse.model_validate(
        {"usage": {"prompt_tokens": 10, "completion_tokens": None, "total_tokens": 12}}
    )
    summary = format_usage(response, 1.0)
    assert "10 prompt + 0 completion = 12 total" in summary


def test_render_response(capsys) -> None:
    """Test rendering of successful response."""
    response = ChatResponse.model_validate(
        {
            "choices": [{"message": {"content": "Paris"}}],
            "usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12},
        }
    )
    assert render_response(response, 1.0) == "Paris"

    captured = capsys.readouterr()
    assert captured.out == "Paris\n"
    assert "10" in captured.err
    assert "2 completion" in captured.err
    assert "12 total" in captured.err
    assert "Paris" not in captured.err


def test_render_response_with_reasoning(capsys) -> None:
    """Test that reasoning trace is printed to stderr before usage."""
    response = ChatResponse.model_validate(
        {
            "choices": [
                {
                    "message": {
                        "content": "Paris",
                        "reasoning_content": "France's capital is well known.",
                    }
                }
            ]
        }
    )
    render_response(response, 1.0)

    captured = capsys.readouterr()
    assert captured.out == "Paris\n"
    assert "Reasoning:\nFrance's capital is well known.\n---" in captured.err
    assert captured.err.index("Reasoning") < captured.err.index("⏱")


def test_render_response_empty_reasoning(capsys) -> None:
    """Test that empty reasoning is not printed."""
    response = ChatResponse.model_validate(
        {"choices": [{"message": {"content": "Paris", "reasoning": ""}}]}
    )
    render_response(response, 1.0)
    assert "Reasoning" not in capsys.readouterr().err


def test_render_response_no_content(capsys) -> None:
    """Test warning for response without content."""
    response = ChatResponse.model_validate({"choices": [{"message": {}}]})
    assert render_response(response, 1.0) is None

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No content in response" in captured.err


def test_render_response_no_message(capsys) -> None:
    """Test warning for choice without message."""
    response = ChatResponse.model_validate({"choices": [{}]})
    assert render_response(response, 1.0) is None
    assert "No content in response" in capsys.readouterr().err


def test_render_response_no_choices(capsys) -> None:
    """Test warning for response without choices."""
    for response in (ChatResponse(), ChatResponse(choices=[])):
        assert render_response(response, 2.0) is None

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No choices in response" in captured.err
        assert "⏱ 2s" in captured.err


def test_render_response_empty_content(capsys) -> None:
    """Test that empty content is still printed as an empty line."""
    response = ChatResponse.model_validate({"choices": [{"message": {"content": ""}}]})
    assert render_response(response, 1.0) == ""
    assert capsys.readouterr().out == "\n"
