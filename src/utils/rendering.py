"""Output of answer text and diagnostics.

The answer goes to stdout and nothing else does, so the output can be piped
to files or other tools. Everything else (progress, reasoning, warnings,
token usage, errors) goes to stderr.
"""

import sys
from typing import Optional

from rich.console import Console

from models.responses import ChatResponse

# text is printed verbatim: no markup, emoji codes, highlighting nor wrapping
diagnostic_console = Console(
    stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True
)


def print_diagnostic(text: str) -> None:
    """Print diagnostic message to stderr."""
    diagnostic_console.print(text)


def print_answer(text: str) -> None:
    """Print answer text followed by newline to stdout."""
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


def format_usage(response: ChatResponse, elapsed: float) -> str:
    """Format token usage and elapsed time summary."""
    seconds = int(elapsed)
    if response.usage is None:
        return f"\n⏱ {seconds}s"
    usage = response.usage
    # counters reported as null are shown as zero
    return (
        f"\n📊 Tokens: {usage.prompt_tokens or 0} prompt + "
        f"{usage.completion_tokens or 0} completion = {usage.total_tokens or 0} total "
        f"| ⏱ {seconds}s"
    )


def render_response(response: ChatResponse, elapsed: float) -> Optional[str]:
    """
    Print successful response.

    The reasoning trace, when present, is printed to stderr before the
    answer. Missing choices or content are reported as warnings only.

    Parameters:
        response (ChatResponse): Parsed response without error envelope.
        elapsed (float): Seconds elapsed since the request started.

    Returns:
        Optional[str]: Answer text printed to stdout, or None when there
        was nothing to print.
    """
    answer: Optional[str] = None
    choice = response.first_choice

    if choice is None:
        print_diagnostic("⚠️ No choices in response")
    elif choice.message is not None:
        trace = choice.message.reasoning_trace
        if trace:
            print_diagnostic(f"\n💭 Reasoning:\n{trace}\n---")

        if choice.message.content is not None:
            answer = choice.message.content
            print_answer(answer)
        else:
            print_diagnostic("⚠️ No content in response")
    else:
        print_diagnostic("⚠️ No content in response")

    print_diagnostic(format_usage(response, elapsed))
    return answer
