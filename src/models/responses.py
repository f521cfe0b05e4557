"""Models for chat completion responses.

The upstream schema is not guaranteed, so every field is optional and
unknown fields are ignored.
"""

from typing import Any, Optional

from pydantic import BaseModel


class MessageContent(BaseModel):
    """Message generated by the model."""

    content: Optional[str] = None
    reasoning: Optional[str] = None
    reasoning_content: Optional[str] = None

    @property
    def reasoning_trace(self) -> Optional[str]:
        """Return the first non-empty reasoning trace, if any.

        Providers use either `reasoning` or `reasoning_content` for the
        chain-of-thought text.
        """
        for trace in (self.reasoning, self.reasoning_content):
            if trace:
                return trace
        return None


class Choice(BaseModel):
    """One generated alternative."""

    message: Optional[MessageContent] = None


class Usage(BaseModel):
    """Token usage reported by the service."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class ApiError(BaseModel):
    """Error envelope returned in otherwise successful response."""

    message: Optional[str] = None
    code: Optional[Any] = None


class ChatResponse(BaseModel):
    """Model representing a response from the chat completions endpoint."""

    choices: Optional[list[Choice]] = None
    usage: Optional[Usage] = None
    error: Optional[ApiError] = None

    @property
    def first_choice(self) -> Optional[Choice]:
        """Return the first choice or None when there are no choices."""
        if not self.choices:
            return None
        return self.choices[0]
