"""Models for chat completion requests."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from models.config import QueryConfiguration


class ChatMessage(BaseModel):
    """One role-tagged message in the conversation."""

    role: Literal["system", "user"] = Field(
        description="Who is speaking: system sets the persona, user asks",
        examples=["user"],
    )
    content: str = Field(
        description="Message text",
        examples=["What is the current population of Tokyo?"],
    )


class Reasoning(BaseModel):
    """Reasoning settings for models that support chain-of-thought."""

    effort: str = Field(
        description="Reasoning effort level, passed to the service as is",
        examples=["low", "medium", "high", "xhigh"],
    )


class ChatRequest(BaseModel):
    """Model representing a request sent to the chat completions endpoint.

    Attributes:
        model: Model identifier.
        messages: System message followed by user message.
        max_tokens: Maximum number of tokens in the response.
        reasoning: Reasoning settings.
    """

    model: str
    messages: list[ChatMessage]
    max_tokens: Optional[int] = None
    reasoning: Optional[Reasoning] = None

    def to_json(self) -> str:
        """Serialize the request into the JSON body, leaving out unset fields."""
        return self.model_dump_json(exclude_none=True)


def build_chat_request(config: QueryConfiguration) -> ChatRequest:
    """Build chat completion request from resolved configuration."""
    return ChatRequest(
        model=config.model,
        messages=[
            ChatMessage(role="system", content=config.system_prompt),
            ChatMessage(role="user", content=config.user_query),
        ],
        max_tokens=config.max_tokens,
        reasoning=Reasoning(effort=config.effort),
    )
