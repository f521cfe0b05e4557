"""Model with query configuration."""

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    NonNegativeInt,
    PositiveInt,
    SecretStr,
    field_validator,
)

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class QueryConfiguration(ConfigurationBase):
    """Fully resolved configuration of one research query.

    Attributes:
        model: OpenRouter model identifier, ":online" suffix enables web search.
        effort: Reasoning effort hint passed to the model as is.
        system_prompt: Persona/instructions for the model.
        user_query: The question itself.
        max_tokens: Maximum number of tokens in the response.
        timeout: Optional deadline for the whole HTTP exchange, in seconds.
        api_key: OpenRouter API key.
    """

    model: str = constants.DEFAULT_MODEL
    effort: str = constants.DEFAULT_EFFORT
    system_prompt: str = constants.DEFAULT_SYSTEM_PROMPT
    user_query: str
    max_tokens: NonNegativeInt = constants.DEFAULT_MAX_TOKENS
    timeout: Optional[PositiveInt] = None
    api_key: SecretStr

    @field_validator("user_query")
    @classmethod
    def check_user_query(cls, value: str) -> str:
        """Check that the query is not empty; the text itself is kept untouched."""
        if not value.strip():
            raise ValueError("Query can not be empty")
        return value

    @field_validator("api_key")
    @classmethod
    def check_api_key(cls, value: SecretStr) -> SecretStr:
        """Check that the API key is not empty."""
        if not value.get_secret_value():
            raise ValueError("API key can not be empty")
        return value
