"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from models.config import QueryConfiguration


@pytest.fixture(name="query_configuration")
def query_configuration_fixture() -> QueryConfiguration:
    """Query configuration with default values."""
    return QueryConfiguration(
        user_query="What is the capital of France?",
        api_key=SecretStr("sk-or-v1-test"),
    )


@pytest.fixture(name="mock_http_response")
def mock_http_response_fixture(mocker):
    """Prepare factory for mocked HTTP responses returned by requests.Session.post.

    Returns:
        callable: function accepting status code and body, patching
        requests.Session.post and returning the mock.
    """

    def factory(status_code: int, text: str):
        response = mocker.MagicMock()
        response.status_code = status_code
        response.text = text
        return mocker.patch("requests.Session.post", return_value=response)

    yield factory
