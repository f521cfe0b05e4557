"""Research query runner."""

import time
from typing import Optional

from client import OpenRouterClient, check_status, parse_response
from log import get_logger
from models.config import QueryConfiguration
from models.requests import build_chat_request
from utils.rendering import print_diagnostic, render_response
from utils.ticker import ProgressTicker

logger = get_logger(__name__)


def run_query(
    config: QueryConfiguration, client: Optional[OpenRouterClient] = None
) -> Optional[str]:
    """
    Send one research query and print the result.

    The progress ticker runs only while the HTTP exchange is in flight and
    is stopped on every exit path before anything else is printed.

    Parameters:
        config (QueryConfiguration): Resolved query configuration.
        client (Optional[OpenRouterClient]): Client to use, a new one is
        created from configuration when not provided.

    Returns:
        Optional[str]: The answer printed to stdout, None if the response
        had no content.

    Raises:
        ResearchToolError: On transport, HTTP status or payload errors.
    """
    if client is None:
        client = OpenRouterClient(config.api_key, timeout=config.timeout)

    request = build_chat_request(config)
    print_diagnostic(f"🔍 Researching with {config.model} (effort: {config.effort})...")

    start = time.monotonic()
    try:
        with ProgressTicker(start=start):
            status_code, body = client.send(
                request,
                on_connected=lambda: print_diagnostic(
                    "✅ Connected, waiting for response..."
                ),
            )
    finally:
        client.close()
    logger.debug("HTTP exchange took %.2f s", time.monotonic() - start)

    check_status(status_code, body)
    response = parse_response(body)
    return render_response(response, time.monotonic() - start)
