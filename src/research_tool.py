"""Entry point to the research tool.

Sends a question to a web-search-enabled model through OpenRouter and prints
the answer to stdout. Progress, reasoning trace and token usage are printed
to stderr. It is implemented in the main() function.
"""

import os
import sys
from argparse import REMAINDER, SUPPRESS, ArgumentParser, RawDescriptionHelpFormatter
from typing import Mapping, Optional, Sequence, TextIO

import constants
from client import ResearchToolError
from configuration import (
    ConfigurationError,
    load_env_file,
    resolve_configuration,
    resolve_env_file,
)
from log import get_logger, set_verbose
from runners.research import run_query
from utils.rendering import print_diagnostic
from version import __version__

logger = get_logger(__name__)

DESCRIPTION = """\
Query GPT-5.2:online for research via OpenRouter.

Sends your question to the model through OpenRouter with web search enabled
and chain-of-thought reasoning. The model can access live web data, cite
sources, and perform deep analysis.

examples:
  research-tool "What is the current population of Tokyo?"
  research-tool what are the best rust async patterns
  research-tool --effort xhigh "Compare Next.js vs Remix for full-stack web applications"
  research-tool -s "You are a Rust systems programmer" "Best async patterns for WebSocket servers"
  cat question.txt | research-tool --stdin
  research-tool "Summarize recent changes to the OpenAI API" > summary.md
"""

EPILOG = f"""\
output:
  stdout: Model response text (pipe-friendly)
  stderr: Progress indicator, reasoning trace, token usage stats

cost:
  ~$0.01-0.05 per query depending on response length and reasoning effort.
  Token usage is printed to stderr after each query.

authentication:
  Set {constants.API_KEY_ENV_VAR} in your environment or .env file.
  Get a key at {constants.OPENROUTER_KEYS_URL}
"""


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser object."""
    parser = ArgumentParser(
        prog="research-tool",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "query",
        # everything from the first query word on is query text, even
        # words starting with a dash
        nargs=REMAINDER,
        help=(
            "the question or research query (multiple words joined automatically, "
            "options must come before it)"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        help="make it verbose",
        action="store_true",
        default=False,
    )
    parser.add_argument(
        "--stdin",
        dest="stdin",
        help="read the query from stdin instead of command-line arguments",
        action="store_true",
        default=False,
    )
    parser.add_argument(
        "-m",
        "--model",
        dest="model",
        help=(
            "model to use, the ':online' suffix enables live web search "
            f"(env: {constants.MODEL_ENV_VAR}, default: {constants.DEFAULT_MODEL})"
        ),
        default=None,
    )
    parser.add_argument(
        "-e",
        "--effort",
        dest="effort",
        help=(
            f"reasoning effort: {', '.join(constants.REASONING_EFFORT_LEVELS)} "
            f"(env: {constants.EFFORT_ENV_VAR}, default: {constants.DEFAULT_EFFORT})"
        ),
        default=None,
    )
    parser.add_argument(
        "-s",
        "--system",
        dest="system",
        help="override the system prompt (default: research assistant that cites sources)",
        default=None,
    )
    parser.add_argument(
        "--max-tokens",
        dest="max_tokens",
        help=f"maximum number of tokens in the response (default: {constants.DEFAULT_MAX_TOKENS})",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        help="request timeout in seconds (default: no timeout)",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--api-key",
        dest="api_key",
        help=SUPPRESS,
        default=None,
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    stdin: Optional[TextIO] = None,
) -> int:
    """Entry point to the research tool, returns process exit code."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    if environ is None:
        load_env_file(resolve_env_file())
        environ = os.environ
    if stdin is None:
        stdin = sys.stdin

    try:
        config = resolve_configuration(args, environ, stdin)
        run_query(config)
    except (ConfigurationError, ResearchToolError) as e:
        print_diagnostic(f"❌ {e}")
        return constants.EXIT_FAILURE

    return constants.EXIT_SUCCESS


def cli() -> None:
    """Run main() and terminate the process explicitly.

    An abandoned HTTP worker thread would otherwise keep the interpreter
    alive after a timeout.
    """
    code = main()
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(code)  # pylint: disable=protected-access


if __name__ == "__main__":
    cli()
