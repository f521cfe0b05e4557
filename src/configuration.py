"""Configuration resolution from command line arguments, environment and dotenv file."""

from argparse import Namespace
from pathlib import Path
from typing import Mapping, Optional, Sequence, TextIO

from dotenv import load_dotenv
from pydantic import ValidationError

import constants
from log import get_logger
from models.config import QueryConfiguration

logger = get_logger(__name__)


class ConfigurationError(Exception):
    """Configuration can not be resolved; the message is shown to user."""


class MissingAPIKeyError(ConfigurationError):
    """No API key was provided on command line, in environment nor in dotenv file."""


class MissingQueryError(ConfigurationError):
    """No query was provided on command line nor on standard input."""


MISSING_API_KEY_MESSAGE = (
    "No API key found.\n\n"
    f"Set {constants.API_KEY_ENV_VAR} in your environment:\n"
    f'  export {constants.API_KEY_ENV_VAR}="sk-or-v1-..."\n\n'
    f"Get a key at {constants.OPENROUTER_KEYS_URL}"
)

MISSING_QUERY_MESSAGE = (
    "No query provided.\n\n"
    'Usage: research-tool "your question here"\n'
    "Help:  research-tool --help"
)


def resolve_env_file(
    cwd: Optional[Path] = None, home: Optional[Path] = None
) -> Optional[Path]:
    """
    Find the dotenv file to load.

    The current working directory is checked first, then the user's home
    directory. The first existing file wins; the files are never merged.

    Parameters:
        cwd (Optional[Path]): Directory to check first, defaults to current directory.
        home (Optional[Path]): Directory to check next, defaults to home directory.

    Returns:
        Optional[Path]: Path to dotenv file, or None when no file exists.
    """
    if cwd is None:
        cwd = Path.cwd()
    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            # home directory can not be determined
            home = None

    candidates = [cwd / constants.ENV_FILE_NAME]
    if home is not None:
        candidates.append(home / constants.ENV_FILE_NAME)

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_env_file(env_file: Optional[Path]) -> bool:
    """Load variables from dotenv file without overriding the existing ones."""
    if env_file is None:
        logger.debug("No dotenv file found")
        return False
    logger.debug("Loading environment from %s", env_file)
    return load_dotenv(env_file, override=False)


def resolve_api_key(explicit: Optional[str], environ: Mapping[str, str]) -> str:
    """Return API key from command line or from environment."""
    api_key = explicit or environ.get(constants.API_KEY_ENV_VAR)
    if not api_key:
        raise MissingAPIKeyError(MISSING_API_KEY_MESSAGE)
    return api_key


def resolve_query(words: Sequence[str], use_stdin: bool, stdin: TextIO) -> str:
    """
    Return the query text.

    In stdin mode the whole input is read and surrounding whitespace is
    stripped; otherwise positional words are joined by single spaces.

    Raises:
        MissingQueryError: If neither source yields any text.
    """
    if use_stdin:
        query = stdin.read().strip()
    else:
        query = " ".join(words)

    if not query.strip():
        raise MissingQueryError(MISSING_QUERY_MESSAGE)
    return query


def resolve_option(
    explicit: Optional[str], environ: Mapping[str, str], env_var: str, default: str
) -> str:
    """Resolve one option: explicit value, then environment variable, then default."""
    if explicit is not None:
        return explicit
    return environ.get(env_var) or default


def resolve_configuration(
    args: Namespace, environ: Mapping[str, str], stdin: TextIO
) -> QueryConfiguration:
    """Build query configuration from parsed arguments and environment.

    The API key is checked first so no input is consumed when it is missing.
    """
    api_key = resolve_api_key(args.api_key, environ)
    query = resolve_query(args.query, args.stdin, stdin)

    try:
        config = QueryConfiguration(
            model=resolve_option(
                args.model, environ, constants.MODEL_ENV_VAR, constants.DEFAULT_MODEL
            ),
            effort=resolve_option(
                args.effort,
                environ,
                constants.EFFORT_ENV_VAR,
                constants.DEFAULT_EFFORT,
            ),
            system_prompt=(
                args.system
                if args.system is not None
                else constants.DEFAULT_SYSTEM_PROMPT
            ),
            user_query=query,
            max_tokens=(
                args.max_tokens
                if args.max_tokens is not None
                else constants.DEFAULT_MAX_TOKENS
            ),
            timeout=args.timeout,
            api_key=api_key,
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from e

    logger.debug("Resolved configuration: %s", config)
    return config
