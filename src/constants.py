"""Constants used in business logic."""

# OpenRouter chat completions endpoint
OPENROUTER_CHAT_COMPLETIONS_URL = "https://openrouter.ai/api/v1/chat/completions"
OPENROUTER_KEYS_URL = "https://openrouter.ai/keys"
OPENROUTER_CREDITS_URL = "https://openrouter.ai/credits"

# Headers identifying this client to OpenRouter
HTTP_REFERER = "https://github.com/aaronn/openclaw-search-tool"
CLIENT_TITLE = "OpenClaw Research Tool"

# Environment variables
API_KEY_ENV_VAR = "OPENROUTER_API_KEY"
MODEL_ENV_VAR = "RESEARCH_MODEL"
EFFORT_ENV_VAR = "RESEARCH_EFFORT"

# Name of dotenv file searched in current directory and then in home directory
ENV_FILE_NAME = ".env"

# The ":online" suffix enables live web search
DEFAULT_MODEL = "openai/gpt-5.2:online"
DEFAULT_EFFORT = "low"
DEFAULT_MAX_TOKENS = 12800

# Reasoning effort levels known to OpenRouter; used in help text only, the
# value is passed to the service as is
REASONING_EFFORT_LEVELS = ("low", "medium", "high", "xhigh")

# Default system prompt used only when no other system prompt is specified on
# the command line
DEFAULT_SYSTEM_PROMPT = (
    "You are a research assistant. Provide detailed, accurate answers with "
    "sources and citations where possible. Focus on factual, verifiable "
    "information. When citing web sources, include URLs."
)

# Progress ticker period in seconds
PROGRESS_INTERVAL = 15

# How many characters of unparseable response body are shown to user
RESPONSE_PREFIX_LENGTH = 200

# Process exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
