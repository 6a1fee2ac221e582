PREAMBLE_TITLE = "PREAMBLE AND PARTIES"
FULL_DOCUMENT_TITLE = "FULL DOCUMENT"

MIN_CLAUSE_TEXT_LENGTH = 20
REPEATED_LINE_MIN_LENGTH = 10
REPEATED_LINE_THRESHOLD = 3
DIGIT_PLACEHOLDER = "#"
CHARS_PER_PAGE = 3000

MAX_CLAUSE_PROMPT_CHARS = 2000
ANALYSIS_TEMPERATURE = 0.2
SUMMARY_TEMPERATURE = 0.3
ANALYSIS_COOLDOWN_SECONDS = 3.0

MAX_RETRIES = 3
RETRY_BASE_DELAY = 5.0
RETRY_MAX_DELAY = 30.0
LLM_TIMEOUT = 120.0

RETRYABLE_STATUS_CODES = (429, 500, 503)
RATE_LIMIT_KEYWORDS = ("429", "rate", "resource_exhausted", "quota",
                       "too many")
SERVER_ERROR_KEYWORDS = ("500", "503", "overloaded")
