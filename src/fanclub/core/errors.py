"""Error codes and user-friendly messages.

Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again.",
        "retry_allowed": True,
    },
    "VAL_002": {
        "code": "VAL_002",
        "message": "Reminder date outside the allowed window",
        "user_message": "The reminder date must be between today and the match date.",
        "suggestion": "Pick a reminder date no earlier than today and no later than the match.",
        "retry_allowed": True,
    },
    "AUTH_001": {
        "code": "AUTH_001",
        "message": "Invalid credentials",
        "user_message": "Invalid username or password",
        "suggestion": "Check your username or email and password, then try again.",
        "retry_allowed": True,
    },
    "AUTH_002": {
        "code": "AUTH_002",
        "message": "No valid session cookie",
        "user_message": "Not authenticated",
        "suggestion": "Please sign in to continue.",
        "retry_allowed": False,
    },
    "USR_001": {
        "code": "USR_001",
        "message": "Email or username already registered",
        "user_message": "An account with these details already exists.",
        "suggestion": "Sign in instead, or choose a different email or username.",
        "retry_allowed": False,
    },
    "REM_001": {
        "code": "REM_001",
        "message": "Reminder not found for caller and match",
        "user_message": "Reminder not found",
        "suggestion": "Refresh your reminders and try again.",
        "retry_allowed": False,
    },
    "REM_002": {
        "code": "REM_002",
        "message": "Reminder already exists for caller and match",
        "user_message": "A reminder for this match already exists",
        "suggestion": "Edit the existing reminder instead.",
        "retry_allowed": False,
    },
    "LEAGUE_001": {
        "code": "LEAGUE_001",
        "message": "Unsupported league identifier",
        "user_message": "That league isn't supported.",
        "suggestion": "Choose Premier League, LaLiga, Serie A or Bundesliga.",
        "retry_allowed": False,
    },
    "EXT_001": {
        "code": "EXT_001",
        "message": "Football data provider timed out",
        "user_message": "Request timeout. The football API is taking too long to respond.",
        "suggestion": "Please try again.",
        "retry_allowed": True,
    },
    "EXT_002": {
        "code": "EXT_002",
        "message": "Football data provider request failed",
        "user_message": "Failed to fetch data from the football API.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "EXT_003": {
        "code": "EXT_003",
        "message": "Football data provider rejected the API token",
        "user_message": "The football API key does not have access to this competition.",
        "suggestion": "The free tier may only cover some leagues. Try another league.",
        "retry_allowed": False,
    },
    "EXT_004": {
        "code": "EXT_004",
        "message": "Football data provider resource not found",
        "user_message": "The requested competition was not found.",
        "suggestion": "Please check the competition code.",
        "retry_allowed": False,
    },
    "EXT_005": {
        "code": "EXT_005",
        "message": "Football data provider rate limit exceeded",
        "user_message": "Rate limit exceeded.",
        "suggestion": "Please wait a minute and try again.",
        "retry_allowed": True,
    },
    "EXT_006": {
        "code": "EXT_006",
        "message": "Football data provider returned an unexpected payload",
        "user_message": "Invalid response from the football API.",
        "suggestion": "Please try again later.",
        "retry_allowed": True,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred",
        "suggestion": "Please try again later.",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists",
        "user_message": "This record already exists",
        "suggestion": "Please check if the record was already created.",
        "retry_allowed": False,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred",
        "suggestion": "Please try again later or contact support.",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Unknown codes resolve to a generic definition instead of raising.
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def error_body(error_code: str, field_errors: dict[str, list[str]] | None = None) -> dict:
    """Build the JSON body returned for an error code."""
    error_info = get_error(error_code)
    body = {
        "error": error_info["user_message"],
        "error_code": error_code,
        "message": error_info["message"],
        "user_message": error_info["user_message"],
        "suggestion": error_info["suggestion"],
        "retry_allowed": error_info["retry_allowed"],
    }
    if field_errors:
        body["errors"] = field_errors
    return body
