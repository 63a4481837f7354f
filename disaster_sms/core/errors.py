"""Error Hierarchy — typed, categorized exceptions for every failure mode of an SMS run.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client-input errors map to 4xx; model/substrate errors map to 5xx
    - Tool-level errors (fetch, validation) become tool results via to_tool_result(),
      they never reach the HTTP boundary
    - to_response() is the plain-text body returned by the webhook

Design Decisions:
    - Single hierarchy rooted at SmsAgentError: one global FastAPI handler catches all
    - ErrorContext as dataclass: observability fields travel with the exception
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context carried by an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    turn: int | None = None
    url: str | None = None
    retry_after_ms: int | None = None


class SmsAgentError(Exception):
    """Base exception for all disaster SMS agent errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> str:
        """Plain-text body for the webhook response."""
        return self.message

    def to_tool_result(self) -> dict:
        """Convert to a tool result dict fed back to the model."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
        }


# ─── Webhook Errors (400-level) ─────────────────────────────────

class UnauthorizedError(SmsAgentError):
    """Webhook secret missing from the request URL."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class MethodNotAllowedError(SmsAgentError):
    """Webhook called with a method other than POST."""
    def __init__(self, method: str, context: ErrorContext | None = None):
        super().__init__(
            "Method not allowed", "METHOD_NOT_ALLOWED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 405,
        )
        self.method = method


class RequestDecodeError(SmsAgentError):
    """Request body is not valid JSON."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REQUEST_DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class RequestParseError(SmsAgentError):
    """Request body is JSON but does not match the webhook payload."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REQUEST_PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Tool Errors (absorbed into the conversation) ───────────────

class ToolValidationError(SmsAgentError):
    """Tool input does not conform to the declared schema."""
    def __init__(self, message: str, tool_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tool_name = tool_name
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class FetchError(SmsAgentError):
    """Thread retrieval or parsing failed."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FETCH_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.cause = cause

    def to_tool_result(self) -> dict:
        result = super().to_tool_result()
        if self.cause is not None:
            result["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return result


class SmsTransportError(SmsAgentError):
    """A single outbound SMS could not be handed to the relay."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SMS_TRANSPORT_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class AnthropicAPIError(SmsAgentError):
    """Anthropic API call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        super().__init__(
            f"Anthropic API error ({api_error_type}): {message}",
            "ANTHROPIC_API_ERROR",
            ErrorCategory.TIMEOUT if api_error_type == "timeout"
            else ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.api_error_type = api_error_type


class AgentError(SmsAgentError):
    """The agent run failed in the model substrate (not in a tool)."""
    def __init__(
        self,
        message: str,
        dispatched: bool = False,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AGENT_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        # True when the failed attempt already handed SMS to the relay
        self.dispatched = dispatched
