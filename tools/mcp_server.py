# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (all three tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the mock data engine as MCP tools.  Each tool is a thin wrapper
#   around mockdata.router.route(): it logs the call, hands over the tool
#   name and argument bag, and turns the GenerationResult into an MCP reply.
#
# HOW IT WORKS (the flow):
#   1. The host (an agent, an IDE, the MCP inspector) lists our tools
#   2. It calls one by name, e.g. "generateCustomData"
#   3. FastMCP routes the call to the decorated function below (a call it
#      cannot route, or whose arguments miss the schema, gets the failure
#      envelope from FailureEnvelopeMiddleware instead)
#   4. The function calls route(), which parses, generates and assembles
#   5. Success: the record goes back as 2-space JSON text
#      Failure: we raise ToolError carrying {"error": ..., "status": "failed"};
#      FastMCP sends that text back with isError=true
#
# TOOL NAMES:
#   camelCase on purpose (generateCustomData, generatePerson,
#   generateCompany).  Existing hosts call these exact names.
#
# RUNNING THIS SERVER:
#     a) python main.py            (loads .env, then serves on stdio)
#     b) python -m tools.mcp_server
# =============================================================================

import logging
import sys
from typing import Any, Literal

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError, ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from pydantic import BaseModel, Field, ValidationError

from mockdata.catalog import describe_catalog
from mockdata.config import Settings
from mockdata.context import DEFAULT_LOCALE, GenerationContext, create_faker
from mockdata.errors import MockDataError
from mockdata.models import GenerationResult
from mockdata.router import GENERATE_COMPANY, GENERATE_CUSTOM_DATA, GENERATE_PERSON, parse_request, route

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the host over STDOUT.
# A stray log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for warnings (a field that fell back to null) and status
#     - RED for request-level failures
#   MOCK_DATA_LOG_COLOR=false turns them off, e.g. when stderr goes to a file.
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Warnings / status messages
_RED = "\033[31m"      # Errors
_RESET = "\033[0m"     # Reset to default terminal color

_color_enabled = True


def _paint(color: str, text: str) -> str:
    return f"{color}{text}{_RESET}" if _color_enabled else text


class _LevelColorFormatter(logging.Formatter):
    """Colours whole lines by level: yellow warnings, red errors."""

    _LEVEL_COLORS = {
        logging.WARNING: _YELLOW,
        logging.ERROR: _RED,
        logging.CRITICAL: _RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self._LEVEL_COLORS.get(record.levelno)
        return _paint(color, message) if color else message


def configure_logging(settings: Settings) -> None:
    """Send all logging to stderr, coloured unless disabled."""
    global _color_enabled
    _color_enabled = settings.log_color

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_LevelColorFormatter("%(asctime)s [MCP] %(message)s", datefmt="%H:%M:%S"))
    logging.basicConfig(level=settings.log_level, handlers=[handler], force=True)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(_paint(_CYAN, f"{tool_name} called with: {param_str}"))


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(_paint(_YELLOW, f"  → {message}"))


def _log_response(tool_name: str, text: str) -> str:
    """Log the response body in GREEN, then return it."""
    logging.info(_paint(_GREEN, f"  ← {tool_name} response: {text}"))
    return text


# =============================================================================
# The process-wide random source
# =============================================================================
# ONE Faker for the whole process; each request wraps it in its own
# GenerationContext.  Requests arrive one at a time over stdio, so no lock.
# =============================================================================
_fake = create_faker()


def seed_random_source(seed: int) -> None:
    _fake.seed_instance(seed)


def _new_context(locale: str) -> GenerationContext:
    return GenerationContext.for_locale(_fake, locale)


class EnvelopeError(ToolError):
    """A ToolError whose text is already the {"error", "status"} envelope."""


def _failure(result: GenerationResult) -> EnvelopeError:
    _log_status(f"{result.tool_name} failed: {result.error}")
    return EnvelopeError(result.render())


def _reply(result: GenerationResult) -> str:
    """Success -> JSON text.  Failure -> EnvelopeError (isError=true)."""
    if result.is_error:
        raise _failure(result)
    return _log_response(result.tool_name, result.render())


# =============================================================================
# Calls FastMCP refuses before a tool body runs
# =============================================================================
# An unregistered tool name or arguments that do not fit a tool's schema never
# reach route().  The middleware below catches those rejections and answers
# with the same failure envelope route() would have produced.  The router's
# own parser names the problem where it can ("'fields' is required"); if the
# parser accepts what the schema refused, the validation message is used.
# =============================================================================
def _validation_message(error: Exception) -> str:
    cause = error.__cause__ if isinstance(error.__cause__, ValidationError) else error
    if not isinstance(cause, ValidationError):
        return str(cause)
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
        for err in cause.errors()
    )


def rejected_call(tool_name: str, arguments: Any, error: Exception) -> GenerationResult:
    """The failure result for a call FastMCP rejected."""
    try:
        parse_request(tool_name, arguments)
    except MockDataError as e:
        return GenerationResult(tool_name=tool_name, error=e.message)
    return GenerationResult(tool_name=tool_name, error=_validation_message(error))


class FailureEnvelopeMiddleware(Middleware):
    async def on_call_tool(self, context: MiddlewareContext, call_next):
        try:
            return await call_next(context)
        except EnvelopeError:
            raise
        except (NotFoundError, ValidationError, ToolError) as e:
            params = context.message
            logging.error(f"Rejected {params.name} call: {e}")
            raise _failure(rejected_call(params.name, params.arguments, e)) from e


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("mock-data-server")
mcp.add_middleware(FailureEnvelopeMiddleware())


class FieldDefinition(BaseModel):
    """One generateCustomData field, as advertised in the tool's input schema."""
    name: str = Field(description="Name of the field")
    type: str = Field(description="Type of data to generate")
    options: dict[str, Any] = Field(
        default_factory=dict, description="Optional parameters for data generation",
    )


_CUSTOM_DATA_DESCRIPTION = f"""Generates mock data based on custom field definitions.

Parameters:
- locale: The locale to use for generating data (e.g., "en", "es", "fr")
- fields: Array of field definitions, each containing:
  - name: Name of the field
  - type: Type of data to generate
  - options: Optional parameters for data generation

Available types:
{describe_catalog()}

A field with an unsupported type comes back as null; the other fields are
still generated.
"""


# =============================================================================
# TOOL 1: generateCustomData
# =============================================================================
# The general path: every field goes through the dispatcher.  Output keys are
# the caller's field names, in the order given.
# =============================================================================
@mcp.tool(name=GENERATE_CUSTOM_DATA, description=_CUSTOM_DATA_DESCRIPTION)
def generate_custom_data(fields: list[FieldDefinition], locale: str = DEFAULT_LOCALE) -> str:
    raw_fields = [f.model_dump() for f in fields]
    _log_request(GENERATE_CUSTOM_DATA, locale=locale, fields=raw_fields)
    return _reply(route(GENERATE_CUSTOM_DATA, {"locale": locale, "fields": raw_fields}, _new_context))


# =============================================================================
# TOOL 2: generatePerson
# =============================================================================
@mcp.tool(name=GENERATE_PERSON)
def generate_person(
    fields: list[Literal["firstName", "lastName", "email", "phone", "address", "dateOfBirth"]],
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Generates mock person data including name, email, address, etc.

    Parameters:
    - locale: The locale to use for generating data (e.g., "en", "es", "fr")
    - fields: Array of fields to include in the generated data
      Available fields: firstName, lastName, email, phone, address, dateOfBirth

    "address" is a nested object with street, city, state, country and zipCode.
    """
    _log_request(GENERATE_PERSON, locale=locale, fields=fields)
    return _reply(route(GENERATE_PERSON, {"locale": locale, "fields": list(fields)}, _new_context))


# =============================================================================
# TOOL 3: generateCompany
# =============================================================================
@mcp.tool(name=GENERATE_COMPANY)
def generate_company(
    fields: list[Literal["name", "industry", "catchPhrase", "address", "phone"]],
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Generates mock company data including name, industry, address, etc.

    Parameters:
    - locale: The locale to use for generating data
    - fields: Array of fields to include in the generated data
      Available fields: name, industry, catchPhrase, address, phone

    "address" is a nested object with street, city, state, country and zipCode.
    """
    _log_request(GENERATE_COMPANY, locale=locale, fields=fields)
    return _reply(route(GENERATE_COMPANY, {"locale": locale, "fields": list(fields)}, _new_context))


# =============================================================================
# Server entry point
# =============================================================================
def main(settings: Settings | None = None) -> None:
    """Configure logging and the random source, then serve on stdio."""
    settings = settings or Settings.from_env()
    configure_logging(settings)
    if settings.seed is not None:
        seed_random_source(settings.seed)
        _log_status(f"Random source seeded with {settings.seed}")
    logging.info(_paint(_CYAN, "Mock Data MCP Server running on stdio"))
    mcp.run()


if __name__ == "__main__":
    load_dotenv()
    main()
