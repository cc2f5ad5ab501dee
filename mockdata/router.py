# =============================================================================
# mockdata/router.py  -  Request Router
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Takes (tool name, argument bag) exactly as the MCP host sent them and
#   walks one linear pipeline:
#
#     validate tool name -> parse fields -> generate each field (isolated)
#       -> assemble ordered record -> GenerationResult
#
#   No retries, no backtracking.  The pipeline ends in one of two states:
#     success  the record, possibly with some None fields
#     failure  a request-level error (unknown tool, malformed arguments)
#
# WHAT COUNTS AS MALFORMED?
#   Anything that stops us from knowing which fields to produce: a non-object
#   argument bag, a missing or non-list "fields", a custom field without a
#   name/type, duplicate names, a non-string locale.  An unknown TYPE tag is
#   NOT malformed; it is a field-level problem and degrades to None.
# =============================================================================

import logging
from typing import Any, Callable, Mapping, Optional

from mockdata.context import DEFAULT_LOCALE, GenerationContext
from mockdata.dispatcher import generate_custom_record
from mockdata.errors import MalformedArgumentsError, MockDataError, UnknownToolError
from mockdata.models import (
    CompanyField,
    CompanyRequest,
    CustomRequest,
    FieldSpec,
    GenerationRequest,
    GenerationResult,
    PersonField,
    PersonRequest,
)
from mockdata.records import generate_company_record, generate_person_record

logger = logging.getLogger(__name__)

GENERATE_CUSTOM_DATA = "generateCustomData"
GENERATE_PERSON = "generatePerson"
GENERATE_COMPANY = "generateCompany"
TOOL_NAMES = (GENERATE_CUSTOM_DATA, GENERATE_PERSON, GENERATE_COMPANY)

ContextFactory = Callable[[str], GenerationContext]


# =============================================================================
# Parsing: argument bag -> request shape
# =============================================================================
def _parse_locale(args: Mapping[str, Any]) -> str:
    locale = args.get("locale")
    if locale is None:
        return DEFAULT_LOCALE
    if not isinstance(locale, str):
        raise MalformedArgumentsError("'locale' must be a string")
    return locale or DEFAULT_LOCALE


def _parse_field_list(args: Mapping[str, Any]) -> list:
    fields = args.get("fields")
    if fields is None:
        raise MalformedArgumentsError("'fields' is required")
    if not isinstance(fields, list):
        raise MalformedArgumentsError("'fields' must be an array")
    return fields


def _parse_field_spec(index: int, raw: Any) -> FieldSpec:
    if not isinstance(raw, Mapping):
        raise MalformedArgumentsError(f"fields[{index}] must be an object")
    name, field_type = raw.get("name"), raw.get("type")
    if not isinstance(name, str) or not name:
        raise MalformedArgumentsError(f"fields[{index}].name must be a non-empty string")
    if not isinstance(field_type, str):
        raise MalformedArgumentsError(f"fields[{index}].type must be a string")
    options = raw.get("options")
    if options is None:
        options = {}
    elif not isinstance(options, Mapping):
        raise MalformedArgumentsError(f"fields[{index}].options must be an object")
    return FieldSpec(name=name, type=field_type, options=options)


def _parse_custom(args: Mapping[str, Any]) -> CustomRequest:
    specs = [_parse_field_spec(i, raw) for i, raw in enumerate(_parse_field_list(args))]
    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            raise MalformedArgumentsError(f"Duplicate field name: {spec.name}")
        seen.add(spec.name)
    return CustomRequest(locale=_parse_locale(args), fields=tuple(specs))


def _parse_tags(args: Mapping[str, Any], enum_cls) -> tuple:
    tags = []
    for index, raw in enumerate(_parse_field_list(args)):
        if not isinstance(raw, str):
            raise MalformedArgumentsError(f"fields[{index}] must be a string")
        try:
            tag = enum_cls(raw)
        except ValueError:
            tag = raw
        if tag not in tags:
            tags.append(tag)
    return tuple(tags)


def parse_request(tool_name: str, args: Optional[Mapping[str, Any]]) -> GenerationRequest:
    """Validate the tool name and turn the argument bag into a request."""
    if tool_name not in TOOL_NAMES:
        raise UnknownToolError(tool_name)
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        raise MalformedArgumentsError("Arguments must be an object")

    if tool_name == GENERATE_CUSTOM_DATA:
        return _parse_custom(args)
    if tool_name == GENERATE_PERSON:
        return PersonRequest(locale=_parse_locale(args), fields=_parse_tags(args, PersonField))
    return CompanyRequest(locale=_parse_locale(args), fields=_parse_tags(args, CompanyField))


# =============================================================================
# Execution: request shape -> record
# =============================================================================
def execute_request(request: GenerationRequest, ctx: GenerationContext) -> dict[str, Any]:
    if isinstance(request, CustomRequest):
        return generate_custom_record(request.fields, ctx)
    if isinstance(request, PersonRequest):
        return generate_person_record(request.fields, ctx)
    return generate_company_record(request.fields, ctx)


def route(
    tool_name: str,
    args: Optional[Mapping[str, Any]],
    context_factory: ContextFactory,
) -> GenerationResult:
    """Run one tool call end to end.  Never raises.

    Args:
        tool_name: One of TOOL_NAMES; anything else is a request-level failure.
        args: The raw argument bag from the host.
        context_factory: Builds the GenerationContext for the request's locale.

    Returns:
        A GenerationResult holding either the record or the error message.
    """
    try:
        request = parse_request(tool_name, args)
        ctx = context_factory(request.locale)
        record = execute_request(request, ctx)
    except MockDataError as e:
        logger.error(f"Error generating mock data: {e}")
        return GenerationResult(tool_name=tool_name, error=e.message)
    except Exception as e:
        logger.exception(f"Unexpected error generating mock data: {e}")
        return GenerationResult(tool_name=tool_name, error=str(e))

    logger.info(f"Generated {tool_name} data successfully")
    return GenerationResult(tool_name=tool_name, record=record)
