# =============================================================================
# mockdata/errors.py  -  Error hierarchy
# =============================================================================
#
# Two tiers of failure exist, and the class tells you which tier you are in:
#
#   REQUEST-LEVEL  (UnknownToolError, MalformedArgumentsError)
#     The whole call is aborted.  The router turns these into the failure
#     envelope {"error": ..., "status": "failed"} with the error flag set.
#
#   FIELD-LEVEL    (UnsupportedFieldTypeError, or anything a generator raises)
#     Only the offending field is affected.  The dispatcher logs a warning
#     and stores None for that field; the call still succeeds.
#
# Every error carries a human-readable message.  That message is exactly what
# the calling host sees, so keep it specific.
# =============================================================================


class MockDataError(Exception):
    """Base class for every error raised by the mock data engine."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownToolError(MockDataError):
    """The requested tool name is not one of the three supported tools."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class MalformedArgumentsError(MockDataError):
    """The argument bag does not have the shape the tool expects."""


class UnsupportedFieldTypeError(MockDataError):
    """A field asked for a type tag outside the catalog."""

    def __init__(self, field_type: str):
        super().__init__(f"Unsupported field type: {field_type}")
        self.field_type = field_type
