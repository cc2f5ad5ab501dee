# =============================================================================
# mockdata/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of everything that flows through one
# request/response cycle.  Nothing here outlives a single tool call: the
# router builds a request, the dispatcher fills a record, the server emits
# the result, and all of it is thrown away.
#
# WHY FROZEN DATACLASSES?
#   A FieldSpec is built once from the caller's arguments and then only read.
#   Freezing it (and wrapping its options read-only) means no generator can
#   quietly rewrite the options another field will see.
# =============================================================================

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


# -----------------------------------------------------------------------------
# FieldSpec -- one named, typed value the caller wants generated
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FieldSpec:
    """A caller-declared request for one synthetic value.

    Example (as it arrives over MCP):
        {"name": "signup", "type": "date", "options": {"past": true}}
    """

    name: str                          # Key in the output record
    type: str                          # Catalog tag, e.g. "email"
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


# -----------------------------------------------------------------------------
# Fixed field tags for the person / company tools
# -----------------------------------------------------------------------------
# These are closed enumerations: the MCP input schema advertises exactly these
# values.  Each one maps to a hard-coded recipe in records.py, NOT to the
# general dispatcher.
# -----------------------------------------------------------------------------
class PersonField(str, Enum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE = "phone"
    ADDRESS = "address"
    DATE_OF_BIRTH = "dateOfBirth"


class CompanyField(str, Enum):
    NAME = "name"
    INDUSTRY = "industry"
    CATCH_PHRASE = "catchPhrase"
    ADDRESS = "address"
    PHONE = "phone"


# -----------------------------------------------------------------------------
# Request shapes -- one per tool
# -----------------------------------------------------------------------------
# Person/company field tuples may hold a plain str when the caller sent a tag
# outside the enumeration.  That tag still gets an entry (None) in the output.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CustomRequest:
    locale: str
    fields: tuple[FieldSpec, ...]


@dataclass(frozen=True)
class PersonRequest:
    locale: str
    fields: tuple[Union[PersonField, str], ...]


@dataclass(frozen=True)
class CompanyRequest:
    locale: str
    fields: tuple[Union[CompanyField, str], ...]


GenerationRequest = Union[CustomRequest, PersonRequest, CompanyRequest]


# -----------------------------------------------------------------------------
# GenerationResult -- what the router hands back to the server layer
# -----------------------------------------------------------------------------
@dataclass
class GenerationResult:
    """Terminal state of one tool call: a record, or a request-level error."""

    tool_name: str
    record: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_payload(self) -> dict[str, Any]:
        """The JSON-ready body: the record itself, or the failure envelope."""
        if self.is_error:
            return {"error": self.error, "status": "failed"}
        return self.record if self.record is not None else {}

    def render(self) -> str:
        """Serialize the payload the way callers read it: 2-space JSON."""
        return json.dumps(self.to_payload(), indent=2, ensure_ascii=False)
