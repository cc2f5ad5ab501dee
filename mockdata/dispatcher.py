# =============================================================================
# mockdata/dispatcher.py  -  Field Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Resolves each FieldSpec's type tag to a generator, runs it, and builds
#   the ordered record for the generateCustomData tool.
#
# PER-FIELD ISOLATION:
#   One bad field must never sink the whole request.  isolate_field() is
#   the boundary: whatever goes wrong inside it (an unknown tag, a
#   generator bug) is logged as a warning and that field becomes None.  The
#   record still has exactly one entry per requested field, in order.
#
#   dispatch() itself does NOT swallow anything.  Tests and callers that want
#   the real exception use dispatch(); the record builder uses generate_field().
# =============================================================================

import logging
from typing import Any, Callable, Iterable

from mockdata.context import GenerationContext
from mockdata.errors import UnsupportedFieldTypeError
from mockdata.generators import GENERATORS, Generator
from mockdata.models import FieldSpec

logger = logging.getLogger(__name__)


def resolve_generator(type_tag: str) -> Generator:
    """Look up the generator for a tag, or raise UnsupportedFieldTypeError."""
    generator = GENERATORS.get(type_tag)
    if generator is None:
        raise UnsupportedFieldTypeError(type_tag)
    return generator


def dispatch(field: FieldSpec, ctx: GenerationContext) -> Any:
    """Generate one value for `field`.  Errors propagate."""
    generator = resolve_generator(field.type)
    return generator(ctx, field.options or {})


def isolate_field(name: str, produce: Callable[[], Any]) -> Any:
    """Run `produce`; a failure yields None plus a warning naming the field.

    The one isolation boundary shared by the custom path and the fixed
    person/company recipes.
    """
    try:
        return produce()
    except Exception as e:
        logger.warning(f"Error generating field {name}: {e}")
        return None


def generate_field(field: FieldSpec, ctx: GenerationContext) -> Any:
    """dispatch(), but a failure yields None plus a warning."""
    return isolate_field(field.name, lambda: dispatch(field, ctx))


def generate_custom_record(fields: Iterable[FieldSpec], ctx: GenerationContext) -> dict[str, Any]:
    """Build the ordered record for a list of FieldSpecs."""
    return {field.name: generate_field(field, ctx) for field in fields}
