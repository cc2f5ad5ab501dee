# =============================================================================
# mockdata/records.py  -  Fixed person & company recipes
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds the records for the generatePerson and generateCompany tools.
#   Each allowed field tag maps to a hard-coded recipe; these tools do NOT go
#   through the general dispatcher.
#
# THE ADDRESS DIVERGENCE:
#   In generateCustomData, type "address" is a flat street string.
#   Here, "address" is a nested record:
#
#       {"street": ..., "city": ..., "state": ..., "country": ..., "zipCode": ...}
#
#   Both shapes have existing callers.  Keep them different.
# =============================================================================

from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Union

from mockdata.context import GenerationContext
from mockdata.dispatcher import isolate_field
from mockdata.errors import UnsupportedFieldTypeError
from mockdata.generators import past_moment, to_iso
from mockdata.models import CompanyField, PersonField

Recipe = Callable[[GenerationContext], Any]

# People are born within the last 70 years.
_DATE_OF_BIRTH_YEARS = 70


def build_address(ctx: GenerationContext) -> dict[str, str]:
    """The nested address sub-record shared by persons and companies."""
    return {
        "street": ctx.fake.street_address(),
        "city": ctx.fake.city(),
        "state": ctx.fake.state(),
        "country": ctx.fake.country(),
        "zipCode": ctx.fake.postcode(),
    }


PERSON_RECIPES: dict[PersonField, Recipe] = {
    PersonField.FIRST_NAME: lambda ctx: ctx.fake.first_name(),
    PersonField.LAST_NAME: lambda ctx: ctx.fake.last_name(),
    PersonField.EMAIL: lambda ctx: ctx.fake.email(),
    PersonField.PHONE: lambda ctx: ctx.fake.phone_number(),
    PersonField.ADDRESS: build_address,
    PersonField.DATE_OF_BIRTH: lambda ctx: to_iso(past_moment(ctx, years=_DATE_OF_BIRTH_YEARS)),
}

COMPANY_RECIPES: dict[CompanyField, Recipe] = {
    CompanyField.NAME: lambda ctx: ctx.fake.company(),
    CompanyField.INDUSTRY: lambda ctx: ctx.fake.bs(),
    CompanyField.CATCH_PHRASE: lambda ctx: ctx.fake.catch_phrase(),
    CompanyField.ADDRESS: build_address,
    CompanyField.PHONE: lambda ctx: ctx.fake.phone_number(),
}


def _run_recipe(tag: Any, key: str, recipes: Mapping[Any, Recipe], ctx: GenerationContext) -> Any:
    recipe = recipes.get(tag)
    if recipe is None:
        raise UnsupportedFieldTypeError(key)
    return recipe(ctx)


def _build_record(
    tags: Iterable[Union[str, PersonField, CompanyField]],
    recipes: Mapping[Any, Recipe],
    ctx: GenerationContext,
) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for tag in tags:
        key = tag.value if isinstance(tag, Enum) else str(tag)
        record[key] = isolate_field(key, lambda: _run_recipe(tag, key, recipes, ctx))
    return record


def generate_person_record(fields: Iterable[Union[PersonField, str]],
                           ctx: GenerationContext) -> dict[str, Any]:
    """Record for generatePerson, keys in request order."""
    return _build_record(fields, PERSON_RECIPES, ctx)


def generate_company_record(fields: Iterable[Union[CompanyField, str]],
                            ctx: GenerationContext) -> dict[str, Any]:
    """Record for generateCompany, keys in request order."""
    return _build_record(fields, COMPANY_RECIPES, ctx)
