"""Shared test configuration: seeded generation contexts with a frozen clock."""

from datetime import datetime, timezone

import pytest

from mockdata.context import GenerationContext

FROZEN_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_context(seed: int = 1234, locale: str = "en") -> GenerationContext:
    return GenerationContext.seeded(seed, locale=locale, clock=lambda: FROZEN_NOW)


def seeded_factory(seed: int = 1234):
    """A router context factory that always hands out a fresh seeded context."""
    return lambda locale: make_context(seed, locale)


def parse_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
def ctx() -> GenerationContext:
    return make_context()
