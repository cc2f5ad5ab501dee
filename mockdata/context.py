# =============================================================================
# mockdata/context.py  -  The generation context handed to every generator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the pseudo-random source (a Faker instance) and the clock into one
#   explicit object.  Generators never reach for a global Faker or call
#   datetime.now() themselves; they read both from the context.
#
# WHY AN EXPLICIT CONTEXT?
#   - Tests can build a context with a fixed seed and a frozen clock and get
#     exactly reproducible records.
#   - The server can share ONE Faker per process (the only state that crosses
#     request boundaries) while each request still gets its own context.
#
# LOCALES:
#   Every locale string is accepted.  All of them currently resolve to the
#   English (en_US) data source: several generators rely on en_US-only
#   providers (state, state_abbr, the bs word lists), so switching providers
#   per locale would turn valid requests into null fields.
# =============================================================================

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from faker import Faker

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
FAKER_LOCALE = "en_US"


def resolve_locale(locale: str) -> str:
    """Map a caller's locale selector to the Faker locale actually used."""
    if not locale.lower().startswith("en"):
        logger.debug(f"Locale '{locale}' requested; using {FAKER_LOCALE} data")
    return FAKER_LOCALE


def create_faker(seed: Optional[int] = None) -> Faker:
    """Build the process-wide random source, optionally seeded."""
    fake = Faker(FAKER_LOCALE)
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GenerationContext:
    """Everything a generator may consult: random source, clock, locale.

    `locale` is what the caller asked for; `faker_locale` is the data source
    that actually serves it.
    """

    fake: Faker
    locale: str = DEFAULT_LOCALE
    clock: Callable[[], datetime] = field(default=_utc_now)
    faker_locale: str = FAKER_LOCALE

    @classmethod
    def for_locale(cls, fake: Faker, locale: str) -> "GenerationContext":
        return cls(fake=fake, locale=locale, faker_locale=resolve_locale(locale))

    @classmethod
    def seeded(cls, seed: int, locale: str = DEFAULT_LOCALE,
               clock: Optional[Callable[[], datetime]] = None) -> "GenerationContext":
        """A fresh, deterministic context.  Mostly for tests and scripts."""
        return cls(fake=create_faker(seed), locale=locale, clock=clock or _utc_now)

    @property
    def random(self):
        """The underlying random.Random instance."""
        return self.fake.random

    def now(self) -> datetime:
        return self.clock()
