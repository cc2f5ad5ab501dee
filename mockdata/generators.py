# =============================================================================
# mockdata/generators.py  -  Value Generators (one per catalog tag)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a type tag ("email", "price", "date", ...) into one synthetic value.
#   Every generator has the same signature:
#
#       generator(ctx: GenerationContext, options: Mapping) -> value
#
#   and NEVER raises because of its options.  Missing options, options of the
#   wrong type, or inverted bounds all fall back to sensible defaults.
#
# THE REGISTRATION TABLE:
#   GENERATORS maps each tag to its function.  Every mapping is spelled out
#   below; adding a tag means adding a line here AND in catalog.py.  At import
#   time check_registry() compares the two and refuses to load if they drift,
#   so "unsupported type" for a catalog tag can never happen at request time.
#
# DATA SOURCE:
#   Faker (en_US) supplies most values.  Where Faker has no provider for a
#   tag (vehicles, music, science, job types...) a small word list below
#   fills the gap, sampled through the same Faker random source so a seeded
#   context stays reproducible.
# =============================================================================

import math
import posixpath
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping

from faker.providers.company.en_US import Provider as CompanyProvider

from mockdata.catalog import all_tags
from mockdata.context import GenerationContext

Generator = Callable[[GenerationContext, Mapping[str, Any]], Any]

_SECOND_MS = 1000
_DAY_MS = 86_400 * _SECOND_MS
_YEAR_MS = 365 * _DAY_MS

_BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_VIN_CHARS = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"

# bsWords is (verbs, adjectives, nouns) in Faker's en_US company provider.
_BS_VERBS, _BS_ADJECTIVES, _BS_NOUNS = CompanyProvider.bsWords


# =============================================================================
# Word lists for tags Faker has no provider for
# =============================================================================
_GENDERS = (
    "Female", "Male", "Non-binary", "Agender", "Genderfluid", "Genderqueer",
    "Bigender", "Two-spirit", "Trans woman", "Trans man", "Demigirl", "Demiboy",
)

_JOB_TYPES = (
    "Supervisor", "Associate", "Executive", "Liaison", "Officer", "Manager",
    "Engineer", "Specialist", "Director", "Coordinator", "Administrator",
    "Architect", "Analyst", "Designer", "Planner", "Orchestrator", "Technician",
    "Developer", "Producer", "Consultant", "Assistant", "Facilitator", "Agent",
    "Representative", "Strategist",
)

_JOB_AREAS = (
    "Solutions", "Program", "Brand", "Security", "Research", "Marketing",
    "Directives", "Implementation", "Integration", "Functionality", "Response",
    "Paradigm", "Tactics", "Identity", "Markets", "Group", "Division",
    "Applications", "Optimization", "Operations", "Infrastructure", "Intranet",
    "Communications", "Web", "Branding", "Quality", "Assurance", "Mobility",
    "Accounts", "Data", "Creative", "Configuration", "Accountability",
    "Interactions", "Factors", "Usability", "Metrics",
)

_PROTOCOLS = ("http", "https")
_HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")

_PRODUCTS = (
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves",
    "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels", "Soap", "Tuna",
    "Chicken", "Fish", "Cheese", "Bacon", "Pizza", "Salad", "Sausages", "Chips",
)
_PRODUCT_ADJECTIVES = (
    "Small", "Ergonomic", "Electronic", "Rustic", "Intelligent", "Gorgeous",
    "Incredible", "Elegant", "Fantastic", "Practical", "Modern", "Recycled",
    "Sleek", "Bespoke", "Awesome", "Generic", "Handcrafted", "Handmade",
    "Oriental", "Licensed", "Luxurious", "Refined", "Unbranded", "Tasty",
)
_PRODUCT_MATERIALS = (
    "Steel", "Bronze", "Wooden", "Concrete", "Plastic", "Cotton", "Granite",
    "Rubber", "Metal", "Soft", "Fresh", "Frozen",
)
_DEPARTMENTS = (
    "Books", "Movies", "Music", "Games", "Electronics", "Computers", "Home",
    "Garden", "Tools", "Grocery", "Health", "Beauty", "Toys", "Kids", "Baby",
    "Clothing", "Shoes", "Jewelery", "Sports", "Outdoors", "Automotive",
    "Industrial",
)

_ACCOUNT_TYPES = (
    "Checking", "Savings", "Money Market", "Investment", "Home Loan",
    "Credit Card", "Auto Loan", "Personal Loan",
)

_MANUFACTURERS = (
    "Aston Martin", "Audi", "Bentley", "BMW", "Bugatti", "Cadillac", "Chevrolet",
    "Chrysler", "Dodge", "Ferrari", "Fiat", "Ford", "Honda", "Hyundai",
    "Jaguar", "Jeep", "Kia", "Lamborghini", "Land Rover", "Maserati", "Mazda",
    "Mercedes Benz", "Mini", "Nissan", "Polestar", "Porsche", "Rolls Royce",
    "Smart", "Tesla", "Toyota", "Volkswagen", "Volvo",
)
_MODELS = (
    "Fiesta", "Focus", "Taurus", "Mustang", "Explorer", "Expedition", "F-150",
    "Model T", "Ranchero", "Volt", "Cruze", "Malibu", "Impala", "Camaro",
    "Corvette", "Colorado", "Silverado", "El Camino", "CTS", "XTS", "ATS",
    "Escalade", "Alpine", "Charger", "LeBaron", "PT Cruiser", "Challenger",
    "Durango", "Grand Caravan", "Wrangler", "Grand Cherokee", "Roadster",
    "Model S", "Model 3", "Camry", "Prius", "Land Cruiser", "Accord", "Civic",
    "Element", "Sentra", "Altima", "A8", "A4", "Beetle", "Jetta", "Golf",
    "911", "Spyder", "Countach", "Mercielago", "Aventador", "Cayenne", "Fortwo",
    "XC90", "Model X", "Model Y",
)
_VEHICLE_TYPES = (
    "Cargo Van", "Convertible", "Coupe", "Crew Cab Pickup",
    "Extended Cab Pickup", "Hatchback", "Minivan", "Passenger Van", "SUV",
    "Sedan", "Wagon",
)
_FUELS = ("Diesel", "Electric", "Gasoline", "Hybrid")

# (symbol, name, atomic number)
_CHEMICAL_ELEMENTS = (
    ("H", "Hydrogen", 1), ("He", "Helium", 2), ("Li", "Lithium", 3),
    ("Be", "Beryllium", 4), ("B", "Boron", 5), ("C", "Carbon", 6),
    ("N", "Nitrogen", 7), ("O", "Oxygen", 8), ("F", "Fluorine", 9),
    ("Ne", "Neon", 10), ("Na", "Sodium", 11), ("Mg", "Magnesium", 12),
    ("Al", "Aluminium", 13), ("Si", "Silicon", 14), ("P", "Phosphorus", 15),
    ("S", "Sulfur", 16), ("Cl", "Chlorine", 17), ("Ar", "Argon", 18),
    ("K", "Potassium", 19), ("Ca", "Calcium", 20), ("Ti", "Titanium", 22),
    ("Cr", "Chromium", 24), ("Mn", "Manganese", 25), ("Fe", "Iron", 26),
    ("Co", "Cobalt", 27), ("Ni", "Nickel", 28), ("Cu", "Copper", 29),
    ("Zn", "Zinc", 30), ("Br", "Bromine", 35), ("Kr", "Krypton", 36),
    ("Ag", "Silver", 47), ("Sn", "Tin", 50), ("I", "Iodine", 53),
    ("Xe", "Xenon", 54), ("W", "Tungsten", 74), ("Pt", "Platinum", 78),
    ("Au", "Gold", 79), ("Hg", "Mercury", 80), ("Pb", "Lead", 82),
    ("Rn", "Radon", 86), ("U", "Uranium", 92), ("Pu", "Plutonium", 94),
)

# (name, symbol)
_UNITS = (
    ("meter", "m"), ("second", "s"), ("mole", "mol"), ("ampere", "A"),
    ("kelvin", "K"), ("candela", "cd"), ("kilogram", "kg"), ("radian", "rad"),
    ("hertz", "Hz"), ("newton", "N"), ("pascal", "Pa"), ("joule", "J"),
    ("watt", "W"), ("coulomb", "C"), ("volt", "V"), ("ohm", "Ω"),
    ("tesla", "T"), ("degree Celsius", "°C"), ("lumen", "lm"),
    ("becquerel", "Bq"), ("gray", "Gy"), ("sievert", "Sv"),
    ("steradian", "sr"), ("farad", "F"), ("siemens", "S"), ("weber", "Wb"),
    ("henry", "H"), ("lux", "lx"), ("katal", "kat"),
)

_GENRES = (
    "Rock", "Pop", "Jazz", "Blues", "Classical", "Country", "Electronic",
    "Folk", "Funk", "Hip Hop", "Latin", "Metal", "Reggae", "Soul", "Rap",
    "Stage And Screen", "Non Music", "World",
)
_SONG_NAMES = (
    "Blue Moon", "Fly Me to the Moon", "Hey Jude", "Imagine", "Respect",
    "Yesterday", "Crazy", "Fever", "Stand by Me", "My Girl", "Hotel California",
    "Bohemian Rhapsody", "Purple Rain", "Smooth", "Jolene", "Waterloo",
    "Sweet Caroline", "Heart of Glass", "Dancing Queen", "Let It Be",
    "Superstition", "Billie Jean", "Wonderwall", "Vogue",
)
_ARTISTS = (
    "The Beatles", "Elvis Presley", "Aretha Franklin", "Stevie Wonder",
    "Madonna", "Queen", "ABBA", "Prince", "Dolly Parton", "Fleetwood Mac",
    "Nina Simone", "Bob Marley", "David Bowie", "Whitney Houston",
    "Johnny Cash", "Ella Fitzgerald", "Miles Davis", "Blondie", "Oasis",
    "Santana", "The Eagles", "Neil Diamond", "Ray Charles", "Otis Redding",
)


# =============================================================================
# Option helpers
# =============================================================================
def _number_option(options: Mapping[str, Any], key: str, default: float) -> float:
    """Read a numeric option; booleans, strings, NaN and inf fall back."""
    value = options.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if math.isnan(value) or math.isinf(value):
        return default
    return value


def _bounds(options: Mapping[str, Any], low: float, high: float) -> tuple[float, float]:
    lo = _number_option(options, "min", low)
    hi = _number_option(options, "max", high)
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi


def _int_range(lo: float, hi: float) -> tuple[int, int]:
    """Integer bounds inside [lo, hi]; collapses to one value if none fits."""
    int_lo, int_hi = math.ceil(lo), math.floor(hi)
    if int_lo > int_hi:
        return int_hi, int_hi
    return int_lo, int_hi


def _money(ctx: GenerationContext, lo: float, hi: float) -> str:
    """A two-decimal string inside [lo, hi]."""
    cents_lo, cents_hi = _int_range(lo * 100, hi * 100)
    cents = ctx.fake.random_int(cents_lo, cents_hi)
    sign = "-" if cents < 0 else ""
    cents = abs(cents)
    return f"{sign}{cents // 100}.{cents % 100:02d}"


# =============================================================================
# Date helpers (shared with records.py)
# =============================================================================
def to_iso(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_moment(value: Any):
    if not isinstance(value, str):
        return None
    try:
        moment = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def past_moment(ctx: GenerationContext, years: int = 1) -> datetime:
    """A moment strictly before now, at most `years` years ago."""
    offset = ctx.fake.random_int(1, years * _YEAR_MS)
    return ctx.now() - timedelta(milliseconds=offset)


def future_moment(ctx: GenerationContext, years: int = 1) -> datetime:
    """A moment strictly after now, at most `years` years ahead."""
    offset = ctx.fake.random_int(1, years * _YEAR_MS)
    return ctx.now() + timedelta(milliseconds=offset)


def recent_moment(ctx: GenerationContext) -> datetime:
    """A moment within the last day, strictly before now."""
    offset = ctx.fake.random_int(1, _DAY_MS)
    return ctx.now() - timedelta(milliseconds=offset)


def _between_moment(ctx: GenerationContext, bounds: Any):
    if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
        return None
    start, end = _parse_moment(bounds[0]), _parse_moment(bounds[1])
    if start is None or end is None:
        return None
    if start > end:
        start, end = end, start
    span_ms = int((end - start).total_seconds() * 1000)
    return start + timedelta(milliseconds=ctx.fake.random_int(0, span_ms))


# =============================================================================
# Generators that take options or need more than one Faker call
# =============================================================================
def generate_date(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    """past / future / between / recent, checked in that order."""
    if options.get("past"):
        return to_iso(past_moment(ctx))
    if options.get("future"):
        return to_iso(future_moment(ctx))
    between = _between_moment(ctx, options.get("between"))
    if between is not None:
        return to_iso(between)
    return to_iso(recent_moment(ctx))


def generate_timestamp(ctx: GenerationContext, options: Mapping[str, Any]) -> int:
    """Epoch milliseconds within a year either side of now."""
    now_ms = int(ctx.now().timestamp() * 1000)
    return now_ms + ctx.fake.random_int(-_YEAR_MS, _YEAR_MS)


def generate_number(ctx: GenerationContext, options: Mapping[str, Any]) -> int:
    lo, hi = _int_range(*_bounds(options, 0, 1000))
    return ctx.fake.random_int(lo, hi)


def generate_float(ctx: GenerationContext, options: Mapping[str, Any]) -> float:
    lo, hi = _bounds(options, 0, 1000)
    precision = _number_option(options, "precision", 2)
    precision = min(max(int(precision), 0), 10)
    value = round(ctx.random.uniform(lo, hi), precision)
    return min(max(value, lo), hi)


def generate_price(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    # Returned as a string, unlike number/float.  Callers rely on it.
    lo, hi = _bounds(options, 1, 1000)
    return _money(ctx, lo, hi)


def generate_amount(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    return _money(ctx, 0, 1000)


def generate_color(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    if options.get("format") == "rgb":
        r, g, b = (ctx.fake.random_int(0, 255) for _ in range(3))
        return f"rgb({r}, {g}, {b})"
    return "#" + ctx.fake.hexify("^^^^^^")


def generate_product_name(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    adjective = ctx.fake.random_element(_PRODUCT_ADJECTIVES)
    material = ctx.fake.random_element(_PRODUCT_MATERIALS)
    product = ctx.fake.random_element(_PRODUCTS)
    return f"{adjective} {material} {product}"


def generate_account_name(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    return f"{ctx.fake.random_element(_ACCOUNT_TYPES)} Account"


def generate_bitcoin_address(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    prefix = ctx.fake.random_element(("1", "3"))
    body = ctx.fake.lexify("?" * ctx.fake.random_int(25, 33), letters=_BASE58)
    return prefix + body


def generate_vehicle(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    manufacturer = ctx.fake.random_element(_MANUFACTURERS)
    model = ctx.fake.random_element(_MODELS)
    return f"{manufacturer} {model}"


def generate_vin(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    return ctx.fake.lexify("?" * 17, letters=_VIN_CHARS)


def generate_directory_path(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    path = ctx.fake.file_path(depth=ctx.fake.random_int(1, 3))
    return posixpath.dirname(path)


def generate_semver(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    ri = ctx.fake.random_int
    return f"{ri(0, 9)}.{ri(0, 20)}.{ri(0, 20)}"


def generate_chemical_element(ctx: GenerationContext, options: Mapping[str, Any]) -> dict:
    symbol, name, number = ctx.fake.random_element(_CHEMICAL_ELEMENTS)
    return {"symbol": symbol, "name": name, "atomicNumber": number}


def generate_unit(ctx: GenerationContext, options: Mapping[str, Any]) -> dict:
    name, symbol = ctx.fake.random_element(_UNITS)
    return {"name": name, "symbol": symbol}


def generate_words(ctx: GenerationContext, options: Mapping[str, Any]) -> str:
    return " ".join(ctx.fake.words(nb=ctx.fake.random_int(1, 3)))


# =============================================================================
# The registration table
# =============================================================================
# One-liners stay inline as lambdas; anything with options or more than one
# step is a named function above.
# =============================================================================
GENERATORS: dict[str, Generator] = {
    # --- Person ---
    "firstName": lambda ctx, _: ctx.fake.first_name(),
    "lastName": lambda ctx, _: ctx.fake.last_name(),
    "fullName": lambda ctx, _: ctx.fake.name(),
    "gender": lambda ctx, _: ctx.fake.random_element(_GENDERS),
    "prefix": lambda ctx, _: ctx.fake.prefix(),
    "suffix": lambda ctx, _: ctx.fake.suffix(),
    "jobTitle": lambda ctx, _: ctx.fake.job(),
    "jobType": lambda ctx, _: ctx.fake.random_element(_JOB_TYPES),
    "jobArea": lambda ctx, _: ctx.fake.random_element(_JOB_AREAS),
    "phone": lambda ctx, _: ctx.fake.phone_number(),

    # --- Internet ---
    "email": lambda ctx, _: ctx.fake.email(),
    "userName": lambda ctx, _: ctx.fake.user_name(),
    "password": lambda ctx, _: ctx.fake.password(),
    "url": lambda ctx, _: ctx.fake.url(),
    "ipAddress": lambda ctx, _: ctx.fake.ipv4(),
    "domainName": lambda ctx, _: ctx.fake.domain_name(),
    "protocol": lambda ctx, _: ctx.fake.random_element(_PROTOCOLS),
    "httpMethod": lambda ctx, _: ctx.fake.random_element(_HTTP_METHODS),

    # --- Location ---
    "address": lambda ctx, _: ctx.fake.street_address(),
    "city": lambda ctx, _: ctx.fake.city(),
    "country": lambda ctx, _: ctx.fake.country(),
    "countryCode": lambda ctx, _: ctx.fake.country_code(),
    "zipCode": lambda ctx, _: ctx.fake.postcode(),
    "state": lambda ctx, _: ctx.fake.state(),
    "stateAbbr": lambda ctx, _: ctx.fake.state_abbr(),
    "latitude": lambda ctx, _: float(ctx.fake.latitude()),
    "longitude": lambda ctx, _: float(ctx.fake.longitude()),
    "timeZone": lambda ctx, _: ctx.fake.timezone(),

    # --- Date/Time ---
    "date": generate_date,
    "weekday": lambda ctx, _: ctx.fake.day_of_week(),
    "month": lambda ctx, _: ctx.fake.month_name(),
    "timestamp": generate_timestamp,

    # --- Commerce ---
    "product": lambda ctx, _: ctx.fake.random_element(_PRODUCTS),
    "productName": generate_product_name,
    "price": generate_price,
    "department": lambda ctx, _: ctx.fake.random_element(_DEPARTMENTS),
    "productMaterial": lambda ctx, _: ctx.fake.random_element(_PRODUCT_MATERIALS),
    "productDescription": lambda ctx, _: ctx.fake.paragraph(nb_sentences=2),

    # --- Company ---
    "companyName": lambda ctx, _: ctx.fake.company(),
    "catchPhrase": lambda ctx, _: ctx.fake.catch_phrase(),
    "bs": lambda ctx, _: ctx.fake.bs(),
    "bsAdjective": lambda ctx, _: ctx.fake.random_element(_BS_ADJECTIVES),
    "bsBuzz": lambda ctx, _: ctx.fake.random_element(_BS_VERBS),
    "bsNoun": lambda ctx, _: ctx.fake.random_element(_BS_NOUNS),

    # --- Finance ---
    "accountNumber": lambda ctx, _: ctx.fake.numerify("########"),
    "accountName": generate_account_name,
    "amount": generate_amount,
    "currencyCode": lambda ctx, _: ctx.fake.currency_code(),
    "currencyName": lambda ctx, _: ctx.fake.currency_name(),
    "currencySymbol": lambda ctx, _: ctx.fake.currency_symbol(),
    "bitcoinAddress": generate_bitcoin_address,

    # --- Vehicle ---
    "vehicle": generate_vehicle,
    "manufacturer": lambda ctx, _: ctx.fake.random_element(_MANUFACTURERS),
    "model": lambda ctx, _: ctx.fake.random_element(_MODELS),
    "type": lambda ctx, _: ctx.fake.random_element(_VEHICLE_TYPES),
    "fuel": lambda ctx, _: ctx.fake.random_element(_FUELS),
    "vin": generate_vin,

    # --- System ---
    "fileName": lambda ctx, _: ctx.fake.file_name(),
    "mimeType": lambda ctx, _: ctx.fake.mime_type(),
    "fileExt": lambda ctx, _: ctx.fake.file_extension(),
    "directoryPath": generate_directory_path,
    "semver": generate_semver,

    # --- Science ---
    "chemicalElement": generate_chemical_element,
    "unit": generate_unit,
    "scientificUnit": generate_unit,

    # --- Music ---
    "genre": lambda ctx, _: ctx.fake.random_element(_GENRES),
    "songName": lambda ctx, _: ctx.fake.random_element(_SONG_NAMES),
    "artist": lambda ctx, _: ctx.fake.random_element(_ARTISTS),

    # --- Primitive ---
    "number": generate_number,
    "float": generate_float,
    "word": lambda ctx, _: ctx.fake.word(),
    "words": generate_words,
    "sentence": lambda ctx, _: ctx.fake.sentence(),
    "paragraph": lambda ctx, _: ctx.fake.paragraph(),
    "text": lambda ctx, _: ctx.fake.text(),
    "uuid": lambda ctx, _: str(ctx.fake.uuid4()),
    "boolean": lambda ctx, _: ctx.fake.boolean(),
    "color": generate_color,
}


def check_registry(registry: Mapping[str, Generator], tags: frozenset[str]) -> None:
    """Fail loudly if the table and the catalog disagree."""
    missing = sorted(tags - registry.keys())
    extra = sorted(registry.keys() - tags)
    if missing or extra:
        raise RuntimeError(
            f"Generator table out of sync with catalog: "
            f"missing={missing} extra={extra}"
        )


check_registry(GENERATORS, all_tags())
