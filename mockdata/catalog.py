# =============================================================================
# mockdata/catalog.py  -  The closed vocabulary of field type tags
# =============================================================================
#
# This is the single source of truth for "which types can a caller ask for".
# Two other places depend on it:
#
#   generators.py   checks at import time that its registration table covers
#                   exactly these tags (no more, no less)
#   mcp_server.py   renders this list into the generateCustomData tool
#                   description, so the host always sees the real catalog
#
# "color" appears under Vehicle AND Primitive.  It is one tag with one
# generator (the hex/rgb one); the double listing only affects the docs.
# =============================================================================

CATALOG: dict[str, tuple[str, ...]] = {
    "Person": (
        "firstName", "lastName", "fullName", "gender", "prefix", "suffix",
        "jobTitle", "jobType", "jobArea", "phone",
    ),
    "Internet": (
        "email", "userName", "password", "url", "ipAddress", "domainName",
        "protocol", "httpMethod",
    ),
    "Location": (
        "address", "city", "country", "countryCode", "zipCode", "state",
        "stateAbbr", "latitude", "longitude", "timeZone",
    ),
    "Date/Time": ("date", "weekday", "month", "timestamp"),
    "Commerce": (
        "product", "productName", "price", "department", "productMaterial",
        "productDescription",
    ),
    "Company": (
        "companyName", "catchPhrase", "bs", "bsAdjective", "bsBuzz", "bsNoun",
    ),
    "Finance": (
        "accountNumber", "accountName", "amount", "currencyCode",
        "currencyName", "currencySymbol", "bitcoinAddress",
    ),
    "Vehicle": ("vehicle", "manufacturer", "model", "type", "fuel", "vin", "color"),
    "System": ("fileName", "mimeType", "fileExt", "directoryPath", "semver"),
    "Science": ("chemicalElement", "unit", "scientificUnit"),
    "Music": ("genre", "songName", "artist"),
    "Primitive": (
        "number", "float", "word", "words", "sentence", "paragraph", "text",
        "uuid", "boolean", "color",
    ),
}

# Option hints shown next to a tag in the tool description.
OPTION_HINTS: dict[str, str] = {
    "date": "options: past, future, between",
    "price": "options: min, max",
    "number": "options: min, max",
    "float": "options: min, max, precision",
    "color": "options: format: 'hex'|'rgb'",
}


def all_tags() -> frozenset[str]:
    """Every tag in the catalog, de-duplicated."""
    return frozenset(tag for tags in CATALOG.values() for tag in tags)


def describe_catalog() -> str:
    """Render the catalog as the indented block used in tool descriptions."""
    lines = []
    for category, tags in CATALOG.items():
        rendered = []
        for tag in tags:
            hint = OPTION_HINTS.get(tag)
            rendered.append(f'"{tag}" ({hint})' if hint else f'"{tag}"')
        lines.append(f"{category}:")
        lines.append("- " + " | ".join(rendered))
        lines.append("")
    return "\n".join(lines).rstrip()
