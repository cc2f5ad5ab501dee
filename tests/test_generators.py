"""Value generator tests.

Tests cover:
    - Every registered tag yields a value of its documented kind
    - Numeric bounds: defaults, custom, inverted, invalid options
    - price stays a two-decimal string inside its bounds
    - color hex / rgb formats
    - date past / future / between / recent relative to the context clock
    - Nested values (chemicalElement, unit)
"""

import re
import uuid
from datetime import timedelta

import pytest

from conftest import FROZEN_NOW, make_context, parse_iso
from mockdata.generators import GENERATORS

_STRING_TAGS = {
    tag for tag in GENERATORS
    if tag not in {
        "latitude", "longitude", "timestamp", "number", "float", "boolean",
        "chemicalElement", "unit", "scientificUnit",
    }
}


def _gen(tag, ctx, **options):
    return GENERATORS[tag](ctx, options)


@pytest.mark.parametrize("tag", sorted(_STRING_TAGS))
def test_string_tags_produce_non_empty_strings(tag, ctx):
    value = _gen(tag, ctx)
    assert isinstance(value, str)
    assert value


def test_number_defaults_to_0_1000(ctx):
    values = [_gen("number", ctx) for _ in range(200)]
    assert all(isinstance(v, int) and 0 <= v <= 1000 for v in values)


def test_number_respects_bounds_inclusive(ctx):
    values = {_gen("number", ctx, min=5, max=7) for _ in range(200)}
    assert values == {5, 6, 7}


def test_number_swaps_inverted_bounds(ctx):
    values = [_gen("number", ctx, min=50, max=10) for _ in range(50)]
    assert all(10 <= v <= 50 for v in values)


def test_number_ignores_non_numeric_options(ctx):
    values = [_gen("number", ctx, min="abc", max=True) for _ in range(50)]
    assert all(0 <= v <= 1000 for v in values)


def test_float_rounds_to_precision(ctx):
    for _ in range(50):
        value = _gen("float", ctx, min=1, max=2, precision=3)
        assert isinstance(value, float)
        assert 1 <= value <= 2
        assert round(value, 3) == value


def test_float_default_precision_is_two(ctx):
    value = _gen("float", ctx)
    assert 0 <= value <= 1000
    assert round(value, 2) == value


def test_price_is_numeric_string_within_bounds(ctx):
    for _ in range(100):
        value = _gen("price", ctx, min=10, max=20)
        assert isinstance(value, str)
        assert re.fullmatch(r"\d+\.\d{2}", value)
        assert 10 <= float(value) <= 20


def test_price_defaults_to_1_1000(ctx):
    values = [float(_gen("price", ctx)) for _ in range(100)]
    assert all(1 <= v <= 1000 for v in values)


def test_amount_is_two_decimal_string(ctx):
    value = _gen("amount", ctx)
    assert re.fullmatch(r"\d+\.\d{2}", value)


def test_color_defaults_to_hex(ctx):
    for _ in range(20):
        assert re.fullmatch(r"#[0-9a-fA-F]{6}", _gen("color", ctx))


def test_color_rgb_format(ctx):
    for _ in range(20):
        value = _gen("color", ctx, format="rgb")
        match = re.fullmatch(r"rgb\((\d+), (\d+), (\d+)\)", value)
        assert match
        assert all(0 <= int(channel) <= 255 for channel in match.groups())


def test_date_past_is_strictly_before_now(ctx):
    for _ in range(20):
        moment = parse_iso(_gen("date", ctx, past=True))
        assert FROZEN_NOW - timedelta(days=366) <= moment < FROZEN_NOW


def test_date_future_is_strictly_after_now(ctx):
    for _ in range(20):
        moment = parse_iso(_gen("date", ctx, future=True))
        assert FROZEN_NOW < moment <= FROZEN_NOW + timedelta(days=366)


def test_date_recent_is_within_last_day(ctx):
    for _ in range(20):
        moment = parse_iso(_gen("date", ctx))
        assert FROZEN_NOW - timedelta(days=1) <= moment < FROZEN_NOW


def test_date_between_stays_in_range(ctx):
    for _ in range(20):
        moment = parse_iso(_gen("date", ctx, between=["2020-01-01", "2020-01-31T23:59:59Z"]))
        assert moment.year == 2020 and moment.month == 1


def test_date_between_garbage_falls_back_to_recent(ctx):
    moment = parse_iso(_gen("date", ctx, between=["not a date", 3]))
    assert FROZEN_NOW - timedelta(days=1) <= moment < FROZEN_NOW


def test_date_is_iso_with_z_suffix(ctx):
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", _gen("date", ctx))


def test_timestamp_is_epoch_millis_int(ctx):
    value = _gen("timestamp", ctx)
    assert isinstance(value, int)
    now_ms = int(FROZEN_NOW.timestamp() * 1000)
    assert abs(value - now_ms) <= 366 * 86_400_000


def test_uuid_is_version_4(ctx):
    assert uuid.UUID(_gen("uuid", ctx)).version == 4


def test_boolean_is_bool(ctx):
    values = {_gen("boolean", ctx) for _ in range(50)}
    assert values == {True, False}


def test_coordinates_are_floats_in_range(ctx):
    assert -90 <= _gen("latitude", ctx) <= 90
    assert -180 <= _gen("longitude", ctx) <= 180
    assert isinstance(_gen("latitude", ctx), float)


def test_chemical_element_is_nested_record(ctx):
    value = _gen("chemicalElement", ctx)
    assert set(value) == {"symbol", "name", "atomicNumber"}
    assert isinstance(value["atomicNumber"], int)


@pytest.mark.parametrize("tag", ["unit", "scientificUnit"])
def test_units_are_name_symbol_records(tag, ctx):
    assert set(_gen(tag, ctx)) == {"name", "symbol"}


def test_vin_is_17_chars_without_ioq(ctx):
    vin = _gen("vin", ctx)
    assert len(vin) == 17
    assert not set(vin) & set("IOQ")


def test_bitcoin_address_shape(ctx):
    value = _gen("bitcoinAddress", ctx)
    assert value[0] in "13"
    assert 26 <= len(value) <= 34


def test_semver_shape(ctx):
    assert re.fullmatch(r"\d+\.\d+\.\d+", _gen("semver", ctx))


def test_directory_path_is_absolute_without_file(ctx):
    path = _gen("directoryPath", ctx)
    assert path.startswith("/")
    assert "." not in path.rsplit("/", 1)[-1]


def test_same_seed_same_values():
    first = [_gen(tag, make_context(99)) for tag in sorted(GENERATORS)]
    second = [_gen(tag, make_context(99)) for tag in sorted(GENERATORS)]
    assert first == second
