"""Field Dispatcher tests.

Tests cover:
    - Known tags resolve; unknown tags raise UnsupportedFieldTypeError
    - generate_field isolates failures: None + warning, never raises
    - Records keep one entry per field, in request order
"""

import logging

import pytest

from mockdata import dispatcher
from mockdata.dispatcher import dispatch, generate_custom_record, generate_field, resolve_generator
from mockdata.errors import UnsupportedFieldTypeError
from mockdata.models import FieldSpec


def test_resolve_generator_unknown_tag_raises():
    with pytest.raises(UnsupportedFieldTypeError) as exc:
        resolve_generator("favouriteDinosaur")
    assert exc.value.field_type == "favouriteDinosaur"
    assert "favouriteDinosaur" in str(exc.value)


def test_dispatch_passes_options_through(ctx):
    value = dispatch(FieldSpec(name="age", type="number", options={"min": 30, "max": 30}), ctx)
    assert value == 30


def test_dispatch_defaults_missing_options(ctx):
    assert 0 <= dispatch(FieldSpec(name="n", type="number"), ctx) <= 1000


def test_generate_field_unknown_type_is_none_and_warns(ctx, caplog):
    with caplog.at_level(logging.WARNING, logger="mockdata.dispatcher"):
        value = generate_field(FieldSpec(name="dino", type="favouriteDinosaur"), ctx)
    assert value is None
    assert "Error generating field dino" in caplog.text
    assert "Unsupported field type: favouriteDinosaur" in caplog.text


def test_generate_field_isolates_generator_fault(ctx, caplog, monkeypatch):
    def broken(ctx, options):
        raise ValueError("boom")

    monkeypatch.setitem(dispatcher.GENERATORS, "word", broken)
    with caplog.at_level(logging.WARNING, logger="mockdata.dispatcher"):
        value = generate_field(FieldSpec(name="w", type="word"), ctx)
    assert value is None
    assert "boom" in caplog.text


def test_custom_record_keeps_order_and_count(ctx):
    fields = [
        FieldSpec(name="id", type="uuid"),
        FieldSpec(name="mystery", type="nope"),
        FieldSpec(name="email", type="email"),
        FieldSpec(name="active", type="boolean"),
    ]
    record = generate_custom_record(fields, ctx)
    assert list(record) == ["id", "mystery", "email", "active"]
    assert record["mystery"] is None
    assert isinstance(record["active"], bool)


def test_custom_address_is_flat_string(ctx):
    record = generate_custom_record([FieldSpec(name="home", type="address")], ctx)
    assert isinstance(record["home"], str)


def test_empty_field_list_gives_empty_record(ctx):
    assert generate_custom_record([], ctx) == {}
