"""MCP surface tests, run in-process through fastmcp.Client.

Tests cover:
    - The three camelCase tools are listed
    - The custom-data description carries the full type catalog
    - Success replies are a single 2-space JSON text block
    - Request-level failures come back with isError and the failure envelope,
      including calls FastMCP rejects (unknown tool, arguments off the schema)
    - generateCustomData advertises name/type/options items
"""

import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from mockdata.models import GenerationResult
from tools.mcp_server import _reply, mcp


@pytest.mark.asyncio
async def test_lists_exactly_three_tools():
    async with Client(mcp) as client:
        tools = await client.list_tools()
    assert sorted(t.name for t in tools) == ["generateCompany", "generateCustomData", "generatePerson"]


@pytest.mark.asyncio
async def test_custom_data_description_lists_catalog():
    async with Client(mcp) as client:
        tools = {t.name: t for t in await client.list_tools()}
    description = tools["generateCustomData"].description
    assert '"bitcoinAddress"' in description
    assert "options: min, max, precision" in description


@pytest.mark.asyncio
async def test_generate_custom_data_returns_json_text():
    fields = [
        {"name": "id", "type": "uuid"},
        {"name": "rgb", "type": "color", "options": {"format": "rgb"}},
        {"name": "bad", "type": "hologram"},
    ]
    async with Client(mcp) as client:
        result = await client.call_tool("generateCustomData", {"fields": fields})
    assert not result.is_error
    text = result.content[0].text
    record = json.loads(text)
    assert list(record) == ["id", "rgb", "bad"]
    assert record["bad"] is None
    assert text.startswith('{\n  "id": ')


@pytest.mark.asyncio
async def test_generate_person_nested_address():
    async with Client(mcp) as client:
        result = await client.call_tool("generatePerson", {"fields": ["lastName", "address"]})
    record = json.loads(result.content[0].text)
    assert set(record["address"]) == {"street", "city", "state", "country", "zipCode"}


@pytest.mark.asyncio
async def test_generate_company_accepts_other_locales():
    async with Client(mcp) as client:
        result = await client.call_tool(
            "generateCompany", {"fields": ["name", "catchPhrase"], "locale": "fr"},
        )
    assert list(json.loads(result.content[0].text)) == ["name", "catchPhrase"]


@pytest.mark.asyncio
async def test_request_level_failure_sets_error_flag():
    fields = [{"name": "dup", "type": "word"}, {"name": "dup", "type": "email"}]
    async with Client(mcp) as client:
        result = await client.call_tool(
            "generateCustomData", {"fields": fields}, raise_on_error=False,
        )
    assert result.is_error
    text = result.content[0].text
    assert "Duplicate field name: dup" in text
    assert '"status": "failed"' in text


@pytest.mark.asyncio
async def test_unknown_tool_gets_failure_envelope():
    async with Client(mcp) as client:
        result = await client.call_tool("doesNotExist", {"fields": []}, raise_on_error=False)
    assert result.is_error
    assert json.loads(result.content[0].text) == {
        "error": "Unknown tool: doesNotExist", "status": "failed",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("tool_name, args, message", [
    ("generateCustomData", {}, "'fields' is required"),
    ("generateCustomData", {"fields": "email"}, "'fields' must be an array"),
    ("generateCustomData", {"fields": [{"type": "email"}]}, "fields[0].name must be a non-empty string"),
    ("generatePerson", {"fields": ["firstName"], "locale": 42}, "'locale' must be a string"),
])
async def test_schema_rejections_get_failure_envelope(tool_name, args, message):
    async with Client(mcp) as client:
        result = await client.call_tool(tool_name, args, raise_on_error=False)
    assert result.is_error
    assert json.loads(result.content[0].text) == {"error": message, "status": "failed"}


@pytest.mark.asyncio
async def test_out_of_enum_person_tag_gets_failure_envelope():
    async with Client(mcp) as client:
        result = await client.call_tool(
            "generatePerson", {"fields": ["shoeSize"]}, raise_on_error=False,
        )
    assert result.is_error
    payload = json.loads(result.content[0].text)
    assert payload["status"] == "failed"
    assert payload["error"]


@pytest.mark.asyncio
async def test_custom_data_schema_describes_field_items():
    async with Client(mcp) as client:
        tools = {t.name: t for t in await client.list_tools()}
    schema = tools["generateCustomData"].inputSchema
    items = schema["properties"]["fields"]["items"]
    if "$ref" in items:
        items = schema["$defs"][items["$ref"].rsplit("/", 1)[-1]]
    assert set(items["required"]) == {"name", "type"}
    assert set(items["properties"]) == {"name", "type", "options"}
    assert items["properties"]["options"]["type"] == "object"


def test_reply_raises_tool_error_with_envelope():
    failed = GenerationResult(tool_name="doesNotExist", error="Unknown tool: doesNotExist")
    with pytest.raises(ToolError) as exc:
        _reply(failed)
    assert json.loads(str(exc.value)) == {"error": "Unknown tool: doesNotExist", "status": "failed"}


def test_reply_returns_rendered_record():
    ok = GenerationResult(tool_name="generatePerson", record={"firstName": "Ada"})
    assert _reply(ok) == '{\n  "firstName": "Ada"\n}'
