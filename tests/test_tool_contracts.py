"""Contract tests for the documentation tools as exposed over MCP."""

import asyncio
import json

import pytest
from fastmcp.exceptions import ToolError
from pydantic import ValidationError

from codebolt_docs_mcp.config import DocsConfig
from codebolt_docs_mcp.server import create_server, get_server


def _text(result) -> str:
    assert result is not None
    assert len(result.content) > 0
    return result.content[0].text


def test_tools_registered() -> None:
    tools = asyncio.run(get_server()._tool_manager.get_tools())
    assert set(tools.keys()) == {
        "getSdkFunctionsList",
        "getSdkFunctionDetail",
        "getSdkSetupInfo",
        "searchSdkDocs",
    }


@pytest.mark.asyncio
async def test_functions_list_contract() -> None:
    result = await get_server()._tool_manager.call_tool("getSdkFunctionsList", {})
    entries = json.loads(_text(result))

    assert len(entries) == 20
    assert set(entries[0]) == {"module", "function", "signature", "description"}
    signatures = {e["function"]: e["signature"] for e in entries}
    assert signatures["listFile"] == (
        "listFile(folderPath: string, isRecursive?: boolean) => Promise<FileListResponse>"
    )


@pytest.mark.asyncio
async def test_function_detail_contract() -> None:
    result = await get_server()._tool_manager.call_tool(
        "getSdkFunctionDetail",
        {"moduleName": "git", "functionName": "commit"},
    )
    detail = json.loads(_text(result))

    assert detail["returns"] == "Promise<GitCommitResponse>"
    assert [p["name"] for p in detail["parameters"]] == ["repoPath", "message"]
    assert detail["example"] == "codebolt.git.commit('/path/to/repo', 'Add new feature')"


@pytest.mark.asyncio
async def test_function_detail_unknown_module_is_error() -> None:
    with pytest.raises(ToolError, match="Module 'nope' not found in the Codebolt SDK"):
        await get_server()._tool_manager.call_tool(
            "getSdkFunctionDetail",
            {"moduleName": "nope", "functionName": "x"},
        )


@pytest.mark.asyncio
async def test_function_detail_unknown_function_is_error() -> None:
    with pytest.raises(ToolError, match="Function 'nope' not found in module 'fs'"):
        await get_server()._tool_manager.call_tool(
            "getSdkFunctionDetail",
            {"moduleName": "fs", "functionName": "nope"},
        )


@pytest.mark.asyncio
async def test_function_detail_requires_arguments() -> None:
    with pytest.raises(ValidationError, match="functionName"):
        await get_server()._tool_manager.call_tool("getSdkFunctionDetail", {"moduleName": "fs"})


@pytest.mark.asyncio
async def test_setup_info_contract() -> None:
    result = await get_server()._tool_manager.call_tool("getSdkSetupInfo", {})
    info = json.loads(_text(result))

    assert set(info) == {"import", "initialization", "usage", "modules"}


@pytest.mark.asyncio
async def test_search_contract() -> None:
    result = await get_server()._tool_manager.call_tool("searchSdkDocs", {"query": "git"})
    matches = json.loads(_text(result))

    assert matches[0] == {
        "type": "module",
        "name": "git",
        "description": "Git repository operations",
        "matchReason": "name-or-description",
    }
    assert {m["type"] for m in matches} == {"module", "function", "parameter"}


@pytest.mark.asyncio
async def test_search_empty_query_matches_everything() -> None:
    result = await get_server()._tool_manager.call_tool("searchSdkDocs", {"query": ""})
    assert len(json.loads(_text(result))) == 9 + 20 + 35


@pytest.mark.asyncio
async def test_search_no_results_contract() -> None:
    result = await get_server()._tool_manager.call_tool("searchSdkDocs", {"query": "zzz-nonexistent-zzz"})

    assert _text(result) == (
        'No results found for query: "zzz-nonexistent-zzz". Try a different search term.'
    )


@pytest.mark.asyncio
async def test_search_is_byte_identical_across_calls() -> None:
    first = await get_server()._tool_manager.call_tool("searchSdkDocs", {"query": "path"})
    second = await get_server()._tool_manager.call_tool("searchSdkDocs", {"query": "path"})
    assert _text(first) == _text(second)


@pytest.mark.asyncio
async def test_server_with_alternate_catalog(tmp_path) -> None:
    catalog = {
        "demo": {
            "description": "Demo module",
            "functions": {
                "ping": {
                    "description": "Ping the host",
                    "parameters": [],
                    "returns": "Promise<void>",
                    "example": "codebolt.demo.ping()",
                }
            },
        }
    }
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog), encoding="utf-8")

    server = create_server(DocsConfig(server_name="Demo", catalog_path=path, log_level=0))
    result = await server._tool_manager.call_tool("getSdkFunctionsList", {})

    assert json.loads(_text(result)) == [
        {
            "module": "demo",
            "function": "ping",
            "signature": "ping() => Promise<void>",
            "description": "Ping the host",
        }
    ]
