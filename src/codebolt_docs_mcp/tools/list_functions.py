"""SDK function listing tool - concise catalog of every documented function."""

from fastmcp import FastMCP

from codebolt_docs_mcp.formatting import format_function_list
from codebolt_docs_mcp.query import DocsQueryEngine
from codebolt_docs_mcp.tools.responses import to_tool_result


def register(mcp: FastMCP, engine: DocsQueryEngine) -> None:
    """Register getSdkFunctionsList tool with the MCP server."""

    @mcp.tool(name="getSdkFunctionsList")
    def get_sdk_functions_list() -> str:
        """Get a concise list of all functions available in the Codebolt SDK.

        Each entry has module, function, signature and description. Optional
        parameters are marked with '?' in the signature.

        Related tools:
        - getSdkFunctionDetail: Full documentation for one function
        - searchSdkDocs: Find functions by keyword
        """
        return to_tool_result(format_function_list(engine.list_all_functions()))
