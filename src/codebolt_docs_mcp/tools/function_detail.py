"""SDK function detail tool - full documentation for one function."""

from fastmcp import FastMCP

from codebolt_docs_mcp.errors import LookupFailure
from codebolt_docs_mcp.formatting import format_function_detail, format_lookup_failure
from codebolt_docs_mcp.query import DocsQueryEngine
from codebolt_docs_mcp.tools.responses import to_tool_result
from codebolt_docs_mcp.utils import FunctionName, ModuleName


def register(mcp: FastMCP, engine: DocsQueryEngine) -> None:
    """Register getSdkFunctionDetail tool with the MCP server."""

    @mcp.tool(name="getSdkFunctionDetail")
    def get_sdk_function_detail(moduleName: ModuleName, functionName: FunctionName) -> str:
        """Get detailed information about a specific function in the Codebolt SDK.

        Returns description, parameters (in call order), return type and an
        example call.

        Related tools:
        - getSdkFunctionsList: Discover module and function names
        """
        try:
            func = engine.get_function_detail(moduleName, functionName)
        except LookupFailure as exc:
            return to_tool_result(format_lookup_failure(exc))
        return to_tool_result(format_function_detail(func))
