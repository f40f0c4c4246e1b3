"""SDK setup tool - how to import and initialize the Codebolt SDK."""

from fastmcp import FastMCP

from codebolt_docs_mcp.formatting import format_setup_info
from codebolt_docs_mcp.query import DocsQueryEngine
from codebolt_docs_mcp.tools.responses import to_tool_result


def register(mcp: FastMCP, engine: DocsQueryEngine) -> None:
    """Register getSdkSetupInfo tool with the MCP server."""

    @mcp.tool(name="getSdkSetupInfo")
    def get_sdk_setup_info() -> str:
        """Get information about initializing and setting up the Codebolt SDK."""
        return to_tool_result(format_setup_info(engine.get_setup_info()))
