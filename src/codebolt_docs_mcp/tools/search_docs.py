"""SDK docs search tool - substring search across modules, functions and parameters."""

from fastmcp import FastMCP

from codebolt_docs_mcp.formatting import format_search_results
from codebolt_docs_mcp.query import DocsQueryEngine
from codebolt_docs_mcp.tools.responses import to_tool_result
from codebolt_docs_mcp.utils import DocsSearchQuery


def register(mcp: FastMCP, engine: DocsQueryEngine) -> None:
    """Register searchSdkDocs tool with the MCP server."""

    @mcp.tool(name="searchSdkDocs")
    def search_sdk_docs(query: DocsSearchQuery) -> str:
        """Search the Codebolt SDK documentation for specific terms.

        Matches module, function and parameter names and descriptions
        (case-insensitive substring, no ranking). Each hit reports its type:
        "module", "function" or "parameter".

        When to use:
        - You know a concept but not the function name
        - Example: "git", "folder", "recursive"
        """
        return to_tool_result(format_search_results(query, engine.search(query)))
