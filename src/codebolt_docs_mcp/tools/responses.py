"""Conversion of tool responses into FastMCP tool results."""

import logging

from fastmcp.exceptions import ToolError

from codebolt_docs_mcp.contracts import ToolResponse

logger = logging.getLogger("codebolt-docs-mcp.tools")


def to_tool_result(response: ToolResponse) -> str:
    """Return the payload text, or raise ``ToolError`` for error responses.

    FastMCP reports a raised ``ToolError`` to the client as a result with
    ``isError: true`` and the message as its text content.
    """
    if response.is_error:
        logger.debug("Tool error %s: %s", response.error_code, response.payload)
        raise ToolError(response.payload)
    return response.payload
