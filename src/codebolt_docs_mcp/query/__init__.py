"""Query engine for the Codebolt SDK documentation registry."""

from codebolt_docs_mcp.query.engine import DocsQueryEngine
from codebolt_docs_mcp.query.setup_info import SDK_SETUP_INFO, SetupInfo
from codebolt_docs_mcp.query.signature import format_parameter, format_signature

__all__ = [
    "DocsQueryEngine",
    "SDK_SETUP_INFO",
    "SetupInfo",
    "format_parameter",
    "format_signature",
]
