"""Codebolt docs MCP tool implementations."""

from . import function_detail, list_functions, search_docs, setup_info

__all__ = [
    "function_detail",
    "list_functions",
    "search_docs",
    "setup_info",
]
