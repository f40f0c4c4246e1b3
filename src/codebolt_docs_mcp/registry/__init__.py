"""Codebolt SDK documentation registry.

Usage:
    from codebolt_docs_mcp.registry import RegistryLoader

    registry = RegistryLoader.load()
    readfile = registry.get_function("fs", "readFile")
"""

from codebolt_docs_mcp.registry.loader import BUNDLED_CATALOG, RegistryLoader
from codebolt_docs_mcp.registry.models import (
    Function,
    FunctionSummary,
    Module,
    Parameter,
    SdkRegistry,
    SearchMatch,
)

__all__ = [
    "BUNDLED_CATALOG",
    "RegistryLoader",
    "Function",
    "FunctionSummary",
    "Module",
    "Parameter",
    "SdkRegistry",
    "SearchMatch",
]
