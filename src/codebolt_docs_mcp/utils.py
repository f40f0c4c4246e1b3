"""Argument types for the Codebolt docs MCP tools.

FastMCP builds each tool's input schema from these annotations and
validates arguments before a tool body runs.
"""

from typing import Annotated

from pydantic import Field


ModuleName = Annotated[
    str,
    Field(
        ...,
        description="The name of the module containing the function (e.g. 'fs', 'git', 'llm').",
    ),
]

FunctionName = Annotated[
    str,
    Field(
        ...,
        description="The name of the function to get details for (e.g. 'readFile', 'commit').",
    ),
]

# Empty string is accepted and matches every catalog entry.
DocsSearchQuery = Annotated[
    str,
    Field(
        ...,
        description=(
            "Search text matched against module, function and parameter names "
            "and descriptions. Examples: 'git', 'folder', 'path'. Case-insensitive."
        ),
    ),
]
