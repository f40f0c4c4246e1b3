"""Static setup and usage information for the Codebolt SDK.

This bundle is not derived from the registry; it describes how a consumer
bootstraps against the documented SDK.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SetupInfo:
    import_example: str
    initialization: str
    usage: str
    modules: str

    def to_payload(self) -> dict[str, str]:
        return {
            "import": self.import_example,
            "initialization": self.initialization,
            "usage": self.usage,
            "modules": self.modules,
        }


SDK_SETUP_INFO = SetupInfo(
    import_example="import codebolt from '@codebolt/codeboltjs';",
    initialization="// Wait for connection to be established\nawait codebolt.waitForConnection();",
    usage=(
        "// Example of using the SDK\n"
        "const fileContent = await codebolt.fs.readFile('/path/to/file.txt');"
    ),
    modules="\n".join(
        [
            "// Available modules",
            "// codebolt.fs - File system operations",
            "// codebolt.git - Git operations",
            "// codebolt.terminal - Terminal commands",
            "// codebolt.codeutils - Code analysis utilities",
            "// codebolt.project - Project management",
            "// codebolt.search - Codebase search",
            "// codebolt.llm - LLM integration",
            "// codebolt.tools - MCP tools management",
            "// codebolt.browser - Browser automation",
        ]
    ),
)
