"""Read-only query operations over the SDK documentation registry.

The engine holds a reference to an injected :class:`SdkRegistry` and never
mutates it, so one engine can serve any number of concurrent requests.

Search is plain case-insensitive substring containment; there is no ranking.
Results follow catalog order: for each module the module itself is tested,
then each of its functions followed by that function's parameters, and every
hit is appended as soon as it is found.
"""

from __future__ import annotations

import logging

from codebolt_docs_mcp.errors import FunctionLookupError, ModuleLookupError
from codebolt_docs_mcp.query.setup_info import SDK_SETUP_INFO, SetupInfo
from codebolt_docs_mcp.query.signature import format_signature
from codebolt_docs_mcp.registry.models import (
    Function,
    FunctionSummary,
    SdkRegistry,
    SearchMatch,
)

logger = logging.getLogger("codebolt-docs-mcp.query")


def _contains(query_lower: str, *fields: str) -> bool:
    return any(query_lower in text.lower() for text in fields)


class DocsQueryEngine:
    """Query interface for the Codebolt SDK documentation.

    Usage:
        >>> engine = DocsQueryEngine(RegistryLoader.load())
        >>> engine.list_all_functions()[0].signature
        'createFile(fileName: string, source: string, filePath: string) => Promise<CreateFileResponse>'
        >>> [m.tier for m in engine.search("commit")][:2]
        ['function', 'parameter']
    """

    def __init__(self, registry: SdkRegistry):
        self._registry = registry

    @property
    def registry(self) -> SdkRegistry:
        return self._registry

    def list_all_functions(self) -> list[FunctionSummary]:
        """One summary per (module, function) pair, in catalog order."""
        return [
            FunctionSummary(
                module=module.name,
                function=func.name,
                signature=format_signature(func),
                description=func.description,
            )
            for module in self._registry
            for func in module.functions.values()
        ]

    def get_function_detail(self, module_name: str, function_name: str) -> Function:
        """Return the full function record.

        Raises:
            ModuleLookupError: ``module_name`` is not in the registry
            FunctionLookupError: the module exists but has no ``function_name``
        """
        module = self._registry.get_module(module_name)
        if module is None:
            logger.debug("Unknown module requested: %s", module_name)
            raise ModuleLookupError(module_name)

        func = module.functions.get(function_name)
        if func is None:
            logger.debug("Unknown function requested: %s.%s", module_name, function_name)
            raise FunctionLookupError(module_name, function_name)
        return func

    def get_setup_info(self) -> SetupInfo:
        return SDK_SETUP_INFO

    def search(self, query: str) -> list[SearchMatch]:
        """Case-insensitive substring search over modules, functions and parameters.

        The query is not trimmed. An empty query matches every entry.

        Args:
            query: Search text, e.g. "git", "path", "folder"

        Returns:
            Matches in catalog traversal order; empty list when nothing matches
        """
        query_lower = query.lower()
        matches: list[SearchMatch] = []

        for module in self._registry:
            if _contains(query_lower, module.name, module.description):
                matches.append(
                    SearchMatch(tier="module", name=module.name, description=module.description)
                )

            for func in module.functions.values():
                if _contains(query_lower, func.name, func.description):
                    matches.append(
                        SearchMatch(
                            tier="function",
                            module=module.name,
                            name=func.name,
                            description=func.description,
                        )
                    )

                for param in func.parameters:
                    if _contains(query_lower, param.name, param.description):
                        matches.append(
                            SearchMatch(
                                tier="parameter",
                                module=module.name,
                                function=func.name,
                                name=param.name,
                                description=param.description,
                            )
                        )

        return matches
