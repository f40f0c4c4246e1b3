"""Error taxonomy for the documentation registry and query engine."""

from __future__ import annotations


class DocsError(Exception):
    """Base class for all documentation server errors."""


class CatalogError(DocsError):
    """The documentation catalog is unreadable or violates a registry invariant.

    Raised while building the registry at startup; the server does not start.
    """


class LookupFailure(DocsError):
    """A query referenced a catalog entry that does not exist."""

    code = "not_found"


class ModuleLookupError(LookupFailure):
    """Requested module name is absent from the registry."""

    code = "module_not_found"

    def __init__(self, module_name: str):
        self.module_name = module_name
        super().__init__(f"Module '{module_name}' not found in the Codebolt SDK")


class FunctionLookupError(LookupFailure):
    """Module exists but the requested function is not declared in it."""

    code = "function_not_found"

    def __init__(self, module_name: str, function_name: str):
        self.module_name = module_name
        self.function_name = function_name
        super().__init__(f"Function '{function_name}' not found in module '{module_name}'")
