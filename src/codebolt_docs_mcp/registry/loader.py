"""Data loading layer for the Codebolt SDK documentation catalog.

This module builds the immutable registry from the hand-authored JSON
catalog bundled with the package (or an alternate file supplied through
configuration).

Responsibilities:
- Read the catalog file, rejecting duplicate keys instead of collapsing them
- Validate registry invariants while building the models
- Cache the built registry so it is constructed once per process
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from codebolt_docs_mcp.errors import CatalogError
from codebolt_docs_mcp.registry.models import Function, Module, Parameter, SdkRegistry

logger = logging.getLogger("codebolt-docs-mcp.registry")

# Hand-authored catalog shipped with the package
BUNDLED_CATALOG = Path(__file__).parent / "resources" / "sdk_modules.json"


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise CatalogError(f"Duplicate key in catalog: {key!r}")
        result[key] = value
    return result


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise CatalogError(f"{where}: '{key}' must be a string")
    return value


class RegistryLoader:
    """Builds and caches the SDK registry.

    Example:
        >>> registry = RegistryLoader.load()
        >>> registry.get_function("fs", "readFile").returns
        'Promise<ReadFileResponse>'
    """

    @staticmethod
    @lru_cache(maxsize=4)
    def load(path: Path | None = None) -> SdkRegistry:
        """Load the catalog at ``path`` (bundled catalog when omitted).

        Raises:
            CatalogError: If the file is missing, is not valid JSON, or
                violates a registry invariant
        """
        catalog_path = Path(path) if path is not None else BUNDLED_CATALOG
        if not catalog_path.exists():
            raise CatalogError(f"Catalog file not found: {catalog_path}")

        try:
            with open(catalog_path, encoding="utf-8") as f:
                raw = json.load(f, object_pairs_hook=_reject_duplicate_keys)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Catalog is not valid JSON ({catalog_path}): {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogError(f"Catalog could not be read ({catalog_path}): {exc}") from exc

        registry = RegistryLoader.build(raw)
        logger.info(
            "Loaded %d modules, %d functions from %s",
            len(registry),
            registry.function_count(),
            catalog_path,
        )
        return registry

    @staticmethod
    def build(raw: Any) -> SdkRegistry:
        """Build a registry from an already-parsed catalog mapping."""
        if not isinstance(raw, dict):
            raise CatalogError("Catalog root must be an object mapping module names to modules")

        modules: dict[str, Module] = {}
        for module_name, module_data in raw.items():
            modules[module_name] = RegistryLoader._build_module(module_name, module_data)
        return SdkRegistry(modules)

    @staticmethod
    def _build_module(module_name: str, data: Any) -> Module:
        where = f"module '{module_name}'"
        if not isinstance(data, dict):
            raise CatalogError(f"{where}: must be an object")

        functions_data = data.get("functions", {})
        if not isinstance(functions_data, dict):
            raise CatalogError(f"{where}: 'functions' must be an object")

        functions = {
            func_name: RegistryLoader._build_function(module_name, func_name, func_data)
            for func_name, func_data in functions_data.items()
        }
        return Module(
            name=module_name,
            description=_require_str(data, "description", where),
            functions=functions,
        )

    @staticmethod
    def _build_function(module_name: str, func_name: str, data: Any) -> Function:
        where = f"function '{module_name}.{func_name}'"
        if not isinstance(data, dict):
            raise CatalogError(f"{where}: must be an object")

        params_data = data.get("parameters", [])
        if not isinstance(params_data, list):
            raise CatalogError(f"{where}: 'parameters' must be a list")

        parameters: list[Parameter] = []
        seen: set[str] = set()
        for param_data in params_data:
            param = RegistryLoader._build_parameter(where, param_data)
            if param.name in seen:
                raise CatalogError(f"{where}: duplicate parameter '{param.name}'")
            seen.add(param.name)
            parameters.append(param)

        return Function(
            name=func_name,
            description=_require_str(data, "description", where),
            parameters=tuple(parameters),
            returns=_require_str(data, "returns", where),
            example=_require_str(data, "example", where),
        )

    @staticmethod
    def _build_parameter(where: str, data: Any) -> Parameter:
        if not isinstance(data, dict):
            raise CatalogError(f"{where}: parameters must be objects")

        name = _require_str(data, "name", where)
        param_where = f"{where}, parameter '{name}'"
        optional = data.get("optional", False)
        if not isinstance(optional, bool):
            raise CatalogError(f"{param_where}: 'optional' must be a boolean")
        if not optional and "default" in data:
            raise CatalogError(f"{param_where}: required parameters cannot declare a default")

        return Parameter(
            name=name,
            type=_require_str(data, "type", param_where),
            description=_require_str(data, "description", param_where),
            optional=optional,
            default=data.get("default"),
        )
