"""Data models for the Codebolt SDK documentation registry.

The registry is a read-only Module -> Function -> Parameter tree. Type and
return descriptors are opaque text copied from the catalog (for example
"Promise<CreateFileResponse>"); they document the SDK's shape and are never
interpreted.

All models are frozen. Ordered collections are tuples and name lookups are
read-only mapping proxies, so a registry can be shared by every request for
the lifetime of the process.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class Parameter:
    """A single documented function parameter.

    Attributes:
        name: Parameter name, unique within its function
        type: Textual type descriptor (e.g. "string", "boolean")
        description: Human-readable description
        optional: Whether callers may omit the argument
        default: Default literal, only meaningful when ``optional`` is true
    """

    name: str
    type: str
    description: str
    optional: bool = False
    default: Any = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "description": self.description,
        }
        if self.optional:
            payload["optional"] = True
            if self.default is not None:
                payload["default"] = self.default
        return payload


@dataclass(frozen=True)
class Function:
    """Documentation for one SDK function.

    Attributes:
        name: Function name, unique within its module
        description: Human-readable description
        parameters: Parameters in declaration order
        returns: Textual return type descriptor
        example: Free-text usage sample
    """

    name: str
    description: str
    parameters: tuple[Parameter, ...]
    returns: str
    example: str

    def to_payload(self) -> dict[str, Any]:
        """Full function record as exposed to clients."""
        return {
            "description": self.description,
            "parameters": [param.to_payload() for param in self.parameters],
            "returns": self.returns,
            "example": self.example,
        }


@dataclass(frozen=True)
class Module:
    """A documented SDK module (e.g. ``codebolt.fs``)."""

    name: str
    description: str
    functions: Mapping[str, Function] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.functions, MappingProxyType):
            object.__setattr__(self, "functions", MappingProxyType(dict(self.functions)))


@dataclass(frozen=True)
class FunctionSummary:
    """One row of the flat function listing."""

    module: str
    function: str
    signature: str
    description: str

    def to_payload(self) -> dict[str, str]:
        return {
            "module": self.module,
            "function": self.function,
            "signature": self.signature,
            "description": self.description,
        }


@dataclass(frozen=True)
class SearchMatch:
    """A search hit at one tier (module, function or parameter).

    ``module`` is set for function and parameter hits, ``function`` only for
    parameter hits.
    """

    tier: str
    name: str
    description: str
    module: str | None = None
    function: str | None = None
    match_reason: str = "name-or-description"

    def to_payload(self) -> dict[str, str]:
        payload = {"type": self.tier}
        if self.module is not None:
            payload["module"] = self.module
        if self.function is not None:
            payload["function"] = self.function
        payload["name"] = self.name
        payload["description"] = self.description
        payload["matchReason"] = self.match_reason
        return payload


class SdkRegistry:
    """Immutable catalog of SDK modules.

    Iteration follows catalog insertion order. Lookups return ``None`` for
    unknown names; turning a miss into a user-facing error is the query
    engine's job.
    """

    __slots__ = ("_modules",)

    def __init__(self, modules: Mapping[str, Module]):
        self._modules = MappingProxyType(dict(modules))

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules.values())

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_name: object) -> bool:
        return module_name in self._modules

    @property
    def modules(self) -> Mapping[str, Module]:
        return self._modules

    def get_module(self, module_name: str) -> Module | None:
        return self._modules.get(module_name)

    def get_function(self, module_name: str, function_name: str) -> Function | None:
        module = self._modules.get(module_name)
        if module is None:
            return None
        return module.functions.get(function_name)

    def function_count(self) -> int:
        return sum(len(module.functions) for module in self)

    def parameter_count(self) -> int:
        return sum(len(func.parameters) for module in self for func in module.functions.values())
