"""Signature rendering for documented SDK functions."""

from codebolt_docs_mcp.registry.models import Function, Parameter


def format_parameter(param: Parameter) -> str:
    """Render ``name: type``, with ``?`` after the name when optional."""
    marker = "?" if param.optional else ""
    return f"{param.name}{marker}: {param.type}"


def format_signature(func: Function) -> str:
    """Render ``name(p1: t1, p2?: t2) => returns`` in declaration order.

    Example:
        >>> format_signature(registry.get_function("fs", "listFile"))
        'listFile(folderPath: string, isRecursive?: boolean) => Promise<FileListResponse>'
    """
    params = ", ".join(format_parameter(param) for param in func.parameters)
    return f"{func.name}({params}) => {func.returns}"
