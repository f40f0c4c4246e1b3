"""Rendering of query engine results into tool responses."""

from __future__ import annotations

from typing import Sequence

from codebolt_docs_mcp.contracts import ToolResponse, build_error, build_notice, build_ok
from codebolt_docs_mcp.errors import LookupFailure
from codebolt_docs_mcp.query.setup_info import SetupInfo
from codebolt_docs_mcp.registry.models import Function, FunctionSummary, SearchMatch


def format_function_list(summaries: Sequence[FunctionSummary]) -> ToolResponse:
    return build_ok([summary.to_payload() for summary in summaries])


def format_function_detail(func: Function) -> ToolResponse:
    return build_ok(func.to_payload())


def format_setup_info(info: SetupInfo) -> ToolResponse:
    return build_ok(info.to_payload())


def format_search_results(query: str, matches: Sequence[SearchMatch]) -> ToolResponse:
    """Serialize search matches, or a no-results notice naming ``query``.

    No results is not an error: the response has ``is_error=False``.
    """
    if not matches:
        return build_notice(f'No results found for query: "{query}". Try a different search term.')
    return build_ok([match.to_payload() for match in matches])


def format_lookup_failure(exc: LookupFailure) -> ToolResponse:
    """Turn a missing module/function into an error sentence."""
    return build_error(exc.code, str(exc))
