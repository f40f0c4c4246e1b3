"""Codebolt Docs MCP Server - Codebolt SDK documentation exposed over MCP."""

import argparse
import logging
import sys

from fastmcp import FastMCP

from codebolt_docs_mcp import __version__
from codebolt_docs_mcp.config import DocsConfig, get_docs_config
from codebolt_docs_mcp.query import DocsQueryEngine
from codebolt_docs_mcp.registry import RegistryLoader
from codebolt_docs_mcp.tools import function_detail, list_functions, search_docs, setup_info

logger = logging.getLogger("codebolt-docs-mcp.server")


def create_server(config: DocsConfig | None = None) -> FastMCP:
    """Build the registry once and register all documentation tools on it."""
    cfg = config or get_docs_config()
    registry = RegistryLoader.load(cfg.catalog_path)
    engine = DocsQueryEngine(registry)

    server = FastMCP(
        cfg.server_name,
        instructions=(
            "Documentation tools for the Codebolt SDK. "
            "List SDK functions with their signatures, get full documentation for one "
            "function, get setup/usage information, and search modules, functions "
            "and parameters by keyword."
        ),
    )

    list_functions.register(server, engine)
    function_detail.register(server, engine)
    setup_info.register(server, engine)
    search_docs.register(server, engine)
    return server


_server: FastMCP | None = None


def get_server() -> FastMCP:
    """Return the process-wide server, building it on first use."""
    global _server
    if _server is None:
        _server = create_server()
    return _server


def main():
    """Entry point for the Codebolt docs MCP server."""
    parser = argparse.ArgumentParser(
        prog="codebolt-docs-mcp",
        description="Codebolt Docs MCP Server - Codebolt SDK documentation exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"codebolt-docs-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    # stdout carries the stdio transport; logs go to stderr
    logging.basicConfig(
        level=get_docs_config().log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    try:
        # Loads the catalog; must run after logging is configured
        server = get_server()
        logger.info("Codebolt SDK Documentation MCP starting (%s)", args.transport)
        server.run(**run_kwargs)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Failed to start Codebolt SDK Documentation MCP")
        sys.exit(1)


if __name__ == "__main__":
    main()
