"""waitlister-mcp: MCP server exposing the Waitlister waitlist API as agent tools."""

import logging
import os
import sys

from waitlister_mcp.config import ConfigError, Settings

log = logging.getLogger("waitlister-mcp")


def _log_level(name: str) -> int:
    """Map a level name to its number; unknown or empty names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def main() -> None:
    """CLI entry point: starts the MCP server over stdio."""
    # stdout carries the MCP transport, so diagnostics go to stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=_log_level(os.environ.get("LOG_LEVEL", "")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    from waitlister_mcp import waitlister_client
    from waitlister_mcp.server import mcp

    waitlister_client.configure(settings)
    log.info("Waitlister MCP server running on stdio")
    try:
        mcp.run(transport="stdio")
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)
