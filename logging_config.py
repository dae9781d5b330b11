"""
Logging configuration for react-native-expo-mcp.

Simple setup that tools and the server can import.
Resolvers and generators should NOT log (they're pure functions).
"""

import logging
import sys

# Create logger for the package
logger = logging.getLogger("expo_mcp")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for react-native-expo-mcp.

    Handlers write to stderr: stdout carries the MCP stdio transport.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logger.setLevel(getattr(logging, level.upper()))

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        # Concise format for MCP context
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # The SDK logs every request at INFO
    logging.getLogger("mcp").setLevel(logging.WARNING)


# NOTE: Call configure_logging() explicitly in server.py, cli.py or test setup.
# We don't auto-configure to avoid side effects on import.


# Convenience functions for common patterns
def log_tool_call(tool: str, **params: object) -> None:
    """Log a tool call with key parameters."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.debug(f"Tool: {tool}({param_str})")


def log_tool_result(tool: str, text: str) -> None:
    """Log tool result summary."""
    logger.debug(f"Tool: {tool} returned {len(text)} chars")
