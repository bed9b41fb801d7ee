"""
Pytest configuration for the test suite.

Loaded by pytest before any test module, so Langfuse tracing is disabled
before the chat service imports it.
"""

import os
import logging

# Must be set BEFORE langfuse is imported
os.environ["LANGFUSE_TRACING_ENABLED"] = "false"
os.environ.setdefault("TESTING", "true")

_langfuse_logger = logging.getLogger("langfuse")
_langfuse_logger.setLevel(logging.CRITICAL)
_langfuse_logger.propagate = False
