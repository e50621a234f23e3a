"""Runtime configuration for fusion.

Every value can be overridden through an environment variable prefixed with
FUSION_.
"""

import importlib.metadata
import os

try:
    VERSION = importlib.metadata.version("fusion")
except importlib.metadata.PackageNotFoundError:
    VERSION = "0.1.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("FUSION_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_NESTING_DEPTH = int(
    os.getenv("FUSION_MAX_NESTING_DEPTH", "100")
)  # parentheses and unary minus

LOG_LEVEL = os.getenv("FUSION_LOG_LEVEL", "WARNING")
PROMPT = os.getenv("FUSION_PROMPT", "> ")
