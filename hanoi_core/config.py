"""
Default game settings, overridable through the environment.
"""
from __future__ import annotations

import os

DEFAULT_START_STACK = int(os.getenv("HANOI_START_STACK", "0"))
DEFAULT_STACKS = int(os.getenv("HANOI_STACKS", "3"))
DEFAULT_PIECES = int(os.getenv("HANOI_PIECES", "5"))
LOG_LEVEL = os.getenv("HANOI_LOG_LEVEL", "WARNING").upper()
# Largest game the HTTP API will build or solve
MAX_PIECES = int(os.getenv("HANOI_MAX_PIECES", "20"))
