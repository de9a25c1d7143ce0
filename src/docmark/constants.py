#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/constants.py
"""Constants and default values for the docmark library.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and renderers
2. Parser Defaults - markdown parsing behavior
3. Renderer Defaults - markdown serialization behavior
4. Dependencies - third-party packages checked at runtime
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

BulletSymbol = Literal["-", "*", "+"]
TrackedChangeStyle = Literal["tag", "critic"]

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_INLINE_FORMATTING_FALLBACK = True
DEFAULT_NORMALIZE = True
DEFAULT_CHANGE_ID_PREFIX = "change"

CODE_FENCE = "```"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"
DEFAULT_RENDER_TASK_CHECKBOXES = True
DEFAULT_RENDER_STRIKETHROUGH = True
DEFAULT_RENDER_LINKS = True
DEFAULT_INCLUDE_CHANGE_IDS = False
DEFAULT_TRACKED_CHANGE_STYLE: TrackedChangeStyle = "tag"

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
