#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/utils/__init__.py
"""Utility helpers shared by docmark parsers and renderers."""

from docmark.utils.decorators import requires_dependencies
from docmark.utils.packages import check_version_requirement, get_package_version

__all__ = ["requires_dependencies", "check_version_requirement", "get_package_version"]
