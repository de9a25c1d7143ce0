#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the options objects used by
the docmark parsers and the markdown serializer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses define parser-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; the base class has none."""
        pass


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define renderer-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; the base class has none."""
        pass
