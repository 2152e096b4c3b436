"""Configuration adapter backed by lib_layered_config.

Contents:
    * :mod:`.loader` - cached merge of the configuration layers
    * :mod:`.overrides` - ``--set SECTION.KEY=VALUE`` handling
"""

from __future__ import annotations

from .loader import get_config
from .overrides import apply_overrides

__all__ = ["apply_overrides", "get_config"]
