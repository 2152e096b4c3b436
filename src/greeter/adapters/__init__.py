"""Adapters: the outside world behind the application ports.

Contents:
    * :mod:`.console` - Verbatim stdout writer for the greetings
    * :mod:`.config` - lib_layered_config loading and ``--set`` overrides
    * :mod:`.logging` - lib_log_rich runtime setup
    * :mod:`.memory` - In-memory doubles for every port
    * :mod:`.cli` - rich-click command-line surface
"""

from __future__ import annotations

__all__: list[str] = []
