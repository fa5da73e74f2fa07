"""Adapters layer - console output, configuration, logging and CLI.

Contents:
    * :mod:`.console` - stdout/stderr helpers (write, write_line, debug)
    * :mod:`.config` - lib_layered_config loading, display and overrides
    * :mod:`.logging` - lib_log_rich runtime initialisation
    * :mod:`.memory` - in-memory adapters for tests
    * :mod:`.cli` - rich_click command tree
"""

from __future__ import annotations
