"""Public package surface exposing the helper functions, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: pure helpers (combinators, streams, ordering, numeric)
- Adapter exports: console helpers (write, write_line, debug)
- Composition exports: wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Console helpers
from .adapters.console import debug, write, write_line

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import *  # noqa: F403
from .domain import __all__ as _domain_all

__all__ = [
    *_domain_all,
    "debug",
    "get_config",
    "print_info",
    "write",
    "write_line",
]
