"""Even server package.

A tiny stateful HTTP demo: ``GET /`` greets, ``GET /info`` alternates between
two JSON record shapes driven by the parity of an in-memory counter.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
