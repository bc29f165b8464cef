"""Internal mapping subpackage for role-mapping reconciliation.

All functions within this package are pure (no file I/O, no mutation of their
inputs) and deterministic. The public API lives in the top-level
`reconciler.py` facade; callers should not import directly from this package
unless accessing internal helpers for testing purposes.

Modules:
    orchestrator: `reconcile` pipeline tying the helpers together
    attribute_step: Attribute step resolution with fixed precedence
    role_mapping: Per-provider record construction and diagnostics helpers

Design Invariants:
    - Output order follows the attribute step's provider order
    - Unmatched providers default to useAppRoleMappings=False
    - First matching role configuration wins
    - Never raises for well-typed input
"""
from __future__ import annotations

from . import attribute_step as attribute_step  # noqa: F401
from . import role_mapping as role_mapping  # noqa: F401

__all__ = ["attribute_step", "role_mapping"]
