"""Package initialization for app-role-mapper.

Having this file allows relative imports (e.g. `from .models import ...`) to
resolve under tooling (mypy/ruff) and matches the CLI usage pattern
`python -m app_role_mapper reconcile`.
"""

__all__ = []
