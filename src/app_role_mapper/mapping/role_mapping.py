"""Build resolved role-mapping records from attribute-step provider names."""
from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence

from ..models.api import AppRoleConfig
from ..models.service_provider import AppRoleMappingConfig

__all__ = [
    "build_role_mapping_configs",
    "duplicate_role_config_idps",
    "find_role_config",
    "unmatched_role_configs",
]


def find_role_config(
    idp_name: str, app_role_configs: Sequence[AppRoleConfig]
) -> Optional[AppRoleConfig]:
    """Return the first configuration whose idp equals `idp_name` exactly."""
    for cfg in app_role_configs:
        if cfg.idp == idp_name:
            return cfg
    return None


def build_role_mapping_configs(
    idp_names: Sequence[str], app_role_configs: Sequence[AppRoleConfig]
) -> List[AppRoleMappingConfig]:
    """Create one AppRoleMappingConfig per provider name, in name order.

    The flag is copied from the first matching role configuration and left at
    False when none matches. Duplicate names yield independent records.
    """
    mappings: List[AppRoleMappingConfig] = []
    for name in idp_names:
        mapping = AppRoleMappingConfig(idPName=name)
        cfg = find_role_config(name, app_role_configs)
        if cfg is not None:
            mapping.useAppRoleMappings = cfg.useAppRoleMappings
        mappings.append(mapping)
    return mappings


def unmatched_role_configs(
    idp_names: Sequence[str], app_role_configs: Sequence[AppRoleConfig]
) -> List[str]:
    """Return idp values of role configurations that match no provider name.

    Each unmatched idp is reported once, in first-seen order.
    """
    known = set(idp_names)
    seen: List[str] = []
    for cfg in app_role_configs:
        if cfg.idp not in known and cfg.idp not in seen:
            seen.append(cfg.idp)
    return seen


def duplicate_role_config_idps(app_role_configs: Sequence[AppRoleConfig]) -> List[str]:
    counts = Counter(cfg.idp for cfg in app_role_configs)
    return [idp for idp, n in counts.items() if n > 1]
