"""Central reconciliation of role configurations against the attribute step.

`reconcile` performs these steps:
    1. Resolve the attribute step (designated, else first flagged step)
    2. Collect its federated identity provider names in order
    3. Emit one AppRoleMappingConfig per name, copying the flag from the first
       matching role configuration or defaulting it to False

Design Notes:
    - Pure function: no I/O, no mutation of inputs, new list on every call
    - Total: every well-typed input yields a (possibly empty) list
    - Diagnostics are logging only and never change the result
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..models.api import AppRoleConfig
from ..models.service_provider import AppRoleMappingConfig, LocalAndOutboundAuthenticationConfig
from .attribute_step import attribute_step_idp_names
from .role_mapping import (
    build_role_mapping_configs,
    duplicate_role_config_idps,
    unmatched_role_configs,
)

logger = logging.getLogger(__name__)

__all__ = ["reconcile"]


def reconcile(
    auth_config: Optional[LocalAndOutboundAuthenticationConfig],
    desired_mappings: Sequence[AppRoleConfig],
    *,
    warn_unmatched: bool = False,
) -> List[AppRoleMappingConfig]:
    """Resolve role-mapping records for the attribute step's providers.

    Args:
        auth_config: Authentication config supplying the attribute step
        desired_mappings: Role configurations from the API payload; may be empty
        warn_unmatched: Log a warning for configurations naming providers that
            are not part of the attribute step

    Returns:
        Records in attribute-step provider order; empty when the step is
        absent or has no federated providers
    """
    idp_names = attribute_step_idp_names(auth_config)
    mappings = build_role_mapping_configs(idp_names, desired_mappings)

    duplicates = duplicate_role_config_idps(desired_mappings)
    if duplicates:
        logger.debug(
            "Duplicate role configurations for idp(s) %s; first entry wins",
            ", ".join(duplicates),
        )
    if warn_unmatched:
        unmatched = unmatched_role_configs(idp_names, desired_mappings)
        if unmatched:
            logger.warning(
                "Role configuration(s) for idp(s) %s ignored: not a federated "
                "identity provider of the attribute step",
                ", ".join(unmatched),
            )
    logger.debug(
        "Reconciled %d role mapping record(s) from %d role configuration(s)",
        len(mappings),
        len(desired_mappings),
    )
    return mappings
