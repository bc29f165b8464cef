"""Public facade for application role-mapping reconciliation.

This module provides the stable public API for turning API role
configurations into the `applicationRoleMappingConfig` of a service provider.
All mapping logic is delegated to the app_role_mapper.mapping package.

Public Functions:
    reconcile: Resolve role-mapping records for the attribute step's providers
    update_app_role_configurations: Return a service provider carrying the
        reconciled records (unchanged when no configurations were supplied)

Internal Re-exports:
    resolve_attribute_step: Attribute step precedence helper (test usage)
    attribute_step_idp_names: Provider name extraction (test usage)
    build_role_mapping_configs: Record construction (test usage)
"""

from __future__ import annotations

from typing import List, Optional

from .mapping.attribute_step import attribute_step_idp_names, resolve_attribute_step
from .mapping.orchestrator import reconcile
from .mapping.role_mapping import build_role_mapping_configs
from .models.api import AppRoleConfig
from .models.service_provider import ServiceProvider
from .update_functions import UpdateAppRoleConfigurations

__all__ = [
    "reconcile",
    "update_app_role_configurations",
    # Helper re-exports (test-only / internal use)
    "resolve_attribute_step",
    "attribute_step_idp_names",
    "build_role_mapping_configs",
]


def update_app_role_configurations(
    service_provider: ServiceProvider,
    app_role_configs: Optional[List[AppRoleConfig]],
    *,
    warn_unmatched: bool = False,
) -> ServiceProvider:
    """Apply API role configurations to a service provider.

    Args:
        service_provider: Current service-provider document (not modified)
        app_role_configs: Role configurations from the request; None when the
            field was absent, which skips reconciliation entirely
        warn_unmatched: Log configurations naming providers outside the
            attribute step

    Returns:
        The same object when `app_role_configs` is None, otherwise a copy whose
        applicationRoleMappingConfig holds one record per attribute-step
        federated identity provider
    """
    return UpdateAppRoleConfigurations(warn_unmatched=warn_unmatched).apply(
        service_provider, app_role_configs
    )
