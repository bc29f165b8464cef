"""Typed models for service-provider documents and API role configurations."""
from __future__ import annotations

from .api import AppRoleConfig, AppRoleConfigList
from .service_provider import (
    AppRoleMappingConfig,
    AuthenticationStep,
    IdentityProvider,
    LocalAndOutboundAuthenticationConfig,
    ServiceProvider,
)

__all__ = [
    "AppRoleConfig",
    "AppRoleConfigList",
    "AppRoleMappingConfig",
    "AuthenticationStep",
    "IdentityProvider",
    "LocalAndOutboundAuthenticationConfig",
    "ServiceProvider",
]
