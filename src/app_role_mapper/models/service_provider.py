"""Pydantic models for the service-provider configuration document.

These models mirror the subset of a service-provider export that role-mapping
reconciliation reads and writes: the local and outbound authentication config
(its ordered authentication steps and the optional step designated for
attributes) and the `applicationRoleMappingConfig` array that reconciliation
produces. Field names keep the camelCase spelling used on the wire so that
exported JSON documents validate without aliasing.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IdentityProvider(BaseModel):
    """A federated identity provider attached to an authentication step."""

    model_config = ConfigDict(extra="ignore")

    identityProviderName: str
    displayName: Optional[str] = None


class AuthenticationStep(BaseModel):
    """One ordered stage of the authentication flow."""

    model_config = ConfigDict(extra="ignore")

    stepOrder: int = 0
    attributeStep: bool = False
    subjectStep: bool = False
    # None and [] are both "no federated providers" for reconciliation.
    federatedIdentityProviders: Optional[List[IdentityProvider]] = None


class LocalAndOutboundAuthenticationConfig(BaseModel):
    """Authentication flow of a service provider.

    `authenticationStepForAttributes` is the directly designated attribute
    step. When it is absent the step list is scanned for the first step whose
    `attributeStep` flag is set.
    """

    model_config = ConfigDict(extra="ignore")

    authenticationSteps: Optional[List[AuthenticationStep]] = None
    authenticationStepForAttributes: Optional[AuthenticationStep] = None


class AppRoleMappingConfig(BaseModel):
    """Resolved per-IdP role mapping stored on the service provider."""

    model_config = ConfigDict(extra="ignore")

    idPName: str
    useAppRoleMappings: bool = False


class ServiceProvider(BaseModel):
    """The service-provider document updated by role-mapping reconciliation."""

    model_config = ConfigDict(extra="ignore")

    applicationName: str
    description: Optional[str] = None
    localAndOutBoundAuthenticationConfig: LocalAndOutboundAuthenticationConfig = Field(
        default_factory=LocalAndOutboundAuthenticationConfig
    )
    applicationRoleMappingConfig: List[AppRoleMappingConfig] = Field(default_factory=list)


__all__ = [
    "AppRoleMappingConfig",
    "AuthenticationStep",
    "IdentityProvider",
    "LocalAndOutboundAuthenticationConfig",
    "ServiceProvider",
]
