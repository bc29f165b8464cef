"""Pydantic models for the application management API payload.

`AppRoleConfig` is the request-side shape of a role configuration: the name
of an identity provider and whether application role mappings apply to it.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter


class AppRoleConfig(BaseModel):
    """Desired role-mapping flag for a single identity provider."""

    model_config = ConfigDict(extra="ignore")

    idp: str
    useAppRoleMappings: bool = False


# Validates a raw JSON array of role configurations.
AppRoleConfigList: TypeAdapter[List[AppRoleConfig]] = TypeAdapter(List[AppRoleConfig])

__all__ = ["AppRoleConfig", "AppRoleConfigList"]
