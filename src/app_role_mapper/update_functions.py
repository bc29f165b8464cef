"""Update functions applied to a service provider from API model fields.

An update function receives the current service provider and the value of one
API field and returns the service provider to keep. A `None` value means the
field was absent from the request, so the target is returned untouched.
Present values (including empty lists) are applied.

Update functions never mutate their target; they return an updated copy and
leave the assignment to the caller.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol, TypeVar

from .mapping.orchestrator import reconcile
from .models.api import AppRoleConfig
from .models.service_provider import ServiceProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V", contravariant=True)


class UpdateFunction(Protocol[T, V]):
    def apply(self, target: T, value: Optional[V]) -> T: ...


class UpdateAppRoleConfigurations:
    """Replace `applicationRoleMappingConfig` from API role configurations.

    Records are produced for the federated identity providers of the attribute
    step only; see `mapping.orchestrator.reconcile`.
    """

    def __init__(self, *, warn_unmatched: bool = False) -> None:
        self.warn_unmatched = warn_unmatched

    def apply(
        self,
        target: ServiceProvider,
        value: Optional[List[AppRoleConfig]],
    ) -> ServiceProvider:
        if value is None:
            logger.debug(
                "No role configurations supplied; %s left unchanged", target.applicationName
            )
            return target
        mappings = reconcile(
            target.localAndOutBoundAuthenticationConfig,
            value,
            warn_unmatched=self.warn_unmatched,
        )
        return target.model_copy(update={"applicationRoleMappingConfig": mappings}, deep=True)


__all__ = ["UpdateFunction", "UpdateAppRoleConfigurations"]
