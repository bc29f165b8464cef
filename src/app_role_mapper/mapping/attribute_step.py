"""Attribute step resolution with fixed precedence order.

The attribute step is the authentication step whose federated identity
providers supply user attributes, and therefore the step whose providers get
role-mapping records. It is located with a strict 2-tier precedence:

1. Designated: `authenticationStepForAttributes` on the authentication config
2. Flagged: first entry of `authenticationSteps` (list order) with
   `attributeStep` set

When neither tier yields a step the attribute step is absent and no providers
participate. A designated step without providers does not fall through to the
flagged tier.

Public Functions:
    resolve_attribute_step: Apply precedence rules, report which tier matched
    attribute_step_idp_names: Ordered provider names of the resolved step

Design Note:
    Fail-open: missing or partially populated configuration degrades to an
    empty provider list rather than raising.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..models.service_provider import AuthenticationStep, LocalAndOutboundAuthenticationConfig

logger = logging.getLogger(__name__)

__all__ = [
    "STEP_SOURCE_DESIGNATED",
    "STEP_SOURCE_FLAGGED",
    "resolve_attribute_step",
    "attribute_step_idp_names",
]

STEP_SOURCE_DESIGNATED = "designated"
STEP_SOURCE_FLAGGED = "flagged"


def resolve_attribute_step(
    auth_config: Optional[LocalAndOutboundAuthenticationConfig],
) -> Tuple[Optional[AuthenticationStep], Optional[str]]:
    """Locate the attribute step using the designated → flagged precedence.

    Args:
        auth_config: Authentication config of the service provider; None is
            treated as a config with no steps

    Returns:
        Tuple of (step, source)
        - step: Resolved attribute step or None when absent
        - source: STEP_SOURCE_DESIGNATED, STEP_SOURCE_FLAGGED, or None
    """
    if auth_config is None:
        return None, None
    if auth_config.authenticationStepForAttributes is not None:
        return auth_config.authenticationStepForAttributes, STEP_SOURCE_DESIGNATED
    for step in auth_config.authenticationSteps or []:
        if step.attributeStep:
            return step, STEP_SOURCE_FLAGGED
    return None, None


def attribute_step_idp_names(
    auth_config: Optional[LocalAndOutboundAuthenticationConfig],
) -> List[str]:
    """Return federated identity provider names of the attribute step.

    Order follows the step's provider list and duplicates are preserved; each
    occurrence later yields its own role-mapping record.
    """
    step, source = resolve_attribute_step(auth_config)
    if step is None:
        logger.debug("No attribute step resolved; no federated identity providers")
        return []
    providers = step.federatedIdentityProviders or []
    logger.debug(
        "Attribute step resolved via %s tier (stepOrder=%s) with %d federated provider(s)",
        source,
        step.stepOrder,
        len(providers),
    )
    return [idp.identityProviderName for idp in providers]
