from __future__ import annotations

import logging

from app_role_mapper.models.api import AppRoleConfig
from app_role_mapper.models.service_provider import (
    AuthenticationStep,
    IdentityProvider,
    LocalAndOutboundAuthenticationConfig,
)
from app_role_mapper.reconciler import reconcile


def _step(*idps: str, order: int = 1, attribute: bool = False) -> AuthenticationStep:
    return AuthenticationStep(
        stepOrder=order,
        attributeStep=attribute,
        federatedIdentityProviders=[IdentityProvider(identityProviderName=n) for n in idps],
    )


def _designated(*idps: str) -> LocalAndOutboundAuthenticationConfig:
    step = _step(*idps, attribute=True)
    return LocalAndOutboundAuthenticationConfig(
        authenticationSteps=[step], authenticationStepForAttributes=step
    )


def _pairs(mappings):
    return [(m.idPName, m.useAppRoleMappings) for m in mappings]


def test_duplicate_provider_preserved_and_defaulted():
    cfg = _designated("Google", "Azure", "Google")
    desired = [AppRoleConfig(idp="Azure", useAppRoleMappings=True)]
    result = reconcile(cfg, desired)
    assert _pairs(result) == [("Google", False), ("Azure", True), ("Google", False)]


def test_output_follows_step_order_not_desired_order():
    cfg = _designated("A", "B", "C")
    desired = [
        AppRoleConfig(idp="C", useAppRoleMappings=True),
        AppRoleConfig(idp="B", useAppRoleMappings=False),
        AppRoleConfig(idp="A", useAppRoleMappings=True),
    ]
    result = reconcile(cfg, desired)
    assert [m.idPName for m in result] == ["A", "B", "C"]
    assert _pairs(result) == [("A", True), ("B", False), ("C", True)]


def test_first_match_wins_on_duplicate_idp():
    cfg = _designated("Okta")
    desired = [
        AppRoleConfig(idp="Okta", useAppRoleMappings=True),
        AppRoleConfig(idp="Okta", useAppRoleMappings=False),
    ]
    assert _pairs(reconcile(cfg, desired)) == [("Okta", True)]

    reversed_desired = list(reversed(desired))
    assert _pairs(reconcile(cfg, reversed_desired)) == [("Okta", False)]


def test_empty_desired_list_defaults_every_flag():
    cfg = _designated("Google", "Azure")
    assert _pairs(reconcile(cfg, [])) == [("Google", False), ("Azure", False)]


def test_match_is_case_sensitive():
    cfg = _designated("Google")
    desired = [AppRoleConfig(idp="google", useAppRoleMappings=True)]
    assert _pairs(reconcile(cfg, desired)) == [("Google", False)]


def test_fallback_to_first_flagged_step():
    cfg = LocalAndOutboundAuthenticationConfig(
        authenticationSteps=[
            _step("Local", order=1),
            _step("GitHub", order=2, attribute=True),
            _step("Azure", order=3, attribute=True),
        ]
    )
    desired = [AppRoleConfig(idp="GitHub", useAppRoleMappings=True)]
    assert _pairs(reconcile(cfg, desired)) == [("GitHub", True)]


def test_no_attribute_step_yields_empty_list():
    cfg = LocalAndOutboundAuthenticationConfig(
        authenticationSteps=[_step("Google", order=1), _step("Azure", order=2)]
    )
    result = reconcile(cfg, [AppRoleConfig(idp="Google", useAppRoleMappings=True)])
    assert result == []
    assert isinstance(result, list)


def test_total_on_sparse_configs():
    desired = [AppRoleConfig(idp="X", useAppRoleMappings=True)]
    assert reconcile(None, desired) == []
    assert reconcile(LocalAndOutboundAuthenticationConfig(), desired) == []
    designated_without_idps = LocalAndOutboundAuthenticationConfig(
        authenticationStepForAttributes=AuthenticationStep(stepOrder=1, attributeStep=True)
    )
    assert reconcile(designated_without_idps, desired) == []
    empty_idps = LocalAndOutboundAuthenticationConfig(
        authenticationStepForAttributes=AuthenticationStep(federatedIdentityProviders=[])
    )
    assert reconcile(empty_idps, []) == []


def test_desired_mappings_not_mutated_and_fresh_output():
    cfg = _designated("Google")
    desired = [
        AppRoleConfig(idp="Google", useAppRoleMappings=True),
        AppRoleConfig(idp="Other", useAppRoleMappings=True),
    ]
    snapshot = [d.model_dump() for d in desired]
    first = reconcile(cfg, desired)
    second = reconcile(cfg, desired)
    assert [d.model_dump() for d in desired] == snapshot
    assert first == second
    assert first is not second
    first[0].useAppRoleMappings = False
    assert second[0].useAppRoleMappings is True


def test_unmatched_configs_warned_when_enabled(caplog):
    cfg = _designated("Google")
    desired = [
        AppRoleConfig(idp="Google", useAppRoleMappings=True),
        AppRoleConfig(idp="Ghost", useAppRoleMappings=True),
    ]
    with caplog.at_level(logging.WARNING, logger="app_role_mapper"):
        result = reconcile(cfg, desired, warn_unmatched=True)
    assert _pairs(result) == [("Google", True)]
    assert any("Ghost" in r.getMessage() for r in caplog.records)


def test_unmatched_configs_silent_by_default(caplog):
    cfg = _designated("Google")
    desired = [AppRoleConfig(idp="Ghost", useAppRoleMappings=True)]
    with caplog.at_level(logging.WARNING, logger="app_role_mapper"):
        reconcile(cfg, desired)
    assert not caplog.records
