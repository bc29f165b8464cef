"""Loading and dumping of JSON documents consumed by the reconciler.

This module is the boundary between raw JSON (files or strings) and the typed
models. Validation errors surface here, wrapped in `DocumentLoadError`, so
that reconciliation itself only ever sees well-typed input.

Role configuration documents distinguish absent from empty: a JSON `null`
parses to None (nothing to apply) while `[]` parses to an empty list (apply,
producing defaulted records).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from .models.api import AppRoleConfig, AppRoleConfigList
from .models.service_provider import ServiceProvider

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DocumentLoadError(ValueError):
    """Raised when a JSON document cannot be read, parsed, or validated."""

    def __init__(self, document: str, message: str):
        super().__init__(f"{document}: {message}")
        self.document = document


def _read_text(path: PathLike, document: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(document, f"cannot read {path}: {e.strerror or e}") from e


def _decode(raw: Union[str, bytes], document: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            document, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}"
        ) from e


def parse_service_provider(raw: Union[str, bytes], document: str = "service provider") -> ServiceProvider:
    """Parse and validate a service-provider JSON document."""
    data = _decode(raw, document)
    try:
        return ServiceProvider.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(document, f"{e.error_count()} validation error(s)\n{e}") from e


def parse_app_role_configs(
    raw: Union[str, bytes], document: str = "app role configurations"
) -> Optional[List[AppRoleConfig]]:
    """Parse a JSON array of role configurations; `null` yields None."""
    data = _decode(raw, document)
    if data is None:
        return None
    try:
        return AppRoleConfigList.validate_python(data)
    except ValidationError as e:
        raise DocumentLoadError(document, f"{e.error_count()} validation error(s)\n{e}") from e


def load_service_provider(path: PathLike) -> ServiceProvider:
    document = str(path)
    sp = parse_service_provider(_read_text(path, document), document)
    logger.debug("Loaded service provider %s from %s", sp.applicationName, path)
    return sp


def load_app_role_configs(path: PathLike) -> Optional[List[AppRoleConfig]]:
    document = str(path)
    configs = parse_app_role_configs(_read_text(path, document), document)
    logger.debug(
        "Loaded %s role configuration(s) from %s",
        "no" if configs is None else len(configs),
        path,
    )
    return configs


def dump_service_provider(service_provider: ServiceProvider, indent: int = 2) -> str:
    """Serialise a service provider to JSON; indent 0 produces compact output."""
    data = service_provider.model_dump(mode="json")
    if indent:
        return json.dumps(data, ensure_ascii=False, indent=indent)
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


__all__ = [
    "DocumentLoadError",
    "dump_service_provider",
    "load_app_role_configs",
    "load_service_provider",
    "parse_app_role_configs",
    "parse_service_provider",
]
