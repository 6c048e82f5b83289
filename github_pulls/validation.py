"""Parameter normalization and validation helpers.

All helpers are pure: they never mutate the mapping they are given.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from github_pulls.errors import InvalidValue, MissingArgument

logger = logging.getLogger(__name__)


def normalize_key(key: object) -> str:
    """Fold a parameter key to its canonical form ("Commit-Message " -> "commit_message")."""
    return str(key).strip().lower().replace("-", "_")


def normalize(params: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Return a copy of params with normalized keys."""
    if not params:
        return {}
    return {normalize_key(key): value for key, value in params.items()}


def filter_known(allowed: Iterable[str], params: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the allow-listed keys. Unknown keys are dropped silently."""
    known = set(allowed)
    dropped = [key for key in params if key not in known]
    if dropped:
        logger.debug(f"Dropping unrecognized parameters: {', '.join(dropped)}")
    return {key: value for key, value in params.items() if key in known}


def assert_presence_of(**arguments: Any) -> None:
    """Raise MissingArgument for the first argument that is None or blank."""
    for name, value in arguments.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingArgument(f"Missing required argument: {name}")


def assert_required_keys(required: Iterable[str], params: Mapping[str, Any]) -> None:
    missing = [key for key in required if key not in params]
    if missing:
        raise MissingArgument(f"Missing required parameters: {', '.join(missing)}")


def assert_valid_values(allowed_values: Mapping[str, Iterable[str]], params: Mapping[str, Any]) -> None:
    """Raise InvalidValue when a constrained key is present with an unknown value."""
    for key, allowed in allowed_values.items():
        if key not in params:
            continue
        choices = list(allowed)
        if params[key] not in choices:
            raise InvalidValue(key, params[key], choices)
