"""Redaction of credentials in logged arguments and reported process arguments."""

from collections.abc import Sequence
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "token",
    "password",
    "access_token",
    "refresh_token",
    "authorization",
    "secret",
})

# Values kept out of logs for size, not secrecy
ELIDE_KEYS: frozenset[str] = frozenset({"filedata"})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact sensitive keys from a payload.

    Creates a deep copy - the original payload is never mutated.

    Args:
        payload: The dictionary to redact sensitive values from.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]" and
        inline file data replaced by its length.
    """
    return _redact_recursive(payload)


def _redact_recursive(obj: Any) -> Any:
    """Recursively redact sensitive keys."""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            elif key_lower in ELIDE_KEYS and isinstance(value, str):
                result[key] = f"[{len(value)} chars]"
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, list):
        return [_redact_recursive(item) for item in obj]
    else:
        return obj


def redact_args(args: Sequence[str], secret_prefixes: Sequence[str]) -> list[str]:
    """Mask the value of every `--key=value` argument whose prefix is secret.

    Args:
        args: Process arguments as observed at startup.
        secret_prefixes: Prefixes such as "--directus-token=".

    Returns:
        A new list with secret values replaced by "[REDACTED]".
    """
    redacted = []
    for arg in args:
        prefix = next((p for p in secret_prefixes if arg.startswith(p)), None)
        redacted.append(f"{prefix}{REDACTED_VALUE}" if prefix else arg)
    return redacted
