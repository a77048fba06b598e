"""This module decides how configuration values are displayed.

Credentials must never be printed in full by accident. The Firebase
service-account blob gets special treatment: it is summarized by the
account it identifies, which is what an operator needs to check, and the
private key is never shown.
"""

import json

SECRET_KEYWORDS = ("TOKEN", "SECRET", "PASS", "PWD", "CREDENTIAL", "API_KEY", "PRIVATE_KEY", "SERVICE_ACCOUNT")
MASK = "••••••••"


def is_secret_key(key: str) -> bool:
    """Checks whether a configuration key name suggests it holds a secret.

    Args:
        key: The configuration key, e.g. `FIREBASE_SERVICE_ACCOUNT_JSON`.

    Returns:
        True when the name contains one of the secret keywords.
    """
    upper_key = key.upper()
    return any(keyword in upper_key for keyword in SECRET_KEYWORDS)


def mask_value(value: str | None) -> str:
    """Masks a secret, keeping its last four characters when it is long enough to spare them.

    Args:
        value: The value to mask.

    Returns:
        The masked value.
    """
    if value is None:
        return "Not set"
    if len(value) < 8:
        return MASK
    return f"{MASK} (last 4: {value[-4:]})"


def describe_service_account(value: str) -> str:
    """Summarizes a service-account JSON blob without revealing its key.

    Args:
        value: The JSON blob.

    Returns:
        The account e-mail and project, or a plain mask when the blob is not
        a service-account document.
    """
    try:
        info = json.loads(value)
    except ValueError:
        return f"{MASK} (not valid JSON)"
    if not isinstance(info, dict) or "client_email" not in info:
        return mask_value(value)
    return f"{info['client_email']} (project {info.get('project_id', '?')}, private key hidden)"


def display_value(key: str, value: object, show_secrets: bool = False) -> str:
    """Renders a configuration value for display.

    Args:
        key: The configuration key.
        value: The configuration value.
        show_secrets: Whether secret values are shown in full.

    Returns:
        The text to display; empty for unset values.
    """
    if value is None:
        return ""
    text = str(value)
    if show_secrets or not is_secret_key(key):
        return text
    if "SERVICE_ACCOUNT" in key.upper():
        return describe_service_account(text)
    return mask_value(text)
