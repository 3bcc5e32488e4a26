"""Stack configuration store.

Each stack keeps a flat key-value configuration and, after a successful run, its
published outputs under ``~/.config/gcloud/camux_gcp/<stack>/``.
"""

import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from camux.gcp.types import (
    CONFIG_KEYS,
    DEFAULT_PROJECT_NAME,
    Configuration,
    ConfigurationError,
    Outputs,
)

DEFAULT_STACK = "dev"
CONFIG_FILE = "config.yaml"
OUTPUTS_FILE = "outputs.yaml"


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def load_configuration(values: Mapping[str, Any]) -> Configuration:
    """Build a run configuration from flat key-value settings.

    Args:
        values: Mapping with the optional keys ``projectName``, ``billingAccount``
            and ``organizationId``

    Returns:
        The immutable configuration for the run

    Raises:
        ConfigurationError: If ``billingAccount`` is missing or empty
    """
    project_name = _clean(values.get("projectName")) or DEFAULT_PROJECT_NAME

    billing_account = _clean(values.get("billingAccount"))
    if not billing_account:
        raise ConfigurationError(
            "billingAccount is required - set with: "
            "camux_gcp config set billingAccount <YOUR_BILLING_ACCOUNT_ID>"
        )

    organization_id = _clean(values.get("organizationId")) or None

    return Configuration(
        project_name=project_name,
        billing_account=billing_account,
        organization_id=organization_id,
    )


def get_stack_dir(stack: str = DEFAULT_STACK) -> Path:
    """Get the directory holding a stack's configuration and outputs."""
    return Path.home() / ".config" / "gcloud" / "camux_gcp" / stack


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


def _write_yaml(path: Path, data: Mapping[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(dict(data), f, default_flow_style=False, sort_keys=False)


def load_stack_config(stack: str = DEFAULT_STACK) -> dict[str, str]:
    """Load the key-value configuration for a stack (empty if never set)."""
    data = _read_yaml(get_stack_dir(stack) / CONFIG_FILE)
    return {key: _clean(value) for key, value in data.items()}


def get_config_value(stack: str, key: str) -> Optional[str]:
    """Get a single configuration value, or None if unset."""
    value = load_stack_config(stack).get(key)
    return value if value else None


def set_config_value(stack: str, key: str, value: str) -> Path:
    """Set a configuration value for a stack.

    Args:
        stack: The stack name
        key: One of ``projectName``, ``billingAccount``, ``organizationId``
        value: The value to store

    Returns:
        Path to the stack's config file

    Raises:
        ValueError: If ``key`` is not a known configuration key
    """
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown configuration key '{key}'. Expected one of: {', '.join(CONFIG_KEYS)}")

    config_file = get_stack_dir(stack) / CONFIG_FILE
    data = load_stack_config(stack)
    data[key] = value
    _write_yaml(config_file, data)
    return config_file


def unset_config_value(stack: str, key: str) -> bool:
    """Remove a configuration value. Returns True if it was present."""
    config_file = get_stack_dir(stack) / CONFIG_FILE
    data = load_stack_config(stack)
    if key not in data:
        return False
    del data[key]
    _write_yaml(config_file, data)
    return True


def save_outputs(stack: str, outputs: Outputs) -> Path:
    """Save published outputs for a stack.

    The file holds private key material and is written with mode 0600.
    """
    outputs_file = get_stack_dir(stack) / OUTPUTS_FILE
    _write_yaml(outputs_file, outputs.as_dict())
    os.chmod(outputs_file, 0o600)
    return outputs_file


def load_outputs(stack: str = DEFAULT_STACK) -> dict[str, str]:
    """Load the outputs of the last successful run of a stack.

    Raises:
        FileNotFoundError: If the stack has never been provisioned
    """
    outputs_file = get_stack_dir(stack) / OUTPUTS_FILE
    if not outputs_file.exists():
        raise FileNotFoundError(
            f"No outputs found for stack '{stack}'. Run 'camux_gcp up --stack {stack}' first."
        )
    return {key: str(value) for key, value in _read_yaml(outputs_file).items()}
