# src/planner/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from azure.core.exceptions import AzureError
from azure.identity import DefaultAzureCredential
from azure.keyvault.secrets import SecretClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    default_budget: int = 20
    export_prefix: str = "Mawsool_Bundle"
    log_level: str = "INFO"


def _parse_budget(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"default budget must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError("default budget must be > 0")
    return value


def _kv_uri(env: Mapping[str, str]) -> Optional[str]:
    """
    Key Vault is optional. Set KEYVAULT_NAME in App Service configuration
    (e.g. KEYVAULT_NAME = planner-dev-kv) to enable it.
    """
    name = env.get("KEYVAULT_NAME", "").strip()
    if not name:
        return None
    return f"https://{name}.vault.azure.net/"


def _secret(client: SecretClient, name: str) -> Optional[str]:
    """
    Return a secret value or None if it doesn't exist or is inaccessible.
    Tolerant so the app still runs with partial configuration.
    """
    try:
        return client.get_secret(name).value
    except AzureError as e:
        logger.warning("Key Vault secret %r unavailable, using environment value: %s", name, e)
        return None


def settings_from_env(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    base = Settings()
    return Settings(
        default_budget=_parse_budget(env["PLANNER_DEFAULT_BUDGET"])
        if env.get("PLANNER_DEFAULT_BUDGET")
        else base.default_budget,
        export_prefix=env.get("PLANNER_EXPORT_PREFIX") or base.export_prefix,
        log_level=(env.get("PLANNER_LOG_LEVEL") or base.log_level).upper(),
    )


def apply_key_vault(
    settings: Settings,
    *,
    kv_uri: str,
    budget_secret_name: str = "planner-default-budget",
    prefix_secret_name: str = "planner-export-prefix",
    log_level_secret_name: str = "planner-log-level",
) -> Settings:
    """
    Overlays Key Vault secrets on top of `settings`.
    DefaultAzureCredential covers Managed Identity in Azure and Azure CLI / VS Code
    logins locally.
    """
    credential = DefaultAzureCredential(
        exclude_interactive_browser_credential=True  # Streamlit shouldn't pop browsers in prod
    )
    client = SecretClient(vault_url=kv_uri, credential=credential)

    budget = _secret(client, budget_secret_name)
    prefix = _secret(client, prefix_secret_name)
    level = _secret(client, log_level_secret_name)

    return replace(
        settings,
        default_budget=_parse_budget(budget) if budget else settings.default_budget,
        export_prefix=prefix or settings.export_prefix,
        log_level=level.upper() if level else settings.log_level,
    )


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    settings = settings_from_env(env)
    uri = _kv_uri(env)
    if uri:
        settings = apply_key_vault(settings, kv_uri=uri)
    return settings


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig leaves the level alone when handlers already exist
    logging.getLogger().setLevel(level)


__all__ = [
    "Settings",
    "settings_from_env",
    "apply_key_vault",
    "load_settings",
    "configure_logging",
]
