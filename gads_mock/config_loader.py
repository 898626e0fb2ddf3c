from pathlib import Path
from typing import Optional

import yaml

from .config_models import parse_accounts_config
from .data.accounts import AccountDirectory


def load_accounts_config(path: str) -> AccountDirectory:
    """
    Load seed accounts from a YAML file.

    Expected shape:
        accounts:
          - id: "123-456-7890"
            name: Acme E-Commerce Store
            currency_code: USD
            timezone: America/New_York
            industry: ecommerce
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Accounts config not found: {path}")

    data = yaml.safe_load(p.read_text(encoding="utf8"))
    if not isinstance(data, dict):
        raise ValueError("Accounts config must be a YAML mapping/object")

    config = parse_accounts_config(data)
    return AccountDirectory(a.to_account() for a in config.accounts)


def build_account_directory(path: Optional[str] = None) -> AccountDirectory:
    """YAML accounts if a path is given, otherwise the built-in seed accounts."""
    if path:
        return load_accounts_config(path)
    return AccountDirectory()
