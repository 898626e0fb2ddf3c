"""
Built-in seed accounts, one per industry.
"""

from typing import Dict, Iterable, List, Optional

from gads_mock.models import Account

MOCK_ACCOUNTS: List[Account] = [
    Account(
        id="123-456-7890",
        name="Acme E-Commerce Store",
        currency_code="USD",
        timezone="America/New_York",
        industry="ecommerce",
    ),
    Account(
        id="234-567-8901",
        name="CloudFlow SaaS Platform",
        currency_code="USD",
        timezone="America/Los_Angeles",
        industry="saas",
    ),
    Account(
        id="345-678-9012",
        name="Metro Plumbing Services",
        currency_code="USD",
        timezone="America/Chicago",
        industry="local_services",
    ),
    Account(
        id="456-789-0123",
        name="Wanderlust Travel Agency",
        currency_code="USD",
        timezone="America/Denver",
        industry="travel",
    ),
    Account(
        id="567-890-1234",
        name="Apex Financial Advisors",
        currency_code="USD",
        timezone="America/New_York",
        industry="finance",
    ),
]


class AccountDirectory:
    """
    Read-only lookup over a set of seed accounts.

    Defaults to MOCK_ACCOUNTS; a YAML accounts file can supply a different set
    (see gads_mock.config_loader.load_accounts_config).
    """

    def __init__(self, accounts: Optional[Iterable[Account]] = None):
        self._accounts = list(accounts) if accounts is not None else list(MOCK_ACCOUNTS)
        self._by_id: Dict[str, Account] = {a.id: a for a in self._accounts}

    def get(self, account_id: str) -> Optional[Account]:
        return self._by_id.get(account_id)

    def all(self) -> List[Account]:
        return list(self._accounts)

    def __contains__(self, account_id: str) -> bool:
        return account_id in self._by_id

    def __len__(self) -> int:
        return len(self._accounts)
