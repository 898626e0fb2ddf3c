"""
In-memory cache of generated account structures.

Structures are deterministic and immutable, so entries never expire and are
never invalidated. One StructureCache is created per app (or per test) and
passed to the ReportService; there is no module-level instance.
"""

import threading
from typing import Dict, List, Optional

from gads_mock.data.accounts import AccountDirectory
from gads_mock.generators.structure import generate_account_structure
from gads_mock.logging_config import get_logger
from gads_mock.models import Account, AccountStructure, AdGroup, Campaign, Keyword

logger = get_logger(__name__)


class StructureCache:
    """
    Insert-if-absent map from account id to AccountStructure.

    Thread-safe: generation happens under a lock, so each account is
    generated at most once per cache instance.
    """

    def __init__(self, accounts: Optional[AccountDirectory] = None):
        """
        Initialize cache.

        Args:
            accounts: Seed accounts to serve (default: built-in MOCK_ACCOUNTS)
        """
        self.accounts = accounts if accounts is not None else AccountDirectory()
        self._cache: Dict[str, AccountStructure] = {}
        self._lock = threading.Lock()

    def get_account(self, account_id: str) -> Optional[Account]:
        return self.accounts.get(account_id)

    def list_accounts(self) -> List[Account]:
        return self.accounts.all()

    def get_structure(self, account_id: str) -> Optional[AccountStructure]:
        """
        Get (or generate once) the structure for an account.

        Args:
            account_id: Account id (XXX-XXX-XXXX)

        Returns:
            AccountStructure, or None if the account is unknown
        """
        structure = self._cache.get(account_id)
        if structure is not None:
            return structure

        account = self.accounts.get(account_id)
        if account is None:
            logger.debug(f"No seed account for {account_id}")
            return None

        with self._lock:
            # Another thread may have generated it while we waited
            structure = self._cache.get(account_id)
            if structure is None:
                structure = generate_account_structure(account)
                self._cache[account_id] = structure
                logger.info(
                    f"Cached structure for {account_id} "
                    f"({len(structure.campaigns)} campaigns, {len(structure.keywords)} keywords)"
                )

        return structure

    def get_campaigns(self, account_id: str) -> List[Campaign]:
        structure = self.get_structure(account_id)
        return list(structure.campaigns) if structure else []

    def get_ad_groups(self, account_id: str, campaign_id: str) -> List[AdGroup]:
        structure = self.get_structure(account_id)
        return structure.ad_groups_for_campaign(campaign_id) if structure else []

    def get_keywords(self, account_id: str, ad_group_id: str) -> List[Keyword]:
        structure = self.get_structure(account_id)
        return structure.keywords_for_ad_group(ad_group_id) if structure else []

    def clear(self):
        """Drop all cached structures."""
        with self._lock:
            self._cache.clear()

    def size(self) -> int:
        """Get number of cached structures."""
        return len(self._cache)

    def __contains__(self, account_id: str) -> bool:
        return account_id in self._cache
