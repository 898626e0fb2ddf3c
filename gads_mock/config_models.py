import re
from typing import List

from pydantic import BaseModel, Field, field_validator

from gads_mock.models import INDUSTRIES, Account

ACCOUNT_ID_PATTERN = re.compile(r"^\d{3}-\d{3}-\d{4}$")


class AccountSeedConfig(BaseModel):
    id: str
    name: str
    currency_code: str = "USD"
    timezone: str = "UTC"
    industry: str

    @field_validator("id")
    @classmethod
    def id_format(cls, v: str) -> str:
        if not ACCOUNT_ID_PATTERN.match(v):
            raise ValueError("account id must be in format XXX-XXX-XXXX")
        return v

    @field_validator("industry")
    @classmethod
    def industry_known(cls, v: str) -> str:
        v2 = v.strip().lower()
        if v2 not in INDUSTRIES:
            raise ValueError(f"industry must be one of {list(INDUSTRIES)}")
        return v2

    def to_account(self) -> Account:
        return Account(
            id=self.id,
            name=self.name,
            currency_code=self.currency_code,
            timezone=self.timezone,
            industry=self.industry,
        )


class AccountsConfig(BaseModel):
    accounts: List[AccountSeedConfig] = Field(min_length=1)

    @field_validator("accounts")
    @classmethod
    def unique_ids(cls, v: List[AccountSeedConfig]) -> List[AccountSeedConfig]:
        ids = [a.id for a in v]
        if len(ids) != len(set(ids)):
            raise ValueError("account ids must be unique")
        return v


def parse_accounts_config(data: dict) -> AccountsConfig:
    # Raises ValidationError if invalid
    return AccountsConfig.model_validate(data)
