from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic import ConfigDict

from invoicer.domain.invoicing.entities import COMPANY_FIELD_LENGTHS, Company
from invoicer.interfaces.http.dto.base import CamelModel, bounded_str

_Name = bounded_str(COMPANY_FIELD_LENGTHS["name"])
_Owner = bounded_str(COMPANY_FIELD_LENGTHS["owner"], min_length=0)
_Address = bounded_str(COMPANY_FIELD_LENGTHS["address"])
_City = bounded_str(COMPANY_FIELD_LENGTHS["city"])
_PostalCode = bounded_str(COMPANY_FIELD_LENGTHS["postal_code"])
_Phone = bounded_str(COMPANY_FIELD_LENGTHS["phone"])
_Email = bounded_str(COMPANY_FIELD_LENGTHS["email"])
_TaxNumber = bounded_str(COMPANY_FIELD_LENGTHS["tax_number"])
_BankName = bounded_str(COMPANY_FIELD_LENGTHS["bank_name"])
_AccountNumber = bounded_str(COMPANY_FIELD_LENGTHS["account_number"])
_Iban = bounded_str(COMPANY_FIELD_LENGTHS["iban"])
_Swift = bounded_str(COMPANY_FIELD_LENGTHS["swift"])


class CompanyPatchDTO(CamelModel):
    """Partial company update.

    Keys that are not company fields are ignored. An explicit ``null`` is
    treated like an absent key.
    """

    model_config = ConfigDict(extra="ignore")

    name: _Name | None = None
    owner: _Owner | None = None
    address: _Address | None = None
    city: _City | None = None
    postal_code: _PostalCode | None = None
    phone: _Phone | None = None
    email: _Email | None = None
    tax_number: _TaxNumber | None = None
    bank_name: _BankName | None = None
    account_number: _AccountNumber | None = None
    iban: _Iban | None = None
    swift: _Swift | None = None
    logo: str | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class CompanyDTO(CamelModel):
    id: int
    name: str
    owner: str
    address: str
    city: str
    postal_code: str
    phone: str
    email: str
    tax_number: str
    bank_name: str
    account_number: str
    iban: str
    swift: str
    logo: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, company: Company) -> CompanyDTO:
        return cls.model_validate(asdict(company))

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
