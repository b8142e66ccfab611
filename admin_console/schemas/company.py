# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Company schemas."""
import datetime

from pydantic import EmailStr, Field

from admin_console.schemas.common import ConsoleModel, Entity


class Company(Entity):
    """Company as returned by the upstream API."""

    company_id: str
    tax_id: str = ""
    phone: str | None = None
    email: str | None = None
    # upstream contract spells it "adress"
    address: str | None = Field(None, alias="adress")
    zip_code: str | None = None
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None

    @property
    def key(self) -> str:
        return self.company_id

    def search_values(self) -> tuple[str, ...]:
        return (self.name, self.phone or "", self.email or "", self.tax_id)


class CompanyCreate(ConsoleModel):
    """Schema for creating a company."""

    name: str = Field(..., min_length=1, max_length=200)
    tax_id: str = Field(..., min_length=1, max_length=32)
    phone: str | None = Field(None, max_length=32)
    email: EmailStr | None = None
    address: str | None = Field(None, alias="adress", max_length=300)
    zip_code: str | None = Field(None, max_length=16)


class CompanyUpdate(ConsoleModel):
    """Schema for updating a company."""

    name: str | None = Field(None, min_length=1, max_length=200)
    tax_id: str | None = Field(None, min_length=1, max_length=32)
    phone: str | None = Field(None, max_length=32)
    email: EmailStr | None = None
    address: str | None = Field(None, alias="adress", max_length=300)
    zip_code: str | None = Field(None, max_length=16)
