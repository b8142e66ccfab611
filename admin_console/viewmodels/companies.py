# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Companies screen. Administrators only."""
from admin_console.models.enums import EntityKind
from admin_console.schemas.company import Company, CompanyCreate, CompanyUpdate
from admin_console.viewmodels.base import EntityManagementViewModel


class CompanyManagementViewModel(EntityManagementViewModel[Company]):
    kind = EntityKind.COMPANY
    create_schema = CompanyCreate
    update_schema = CompanyUpdate
