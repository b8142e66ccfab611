# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the shared schema types."""

import pytest

from admin_console.schemas.common import Entity
from admin_console.schemas.company import Company


class TestEntity:
    """Tests for the entity contract."""

    def test_base_cannot_be_instantiated(self):
        """Should refuse the base class, which has no identifier."""
        with pytest.raises(TypeError):
            Entity(name="Anything")

    def test_subclass_must_implement_search_values(self):
        """Should refuse a subclass that only implements key."""

        class Keyed(Entity):
            entity_id: int

            @property
            def key(self) -> int:
                return self.entity_id

        with pytest.raises(TypeError):
            Keyed(entity_id=1, name="Half done")

    def test_concrete_entity(self):
        company = Company(company_id="c-1", name="Acme", tax_id="123")

        assert company.key == "c-1"
        assert company.search_values() == ("Acme", "", "", "123")
