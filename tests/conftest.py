# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
import uuid
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["CONSOLE_API_BASE_URL"] = ""
os.environ["CONSOLE_LOG_LEVEL"] = "DEBUG"

from admin_console.datasources.memory import (
    InMemoryEntityDataSource,
    InMemoryGroupDataSource,
)
from admin_console.main import app
from admin_console.models.enums import EntityKind, Profile
from admin_console.notifications.center import NotificationCenter
from admin_console.notifications.scheduling import Scheduler
from admin_console.schemas.company import Company
from admin_console.schemas.group import Group
from admin_console.schemas.user import User, UserSummary
from admin_console.viewmodels import (
    CompanyManagementViewModel,
    GroupManagementViewModel,
    UserManagementViewModel,
)


class ManualTimer:
    """Timer handle driven by ManualScheduler."""

    def __init__(self, when: float, callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Scheduler whose clock only moves when a test advances it."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[ManualTimer] = []

    def call_later(self, delay: float, callback) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        """Move the clock forward and fire every timer that came due."""
        self.now += seconds
        due = sorted(
            (t for t in self.timers if not t.cancelled and t.when <= self.now),
            key=lambda t: t.when,
        )
        for timer in due:
            self.timers.remove(timer)
            timer.callback()

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.cancelled]


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def notification_center(manual_scheduler) -> NotificationCenter:
    """A notification center on a manual clock."""
    return NotificationCenter(scheduler=manual_scheduler)


@pytest.fixture
def actor():
    """Mutable stand-in for the session provider. Starts as administrator."""
    return SimpleNamespace(profile=Profile.ADMINISTRATOR)


@pytest.fixture
def companies() -> list[Company]:
    return [
        Company(
            company_id="c-acme",
            name="Acme Corp",
            tax_id="12.345.678/0001-90",
            phone="+55 11 4000-1000",
            email="contact@acme.example",
            zip_code="01000-000",
        ),
        Company(
            company_id="c-globex",
            name="Globex",
            tax_id="98.765.432/0001-10",
            phone="+55 21 3000-2000",
            email="info@globex.example",
            is_active=False,
        ),
        Company(
            company_id="c-initech",
            name="Initech",
            tax_id="11.222.333/0001-44",
            phone="+55 31 2000-3000",
            email="hello@initech.example",
        ),
    ]


@pytest.fixture
def users() -> list[User]:
    return [
        User(user_id=1, name="Alice Admin", email="alice@example.com", profile=1),
        User(user_id=2, name="Mark Manager", email="mark@example.com", profile=2),
        User(user_id=3, name="Erin Employee", email="erin@example.com", profile=3),
        User(user_id=4, name="Nina Manager", email="nina@example.com", profile=2),
    ]


@pytest.fixture
def groups(users) -> list[Group]:
    summaries = {
        u.user_id: UserSummary(
            user_id=u.user_id, name=u.name, email=u.email, profile=u.profile
        )
        for u in users
    }
    return [
        Group(
            group_id=1,
            name="Engineering",
            description="Builds and runs the product",
            users=[summaries[2], summaries[3]],
        ),
        Group(group_id=2, name="Finance", description="Payroll and invoices"),
    ]


@pytest.fixture
def company_source(companies) -> InMemoryEntityDataSource[Company]:
    return InMemoryEntityDataSource(
        EntityKind.COMPANY,
        Company,
        "company_id",
        companies,
        id_factory=lambda: f"c-{uuid.uuid4().hex[:8]}",
    )


@pytest.fixture
def user_source(users) -> InMemoryEntityDataSource[User]:
    return InMemoryEntityDataSource(EntityKind.USER, User, "user_id", users)


@pytest.fixture
def group_source(user_source, groups) -> InMemoryGroupDataSource:
    return InMemoryGroupDataSource(users=user_source, entities=groups)


@pytest.fixture
def company_screen(company_source, actor, notification_center):
    return CompanyManagementViewModel(
        company_source, lambda: actor.profile, notification_center
    )


@pytest.fixture
def user_screen(user_source, actor, notification_center):
    return UserManagementViewModel(user_source, lambda: actor.profile, notification_center)


@pytest.fixture
def group_screen(group_source, actor, notification_center):
    return GroupManagementViewModel(group_source, lambda: actor.profile, notification_center)


@pytest.fixture(scope="function")
def client():
    """Create a test client with a fresh process-wide notification center."""
    NotificationCenter.reset_instance()
    with TestClient(app) as test_client:
        yield test_client
    NotificationCenter.reset_instance()


@pytest.fixture
def session_client(client):
    """Test client holding an open console session."""
    response = client.post("/api/v1/session")
    assert response.status_code == 201
    return client
