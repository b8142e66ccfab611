# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Data sources backed by the upstream REST API."""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from admin_console.datasources.base import (
    DataSourceError,
    E,
    EntityDataSource,
    NotFoundError,
    ValidationFailedError,
)
from admin_console.models.enums import EntityKind

logger = logging.getLogger(__name__)

VALIDATION_STATUS_CODES = {400, 422}


class HttpEntityDataSource(EntityDataSource[E]):
    """Entity data source talking JSON over HTTP.

    Endpoints, relative to base_url:
        GET    /{resource}
        GET    /{resource}/{id}
        POST   /{resource}
        PUT    /{resource}/{id}
        PATCH  /{resource}/{id}/toggle-activation
    """

    def __init__(
        self,
        kind: EntityKind,
        model: type[E],
        base_url: str,
        resource: str,
        token: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.kind = kind
        self.model = model
        self.resource = resource.strip("/")
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def list(self) -> list[E]:
        data = await self._request("GET", f"/{self.resource}")
        # Accept both a bare list and a paginated envelope
        if isinstance(data, dict):
            data = data.get("results", [])
        if not isinstance(data, list):
            raise DataSourceError(f"Unexpected response while listing {self.resource}")
        return [self._parse(item) for item in data]

    async def get(self, entity_id: str | int) -> E:
        return self._parse(await self._request("GET", f"/{self.resource}/{entity_id}"))

    async def create(self, data: BaseModel) -> E:
        payload = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        return self._parse(await self._request("POST", f"/{self.resource}", payload))

    async def update(self, entity_id: str | int, data: BaseModel) -> E:
        payload = data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return self._parse(
            await self._request("PUT", f"/{self.resource}/{entity_id}", payload)
        )

    async def toggle_activation(self, entity_id: str | int) -> E:
        return self._parse(
            await self._request(
                "PATCH", f"/{self.resource}/{entity_id}/toggle-activation"
            )
        )

    async def _request(
        self, method: str, url: str, payload: dict[str, Any] | None = None
    ) -> Any:
        try:
            resp = await self._client.request(method, url, json=payload)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._translate_status_error(e.response) from e
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} timed out: {e}")
            raise DataSourceError("The server did not respond in time") from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise DataSourceError("Could not reach the server") from e

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise DataSourceError("The server sent an unreadable response") from e

    def _parse(self, item: Any) -> E:
        try:
            return self.model.model_validate(item)
        except PydanticValidationError as e:
            logger.error(f"Malformed {self.kind.value} payload: {e}")
            raise DataSourceError(f"The server sent an invalid {self.kind.value} record") from e

    def _translate_status_error(self, response: httpx.Response) -> DataSourceError:
        status_code = response.status_code
        if status_code == 404:
            return NotFoundError(f"This {self.kind.value} no longer exists")
        if status_code in VALIDATION_STATUS_CODES:
            message, field_errors = extract_validation_errors(response)
            return ValidationFailedError(message, field_errors)
        logger.error(
            f"{response.request.method} {response.request.url} returned HTTP {status_code}"
        )
        return DataSourceError(f"The server responded with HTTP {status_code}")


def extract_validation_errors(response: httpx.Response) -> tuple[str, dict[str, str]]:
    """Read a message and per-field errors from a rejected request.

    Understands {"message": ..., "errors": {field: msg}} bodies as well as
    FastAPI-style {"detail": [{"loc": [...], "msg": ...}]} and
    {"detail": "..."} bodies.
    """
    message = "The submitted data was rejected"
    field_errors: dict[str, str] = {}
    try:
        body = response.json()
    except ValueError:
        return message, field_errors
    if not isinstance(body, dict):
        return message, field_errors

    if isinstance(body.get("message"), str):
        message = body["message"]

    errors = body.get("errors")
    if isinstance(errors, dict):
        for field, value in errors.items():
            if isinstance(value, list):
                value = "; ".join(str(v) for v in value)
            field_errors[str(field)] = str(value)

    detail = body.get("detail")
    if isinstance(detail, str):
        message = detail
    elif isinstance(detail, list):
        for item in detail:
            if not isinstance(item, dict):
                continue
            loc = [str(part) for part in item.get("loc", []) if part != "body"]
            field_errors[".".join(loc) or "__root__"] = str(item.get("msg", "Invalid value"))

    return message, field_errors
