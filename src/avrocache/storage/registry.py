"""RegistryClient: a Confluent-compatible schema registry over HTTP."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from avrocache.errors import (
    RegistryError,
    RegistryNotFoundError,
    UnconfiguredRegistryError,
    UnknownSubjectError,
)
from avrocache.schema.types import Schema, SchemaName, qualified_name
from avrocache.storage.base import CacheKey, RegistryResult

if TYPE_CHECKING:
    from avrocache.config import Config

__all__ = ["RegistryClient", "CONTENT_TYPE"]

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/vnd.schemaregistry.v1+json"
HTTP_ERROR_STATUS = 400
HTTP_NOT_FOUND = 404

SUBJECT_NOT_FOUND = 40401
VERSION_NOT_FOUND = 40402
SCHEMA_NOT_FOUND = 40403


class _SchemaPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: str = Field(alias="schema")


class _SubjectVersionPayload(_SchemaPayload):
    subject: str
    id: int
    version: int


class _RegisteredPayload(BaseModel):
    id: int


class RegistryClient:
    """Looks up and registers schemas in a remote schema registry.

    With no ``url`` the client is unconfigured: lookups report
    ``UnconfiguredRegistryError`` without touching the network.
    """

    def __init__(
        self,
        url: str | None = None,
        session: requests.Session | None = None,
        timeout: float = 30,
        auth: tuple[str, str] | None = None,
    ) -> None:
        self._url = url.rstrip("/") if url else None
        self._session = session or requests.Session()
        self._timeout = timeout
        if auth is not None:
            self._session.auth = auth

    @classmethod
    def from_config(cls, config: Config, session: requests.Session | None = None) -> RegistryClient:
        """Build a client from ``registry.*`` configuration keys."""
        username = config.get("registry.auth.username")
        password = config.get("registry.auth.password")
        auth = (username, password) if username is not None and password is not None else None
        return cls(
            url=config.get("registry.url"),
            session=session,
            timeout=config.get("registry.timeout"),
            auth=auth,
        )

    @property
    def configured(self) -> bool:
        return self._url is not None

    # ----- RegistryStore -----

    def get(self, key: CacheKey) -> RegistryResult:
        """Look up a schema by global ID or by ``name[:version]``.

        Failures are returned inside the result, never raised.
        """
        try:
            if isinstance(key, int):
                schema = self._get_by_id(key)
            else:
                schema = self._get_by_name(SchemaName.parse(key))
        except RegistryError as e:
            return RegistryResult.failure(e)
        return RegistryResult.ok(schema)

    def put(self, name: str, raw_schema: str) -> Schema:
        """Register ``raw_schema`` under subject ``name`` and return it with its assigned version.

        Raises:
            UnconfiguredRegistryError: If no registry URL is configured.
            RegistryError: If the registry rejects the schema or cannot be reached.
        """
        subject = quote(name, safe="")
        body = {"schema": raw_schema}
        data = self._request("POST", f"/subjects/{subject}/versions", body, identifier=name)
        registered = self._parse(_RegisteredPayload, data)
        # Registration only answers with the ID; the version comes from a lookup of the same schema.
        data = self._request("POST", f"/subjects/{subject}", body, identifier=name)
        found = self._parse(_SubjectVersionPayload, data)
        logger.info("Registered schema '%s' with id %d version %d", name, registered.id, found.version)
        return Schema(raw_schema=raw_schema, id=registered.id, version=found.version, full_name=name)

    # ----- Lookups -----

    def _get_by_id(self, schema_id: int) -> Schema:
        data = self._request("GET", f"/schemas/ids/{schema_id}", identifier=schema_id)
        payload = self._parse(_SchemaPayload, data)
        return Schema(
            raw_schema=payload.schema_,
            id=schema_id,
            full_name=_full_name(payload.schema_),
        )

    def _get_by_name(self, name: SchemaName) -> Schema:
        subject = quote(name.name, safe="")
        version = "latest" if name.version is None else str(name.version)
        data = self._request("GET", f"/subjects/{subject}/versions/{version}", identifier=str(name))
        payload = self._parse(_SubjectVersionPayload, data)
        return Schema(
            raw_schema=payload.schema_,
            id=payload.id,
            version=payload.version,
            full_name=_full_name(payload.schema_) or payload.subject,
        )

    # ----- Transport -----

    def _request(
        self,
        method: str,
        path: str,
        json_body: Any | None = None,
        identifier: str | int | None = None,
    ) -> Any:
        if self._url is None:
            raise UnconfiguredRegistryError()

        url = f"{self._url}/{path.lstrip('/')}"
        headers = {"Accept": CONTENT_TYPE}
        if json_body is not None:
            headers["Content-Type"] = CONTENT_TYPE
        try:
            response = self._session.request(
                method,
                url,
                json=json_body,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise RegistryError(message=f"Schema registry {method} {url} failed: {e}", cause=e) from e

        if response.status_code >= HTTP_ERROR_STATUS:
            raise _error_for(response, method, url, identifier if identifier is not None else path)
        try:
            return response.json()
        except ValueError as e:
            raise RegistryError(
                message=f"Schema registry {method} {url} returned a non-JSON body",
                status=response.status_code,
                cause=e,
            ) from e

    @staticmethod
    def _parse(model: type[BaseModel], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RegistryError(message=f"Malformed schema registry response: {e}", cause=e) from e


def _error_for(response: requests.Response, method: str, url: str, identifier: str | int) -> RegistryError:
    status = response.status_code
    error_code: int | None = None
    message = response.text
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        if isinstance(body.get("error_code"), int):
            error_code = body["error_code"]
        message = body.get("message", message)

    if status == HTTP_NOT_FOUND and error_code == SUBJECT_NOT_FOUND:
        subject = SchemaName.parse(identifier).name if isinstance(identifier, str) else str(identifier)
        return UnknownSubjectError(subject=subject)
    if status == HTTP_NOT_FOUND and error_code in (VERSION_NOT_FOUND, SCHEMA_NOT_FOUND):
        return RegistryNotFoundError(identifier=identifier, error_code=error_code)
    return RegistryError(
        message=f"Schema registry {method} {url} failed with {status}: {message}",
        status=status,
        error_code=error_code,
    )


def _full_name(raw_schema: str) -> str | None:
    try:
        return qualified_name(json.loads(raw_schema))
    except ValueError:
        return None
