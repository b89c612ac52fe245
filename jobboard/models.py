"""Entities, request bodies and response envelopes of the job board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"
KEY_REDIS = "job_list"
KEY_REDIS_COMPANY = "company_list"


class ValidationError(ValueError):
    """Raised when a body cannot be decoded or misses a required field."""


def _mapping(data: Any, struct: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError(f"cannot decode {type(data).__name__} into {struct}")
    return data


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValidationError(
            f"cannot decode {type(value).__name__} into field {key} of type {kind.__name__}"
        )
    return value


def _require(struct: str, fields: Mapping[str, str]) -> None:
    problems = [
        f"Key: '{struct}.{name}' Error:Field validation for '{name}' failed on the 'required' tag"
        for name, value in fields.items()
        if not value
    ]
    if problems:
        raise ValidationError("\n".join(problems))


@dataclass
class Company:
    """A company that posts jobs."""

    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> Company:
        data = _mapping(data, "Company")
        return cls(id=_get(data, "id", str, ""), name=_get(data, "name", str, ""))


@dataclass
class Job:
    """A job posting; its creation time is never serialised."""

    id: str
    company_id: str
    title: str
    description: str
    created_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "company_id": self.company_id,
            "title": self.title,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Job:
        data = _mapping(data, "Job")
        return cls(
            id=_get(data, "id", str, ""),
            company_id=_get(data, "company_id", str, ""),
            title=_get(data, "title", str, ""),
            description=_get(data, "description", str, ""),
        )


@dataclass
class Pagination:
    total_pages: int = 0
    total_items: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"total_pages": self.total_pages, "total_items": self.total_items}

    @classmethod
    def from_dict(cls, data: Any) -> Pagination:
        data = _mapping(data, "Pagination")
        return cls(
            total_pages=_get(data, "total_pages", int, 0),
            total_items=_get(data, "total_items", int, 0),
        )


def _page_to_dict(page: Any) -> dict[str, Any]:
    return {
        "status": page.status,
        "data": [item.to_dict() for item in page.data],
        "pagination": page.pagination.to_dict(),
        "message": page.message,
    }


def _page_fields(data: Any, struct: str, item: Any) -> dict[str, Any]:
    data = _mapping(data, struct)
    pagination = data.get("pagination")
    return {
        "status": _get(data, "status", str, ""),
        "data": [item.from_dict(entry) for entry in _get(data, "data", list, [])],
        "pagination": Pagination() if pagination is None else Pagination.from_dict(pagination),
        "message": _get(data, "message", str, ""),
    }


@dataclass
class CompaniesResponse:
    """A page of companies as returned by the listing endpoint."""

    status: str = ""
    data: list[Company] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _page_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> CompaniesResponse:
        return cls(**_page_fields(data, "CompaniesResponse", Company))


@dataclass
class JobsResponse:
    """A page of jobs as returned by the listing endpoint."""

    status: str = ""
    data: list[Job] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _page_to_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> JobsResponse:
        return cls(**_page_fields(data, "JobsResponse", Job))


@dataclass
class ResponseCompanies:
    """Status envelope for company operations."""

    status: str = ""
    companies: list[Company] | None = None
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        companies = None if self.companies is None else [c.to_dict() for c in self.companies]
        return {"status": self.status, "companies": companies, "message": self.message}


@dataclass
class ResponseJob:
    """Status envelope for job operations."""

    status: str = ""
    jobs: list[Job] | None = None
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        jobs = None if self.jobs is None else [job.to_dict() for job in self.jobs]
        return {"status": self.status, "jobs": jobs, "message": self.message}


@dataclass
class RequestCompany:
    """Body of a request that creates a company."""

    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> RequestCompany:
        data = _mapping(data, "RequestCompanies")
        return cls(name=_get(data, "name", str, ""))

    def validate(self) -> RequestCompany:
        """Return self, or raise ValidationError naming every missing field."""
        _require("RequestCompanies", {"Name": self.name})
        return self


@dataclass
class RequestJob:
    """Body of a request that creates a job."""

    company_id: str = ""
    title: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> RequestJob:
        data = _mapping(data, "RequestJobs")
        return cls(
            company_id=_get(data, "company_id", str, ""),
            title=_get(data, "title", str, ""),
            description=_get(data, "description", str, ""),
        )

    def validate(self) -> RequestJob:
        """Return self, or raise ValidationError naming every missing field."""
        _require(
            "RequestJobs",
            {"CompanyID": self.company_id, "Title": self.title, "Description": self.description},
        )
        return self