"""Business rules for listing and creating companies and jobs."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import redis

from .models import (
    KEY_REDIS,
    KEY_REDIS_COMPANY,
    STATUS_SUCCESS,
    CompaniesResponse,
    JobsResponse,
    Pagination,
    RequestCompany,
    RequestJob,
    ValidationError,
)
from .repositories import CompanyRepository, JobRepository

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 5 * 60
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5


class NoJobsFound(LookupError):
    """Raised when a job listing matches nothing."""

    def __init__(self, message: str = "No jobs found") -> None:
        super().__init__(message)


class Cache(Protocol):
    def get(self, name: str) -> Any: ...

    def set(self, name: str, value: Any, ex: int | None = None) -> Any: ...

    def delete(self, *names: str) -> Any: ...


def _paging(page: int, limit: int) -> tuple[int, int]:
    return max(page, DEFAULT_PAGE) if page >= 1 else DEFAULT_PAGE, limit if limit >= 1 else DEFAULT_LIMIT


def _store(cache: Cache, key: str, payload: Any) -> None:
    try:
        cache.set(key, json.dumps(payload), ex=CACHE_TTL_SECONDS)
    except redis.RedisError as exc:
        logger.debug("could not cache %s: %s", key, exc)


def _forget(cache: Cache, key: str) -> None:
    try:
        cache.delete(key)
    except redis.RedisError as exc:
        logger.debug("could not drop cached %s: %s", key, exc)


class CompaniesUsecase:
    """Lists companies page by page and creates new ones."""

    def __init__(self, repository: CompanyRepository, cache: Cache) -> None:
        self._repository = repository
        self._cache = cache

    def get_companies(self, page: int, limit: int, search: str) -> CompaniesResponse:
        """Return one page of companies; the result is cached but always read from the store."""
        page, limit = _paging(page, limit)
        companies, total = self._repository.get_companies(page, limit, search)
        response = CompaniesResponse(
            status=STATUS_SUCCESS,
            data=companies,
            pagination=Pagination(total_pages=page, total_items=total),
            message="Get All Company",
        )
        _store(self._cache, KEY_REDIS_COMPANY, response.to_dict())
        return response

    def save_company(self, company: RequestCompany) -> None:
        """Store the company and invalidate the cached listing."""
        self._repository.save_company(company)
        _forget(self._cache, KEY_REDIS_COMPANY)


class JobsUsecase:
    """Lists jobs page by page and creates new ones."""

    def __init__(self, repository: JobRepository, cache: Cache) -> None:
        self._repository = repository
        self._cache = cache

    def _cached(self) -> JobsResponse | None:
        try:
            raw = self._cache.get(KEY_REDIS)
        except redis.RedisError:
            return None
        if raw is None:
            return None
        try:
            decoded = json.loads(raw)
        except (ValueError, TypeError):
            return None
        if decoded is None:
            return JobsResponse()
        try:
            return JobsResponse.from_dict(decoded)
        except ValidationError:
            return None

    def get_jobs(self, page: int, limit: int, search: str) -> JobsResponse:
        """Return a cached response if one is held, else one page of matching jobs."""
        cached = self._cached()
        if cached is not None:
            return cached

        page, limit = _paging(page, limit)
        jobs, total = self._repository.get_jobs(page, limit, search)
        if not jobs:
            raise NoJobsFound()

        _store(self._cache, KEY_REDIS, [job.to_dict() for job in jobs])
        return JobsResponse(
            status=STATUS_SUCCESS,
            data=jobs,
            pagination=Pagination(total_pages=page, total_items=total),
            message="Get All Job",
        )

    def save_job(self, job: RequestJob) -> None:
        """Store the job and invalidate the cached listing."""
        self._repository.save_job(job)
        _forget(self._cache, KEY_REDIS)