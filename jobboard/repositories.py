"""Storage of companies and jobs."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any

import pymysql

from .models import Company, Job, RequestCompany, RequestJob

_COUNT_COMPANIES = "SELECT COUNT(*) FROM companies WHERE name LIKE %s"
_SELECT_COMPANIES = "SELECT id, name FROM companies WHERE name LIKE %s LIMIT %s OFFSET %s"
_INSERT_COMPANY = "INSERT INTO companies (id, name) VALUES (%s, %s)"

_COUNT_JOBS = "SELECT COUNT(*) FROM jobs WHERE title LIKE %s OR description LIKE %s"
_SELECT_JOBS = (
    "SELECT id, title, description, company_id FROM jobs "
    "WHERE title LIKE %s OR description LIKE %s "
    "ORDER BY created_at DESC LIMIT %s OFFSET %s"
)
_INSERT_JOB = "INSERT INTO jobs (id, title, description, company_id) VALUES (%s, %s, %s, %s)"


class RepositoryError(Exception):
    """Raised when a query against the job store fails."""


class CompanyRepository(ABC):
    @abstractmethod
    def get_companies(self, page: int, limit: int, search: str) -> tuple[list[Company], int]:
        """Return one page of companies whose name contains search, and the match count."""

    @abstractmethod
    def save_company(self, company: RequestCompany) -> None:
        """Store a new company under a fresh identifier."""


class JobRepository(ABC):
    @abstractmethod
    def get_jobs(self, page: int, limit: int, search: str) -> tuple[list[Job], int]:
        """Return one page of the newest matching jobs, and the match count."""

    @abstractmethod
    def save_job(self, job: RequestJob) -> None:
        """Store a new job under a fresh identifier."""


def _offset(page: int, limit: int) -> int:
    return (page - 1) * limit


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def get_companies(self, page: int, limit: int, search: str) -> tuple[list[Company], int]:
        term = f"%{search}%"
        with self._connection.cursor() as cursor:
            cursor.execute(_COUNT_COMPANIES, (term,))
            (total,) = cursor.fetchone()
            cursor.execute(_SELECT_COMPANIES, (term, limit, _offset(page, limit)))
            companies = [Company(id=str(id_), name=name) for id_, name in cursor.fetchall()]
        return companies, int(total)

    def save_company(self, company: RequestCompany) -> None:
        with self._connection.cursor() as cursor:
            cursor.execute(_INSERT_COMPANY, (str(uuid.uuid4()), company.name))
        self._connection.commit()


class MySQLJobRepository(JobRepository):
    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def get_jobs(self, page: int, limit: int, search: str) -> tuple[list[Job], int]:
        term = f"%{search}%"
        with self._connection.cursor() as cursor:
            try:
                cursor.execute(_COUNT_JOBS, (term, term))
                (total,) = cursor.fetchone()
            except pymysql.MySQLError as exc:
                raise RepositoryError(f"error counting rows: {exc}") from exc
            try:
                cursor.execute(_SELECT_JOBS, (term, term, limit, _offset(page, limit)))
            except pymysql.MySQLError as exc:
                raise RepositoryError(f"error fetching jobs: {exc}") from exc
            jobs = [
                Job(id=str(id_), title=title, description=description, company_id=str(company_id))
                for id_, title, description, company_id in cursor.fetchall()
            ]
        return jobs, int(total)

    def save_job(self, job: RequestJob) -> None:
        with self._connection.cursor() as cursor:
            cursor.execute(
                _INSERT_JOB, (str(uuid.uuid4()), job.title, job.description, job.company_id)
            )
        self._connection.commit()