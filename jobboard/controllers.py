"""HTTP handlers for the company and job endpoints."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping, NamedTuple, TypeVar

from flask import jsonify, request
from flask.typing import ResponseReturnValue

from .models import (
    STATUS_ERROR,
    STATUS_SUCCESS,
    RequestCompany,
    RequestJob,
    ResponseCompanies,
    ResponseJob,
    ValidationError,
)
from .usecases import CompaniesUsecase, JobsUsecase

DEFAULT_PAGE = "1"
DEFAULT_LIMIT = "10"
FALLBACK_PAGE = 1
FALLBACK_LIMIT = 2

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_BOUND = 2**63

_Request = TypeVar("_Request", RequestCompany, RequestJob)


class Paging(NamedTuple):
    page: int
    limit: int
    search: str


def _to_int(text: str | None, fallback: int) -> int:
    if text is None or not _INTEGER.fullmatch(text):
        return fallback
    value = int(text)
    if not -_INT64_BOUND <= value < _INT64_BOUND:
        return fallback
    return value


def parse_paging(args: Mapping[str, Any]) -> Paging:
    """Read page, limit and search from query arguments, falling back on bad numbers."""
    page = _to_int(args.get("page", DEFAULT_PAGE), FALLBACK_PAGE)
    limit = _to_int(args.get("limit", DEFAULT_LIMIT), FALLBACK_LIMIT)
    search = args.get("search") or ""
    return Paging(page=page, limit=limit, search=search)


def _decode_body(model: type[_Request]) -> _Request:
    """Decode the JSON request body into model, raising ValidationError if it cannot."""
    raw = request.get_data(cache=True)
    if not raw.strip():
        raise ValidationError("EOF")
    try:
        decoded = json.loads(raw)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    return model() if decoded is None else model.from_dict(decoded)


class CompaniesController:
    """Serves listing and creation of companies."""

    def __init__(self, usecase: CompaniesUsecase) -> None:
        self._usecase = usecase

    def get_companies(self) -> ResponseReturnValue:
        page, limit, search = parse_paging(request.args)
        try:
            companies = self._usecase.get_companies(page, limit, search)
        except Exception as exc:
            body = ResponseCompanies(status=STATUS_ERROR, message=str(exc))
            return jsonify(body.to_dict()), 500
        return jsonify(companies.to_dict()), 200

    def save_company(self) -> ResponseReturnValue:
        try:
            company = _decode_body(RequestCompany)
        except ValidationError as exc:
            return jsonify({"error": str(exc)}), 400
        try:
            company.validate()
        except ValidationError as exc:
            return jsonify({"error": str(exc)}), 409
        try:
            self._usecase.save_company(company)
        except Exception as exc:
            return jsonify({"error": str(exc)}), 500
        body = ResponseCompanies(status=STATUS_SUCCESS, message="Company saved")
        return jsonify(body.to_dict()), 201


class JobsController:
    """Serves listing and creation of jobs."""

    def __init__(self, usecase: JobsUsecase) -> None:
        self._usecase = usecase

    def get_jobs(self) -> ResponseReturnValue:
        page, limit, search = parse_paging(request.args)
        try:
            jobs = self._usecase.get_jobs(page, limit, search)
        except Exception as exc:
            body = ResponseJob(status=STATUS_ERROR, message=str(exc))
            return jsonify(body.to_dict()), 500
        return jsonify(jobs.to_dict()), 200

    def save_job(self) -> ResponseReturnValue:
        try:
            job = _decode_body(RequestJob)
        except ValidationError as exc:
            body = ResponseJob(status=STATUS_ERROR, message=str(exc))
            return jsonify(body.to_dict()), 400
        try:
            job.validate()
        except ValidationError as exc:
            body = ResponseJob(status=STATUS_ERROR, message=str(exc))
            return jsonify(body.to_dict()), 409
        try:
            self._usecase.save_job(job)
        except Exception as exc:
            return jsonify({"error": str(exc)}), 500
        body = ResponseJob(status=STATUS_SUCCESS, message="Success save job")
        return jsonify(body.to_dict()), 201