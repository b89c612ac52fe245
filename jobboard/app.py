"""The web application and the command that serves it."""

from __future__ import annotations

import argparse
import logging
import os

from dotenv import load_dotenv
from flask import Flask

from .cache import connect_redis
from .controllers import CompaniesController, JobsController
from .db import connect_db
from .repositories import MySQLCompanyRepository, MySQLJobRepository
from .usecases import CompaniesUsecase, JobsUsecase

logger = logging.getLogger(__name__)

ENV_FILE = ".env"
HOST = "0.0.0.0"
PORT = 8080


def create_app(company_usecase: CompaniesUsecase, job_usecase: JobsUsecase) -> Flask:
    """Build the application with the company and job routes."""
    app = Flask(__name__)
    companies = CompaniesController(company_usecase)
    jobs = JobsController(job_usecase)
    app.add_url_rule(
        "/api/v1/companies", "get_companies", companies.get_companies, methods=["GET"]
    )
    app.add_url_rule(
        "/api/v1/companies", "save_company", companies.save_company, methods=["POST"]
    )
    app.add_url_rule("/api/v1/jobs", "get_jobs", jobs.get_jobs, methods=["GET"])
    app.add_url_rule("/api/v1/jobs", "save_job", jobs.save_job, methods=["POST"])
    return app


def main(argv: list[str] | None = None) -> int:
    """Load .env, connect to MySQL and Redis, and serve the API on port 8080."""
    parser = argparse.ArgumentParser(
        prog="jobboard", description="Serve the job board API on port 8080."
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    if not os.path.isfile(ENV_FILE):
        raise FileNotFoundError(f"open {ENV_FILE}: no such file or directory")
    load_dotenv(ENV_FILE)

    connection = connect_db()
    try:
        cache = connect_redis()
        app = create_app(
            CompaniesUsecase(MySQLCompanyRepository(connection), cache),
            JobsUsecase(MySQLJobRepository(connection), cache),
        )
        try:
            app.run(host=HOST, port=PORT, threaded=False)
        except OSError as exc:
            logger.error("Server failed to start %s", exc)
    finally:
        connection.close()
    return 0