import pytest

from jobboard.app import create_app, main
from jobboard.models import CompaniesResponse, Company, JobsResponse, Pagination


class FakeCompanies:
    def __init__(self):
        self.saved = []

    def get_companies(self, page, limit, search):
        return CompaniesResponse(
            status="success",
            data=[Company(id="1", name="Test Company 1")],
            pagination=Pagination(total_pages=page, total_items=1),
            message="Get All Company",
        )

    def save_company(self, company):
        self.saved.append(company)


class FakeJobs:
    def __init__(self):
        self.saved = []

    def get_jobs(self, page, limit, search):
        return JobsResponse(status="success", message="Get All Job")

    def save_job(self, job):
        self.saved.append(job)


@pytest.fixture
def client():
    return create_app(FakeCompanies(), FakeJobs()).test_client()


def test_companies_route_lists(client):
    result = client.get("/api/v1/companies")
    assert result.status_code == 200
    assert result.get_json()["message"] == "Get All Company"
    assert result.get_json()["pagination"]["total_pages"] == 1


def test_companies_route_saves():
    companies = FakeCompanies()
    client = create_app(companies, FakeJobs()).test_client()
    result = client.post("/api/v1/companies", json={"name": "Acme"})
    assert result.status_code == 201
    assert [c.name for c in companies.saved] == ["Acme"]


def test_jobs_routes(client):
    listed = client.get("/api/v1/jobs")
    assert listed.status_code == 200
    assert listed.get_json()["message"] == "Get All Job"
    saved = client.post(
        "/api/v1/jobs", json={"company_id": "1", "title": "Test Job A", "description": "Test Job A"}
    )
    assert saved.status_code == 201


def test_unknown_route_and_method(client):
    assert client.get("/api/v1/unknown").status_code == 404
    assert client.delete("/api/v1/jobs").status_code == 405


def test_main_requires_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        main([])


def test_main_rejects_bad_database_url(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("REDIS_PORT=6379\n")
    monkeypatch.setenv("DB_URL", "bogus")
    with pytest.raises(ValueError):
        main([])


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--nope"])
    assert info.value.code == 2