import pymysql
import pytest

from jobboard import db


def test_parse_tcp_dsn_with_credentials():
    settings = db.parse_dsn("user:password@tcp(localhost:3306)/jobs?charset=utf8mb4")
    assert settings["user"] == "user"
    assert settings["password"] == "password"
    assert settings["host"] == "localhost"
    assert settings["port"] == 3306
    assert settings["database"] == "jobs"
    assert settings["charset"] == "utf8mb4"


def test_parse_dsn_defaults():
    settings = db.parse_dsn("/jobs")
    assert settings["host"] == db.DEFAULT_HOST
    assert settings["port"] == db.DEFAULT_PORT
    assert settings["user"] == ""


def test_parse_empty_dsn_uses_defaults():
    settings = db.parse_dsn("")
    assert settings["database"] is None
    assert settings["host"] == db.DEFAULT_HOST


def test_parse_unix_socket():
    settings = db.parse_dsn("user@unix(/var/run/mysqld.sock)/jobs")
    assert settings["unix_socket"] == "/var/run/mysqld.sock"
    assert "host" not in settings


def test_parse_missing_slash():
    with pytest.raises(ValueError, match="missing the slash"):
        db.parse_dsn("user@tcp(localhost:3306)")


def test_parse_unterminated_address():
    with pytest.raises(ValueError, match="missing closing brace"):
        db.parse_dsn("user@tcp(localhost:3306/jobs")


class _FakeConnection:
    def __init__(self, ping_error=None):
        self.ping_error = ping_error
        self.pinged = False
        self.closed = False

    def ping(self, reconnect=True):
        self.pinged = True
        if self.ping_error:
            raise self.ping_error

    def close(self):
        self.closed = True


def test_connect_db_reads_environment(monkeypatch):
    captured = {}
    connection = _FakeConnection()

    def fake_connect(**kwargs):
        captured.update(kwargs)
        return connection

    monkeypatch.setattr(pymysql, "connect", fake_connect)
    monkeypatch.setenv("DB_URL", "user:password@tcp(localhost:3306)/jobs")
    result = db.connect_db()
    assert result is connection
    assert connection.pinged
    assert captured["database"] == "jobs"


def test_connect_db_closes_on_failed_ping(monkeypatch):
    connection = _FakeConnection(ping_error=pymysql.err.OperationalError(2003, "down"))
    monkeypatch.setattr(pymysql, "connect", lambda **kwargs: connection)
    with pytest.raises(pymysql.err.OperationalError):
        db.connect_db("/jobs")
    assert connection.closed