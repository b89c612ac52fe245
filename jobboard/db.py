"""MySQL connection set up from a data source name."""

from __future__ import annotations

import os
from typing import Any
from urllib.parse import parse_qsl, unquote

import pymysql

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3306
DEFAULT_SOCKET = "/tmp/mysql.sock"


def _host_port(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or host.endswith(":"):
        host, port = address, ""
    host = host.strip("[]")
    try:
        return host or DEFAULT_HOST, int(port) if port else DEFAULT_PORT
    except ValueError:
        raise ValueError(f"invalid DSN: bad port in address {address!r}") from None


def parse_dsn(dsn: str) -> dict[str, Any]:
    """Turn a `user:pass@tcp(host:port)/dbname?params` string into connect arguments."""
    head, slash, tail = dsn.rpartition("/")
    if not slash and dsn:
        raise ValueError("invalid DSN: missing the slash separating the database name")

    credentials, _, netaddr = head.rpartition("@")
    login = credentials.partition(":")

    net, address = netaddr, ""
    if "(" in netaddr:
        if not netaddr.endswith(")"):
            raise ValueError("invalid DSN: network address not terminated (missing closing brace)")
        net, _, address = netaddr[:-1].partition("(")

    dbname, _, query = tail.partition("?")
    settings: dict[str, Any] = {
        "user": login[0],
        "password": login[2],
        "database": unquote(dbname) or None,
    }

    if net == "unix":
        settings["unix_socket"] = address or DEFAULT_SOCKET
    elif net in ("", "tcp"):
        settings["host"], settings["port"] = _host_port(address)
    else:
        raise ValueError(f"invalid DSN: unsupported network {net!r}")

    for key, value in parse_qsl(query, keep_blank_values=True):
        if key == "charset" and value:
            settings["charset"] = value.split(",")[0]
    return settings


def connect_db(url: str | None = None) -> pymysql.connections.Connection:
    """Open and check a MySQL connection; the DSN defaults to the DB_URL variable."""
    dsn = os.environ.get("DB_URL", "") if url is None else url
    connection = pymysql.connect(**parse_dsn(dsn))
    try:
        connection.ping(reconnect=False)
    except pymysql.MySQLError:
        connection.close()
        raise
    return connection