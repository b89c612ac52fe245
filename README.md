# jobboard

A small JSON API for publishing companies and the jobs they offer. Data lives
in MySQL; listings are written to Redis with a five-minute expiry, and the
cached entry is deleted whenever something new is saved.

## Configuration

The `jobboard` command loads a `.env` file from the working directory before
anything else; if that file does not exist it stops with `FileNotFoundError`.
Settings are then read from the environment:

| Variable     | Meaning                                                              |
|--------------|----------------------------------------------------------------------|
| `DB_URL`     | MySQL data source, e.g. `user:password@tcp(localhost:3306)/jobboard` |
| `REDIS_URL`  | Redis host, e.g. `localhost` (an empty value means `localhost`)      |
| `REDIS_PORT` | Redis port, e.g. `6379`                                              |

An example `.env`:

```
DB_URL=user:password@tcp(localhost:3306)/jobboard
REDIS_URL=localhost
REDIS_PORT=6379
```

`DB_URL` has the form `user:password@net(address)/dbname?params`. The network
may be `tcp` (the default; address `host:port`, defaulting to `127.0.0.1:3306`)
or `unix` (address is a socket path, defaulting to `/tmp/mysql.sock`). Of the
parameters only `charset` is used. `jobboard.db.parse_dsn` turns such a string
into connection arguments and raises `ValueError` when it is malformed;
`jobboard.db.connect_db` opens the connection and pings it.

`jobboard.cache.connect_redis` connects to Redis database 0 and raises
`jobboard.cache.CacheConnectionError` if the port is not a number or the
server does not answer.

## Storage

The database must already hold two tables; the package does not create them:

- `companies` with columns `id` and `name`
- `jobs` with columns `id`, `title`, `description`, `company_id` and `created_at`

Identifiers are generated as UUIDs when rows are saved.

## Running

```
jobboard
```

The command takes no options besides `--help`. It connects to MySQL and Redis
at start-up, fails if either is unreachable, and then serves the API on
`0.0.0.0:8080` with Flask's built-in server.

## Endpoints

### `GET /api/v1/companies`

Query parameters:

- `page` – page number, default `1`
- `limit` – page size, default `10`
- `search` – substring matched against the company name

A `page` that is not an integer is treated as `1`; a `limit` that is not an
integer is treated as `2`. A page below 1 then becomes 1 and a limit below 1
becomes 5.

Response (`200`):

```json
{
  "status": "success",
  "data": [{"id": "…", "name": "Acme"}],
  "pagination": {"total_pages": 1, "total_items": 1},
  "message": "Get All Company"
}
```

`total_pages` reports the page that was requested; `total_items` is the
number of matching rows. The listing is always read from the database; the
response is also stored in Redis under `company_list`.

On a database error the answer is `500` with
`{"status": "error", "companies": null, "message": "…"}`.

### `POST /api/v1/companies`

Body: `{"name": "Acme"}`. The name is required.

- `201` with `{"status": "success", "companies": null, "message": "Company saved"}`
- `400` with `{"error": "…"}` when the body is empty, not JSON, or has fields of the wrong type
- `409` with `{"error": "…"}` when the name is missing or empty
- `500` with `{"error": "…"}` when the database refuses the insert

### `GET /api/v1/jobs`

Same query parameters as the company list; `search` matches either the title
or the description. Jobs are returned newest first.

Response (`200`):

```json
{
  "status": "success",
  "data": [
    {"id": "…", "company_id": "…", "title": "Engineer", "description": "Backend work"}
  ],
  "pagination": {"total_pages": 1, "total_items": 1},
  "message": "Get All Job"
}
```

The list of jobs is stored in Redis under `job_list`. A value under that key
is returned instead of querying the database only when it decodes as a whole
response envelope like the one above.

When no job matches, or the database fails, the answer is `500` with
`{"status": "error", "jobs": null, "message": "…"}` (the message is
`No jobs found` in the first case).

### `POST /api/v1/jobs`

Body:

```json
{"company_id": "…", "title": "Engineer", "description": "Backend work"}
```

All three fields are required.

- `201` with `{"status": "success", "jobs": null, "message": "Success save job"}`
- `400` with `{"status": "error", "jobs": null, "message": "…"}` when the body cannot be decoded
- `409` with the same shape when a field is missing or empty
- `500` with `{"error": "…"}` when the database refuses the insert

## Using it as a library

- `jobboard.app.create_app(company_usecase, job_usecase)` builds the Flask
  application with the four routes above.
- `jobboard.usecases.CompaniesUsecase` and `jobboard.usecases.JobsUsecase`
  take a repository and a Redis client (anything with `get`, `set` and
  `delete`). `JobsUsecase.get_jobs` raises `jobboard.usecases.NoJobsFound`
  when nothing matches.
- `jobboard.repositories` defines the abstract `CompanyRepository` and
  `JobRepository`, their MySQL implementations `MySQLCompanyRepository` and
  `MySQLJobRepository`, and `RepositoryError`.
- `jobboard.models` holds the dataclasses (`Company`, `Job`, `Pagination`,
  `CompaniesResponse`, `JobsResponse`, `ResponseCompanies`, `ResponseJob`,
  `RequestCompany`, `RequestJob`) with their `to_dict`/`from_dict` methods,
  and `ValidationError`.
- `jobboard.controllers.parse_paging(args)` reads `page`, `limit` and
  `search` from query arguments with the fallbacks described above.

## What it does not do

There is no authentication, no way to update or delete companies or jobs,
and no check that a job's `company_id` names an existing company. Tables are
not created or migrated by the package.