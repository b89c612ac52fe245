"""JSON API for companies and job postings, backed by MySQL with Redis caching."""

__version__ = "0.1.0"