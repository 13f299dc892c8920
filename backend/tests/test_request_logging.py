"""
Promptopia Backend — Access Log Tests
=======================================

What:  RequestLoggingMiddleware writes one line per request on the
       `promptopia.access` logger, at a level chosen by the status class.
How:   Requests go through the full app; caplog captures the records.
"""

import logging

import pytest

from app.config import settings
from app.database import dispose_engine

ACCESS_LOGGER = "promptopia.access"


def access_records(caplog):
    return [r for r in caplog.records if r.name == ACCESS_LOGGER]


class TestRequestLogging:

    @pytest.mark.asyncio
    async def test_success_logs_at_info(self, seeded_db, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)

        response = await test_client.get("/api/users/u1/posts")

        assert response.status_code == 200
        records = access_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].status == 200
        assert records[0].method == "GET"
        assert records[0].path == "/api/users/u1/posts"
        assert "GET /api/users/u1/posts 200" in records[0].getMessage()

    @pytest.mark.asyncio
    async def test_client_error_logs_at_warning_with_request_id(
        self, seeded_db, test_client, caplog
    ):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)

        response = await test_client.get(
            "/api/users/bad!/posts", headers={"X-Request-ID": "trace-log"}
        )

        assert response.status_code == 400
        records = access_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].status == 400
        assert records[0].request_id == "trace-log"
        assert "[trace-log]" in records[0].getMessage()

    @pytest.mark.asyncio
    async def test_server_error_logs_at_error(self, tmp_path, monkeypatch, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
        await dispose_engine()
        monkeypatch.setattr(
            settings,
            "database_url",
            f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'x.db'}",
        )

        response = await test_client.get("/api/users/u1/posts")

        assert response.status_code == 500
        records = access_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert records[0].status == 500

    @pytest.mark.asyncio
    async def test_health_is_not_logged(self, connected_db, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)

        response = await test_client.get("/health")

        assert response.status_code == 200
        assert access_records(caplog) == []
