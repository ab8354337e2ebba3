#!/usr/bin/env python3
"""End-to-end smoke run against a live backend.

Steps:
- log in with the given account
- confirm the session via the current-user endpoint
- list conversations with the bearer credential attached
- log out and confirm the local session is gone
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from chat_client import ClientError, ServiceConfig, create_services
from chat_client.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.types import SmokeReport, StepResult, now_ms

logger = get_logger("runner")


async def _step(
    report: SmokeReport, name: str, fn: Callable[[], Awaitable[Any]]
) -> Any:
    started = now_ms()
    try:
        result = await fn()
    except ClientError as e:
        report.steps.append(StepResult(name, False, now_ms() - started, f"{e.code}: {e}"))
        logger.warning("smoke.step_failed", extra={"event": "step_failed", "step": name})
        return None
    report.steps.append(StepResult(name, True, now_ms() - started))
    return result


async def run_smoke(
    *,
    base_url: str,
    username: str,
    password: str,
    timeout_s: float = 10.0,
    retry_attempts: int = 0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SmokeReport:
    config = ServiceConfig(base_url=base_url, timeout=timeout_s, retry_attempts=retry_attempts)
    services = create_services(config, config, transport=transport)
    report = SmokeReport(base_url=base_url)

    user = await _step(report, "login", lambda: services.auth.login(username, password))
    if user is None:
        return report

    async def _current_user() -> None:
        if await services.auth.get_current_user() is None:
            raise ClientError("current user not resolved after login")

    async def _logout() -> None:
        await services.auth.logout()
        if services.credentials.get_credential() is not None:
            raise ClientError("credential still present after logout")

    await _step(report, "current_user", _current_user)
    await _step(report, "conversations", services.chat.get_conversations)
    await _step(report, "logout", _logout)
    return report


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_args(argv if argv is not None else sys.argv[1:])
    report = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            username=args.username,
            password=args.password,
            timeout_s=args.timeout,
            retry_attempts=args.retry_attempts,
        )
    )
    logger.info("runner.summary", extra=report.summary())
    raise SystemExit(0 if report.ok else 1)


if __name__ == "__main__":
    main()
