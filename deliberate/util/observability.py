"""Logfire setup for the API, migrations and scripts.

Domain services emit their own spans and events through ``logfire``
directly, e.g.::

    with logfire.span("vote_ledger.cast_vote", procon_id=str(procon_id)):
        logfire.info("Vote recorded", tally=tally)

This module only configures the exporter and instruments the frameworks.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from deliberate.config import ObservabilitySettings, Settings

SERVICE_NAME = "deliberate-api"
SERVICE_VERSION = "0.1.0"

# Liveness probes would otherwise dominate the request traces
_UNTRACED_URLS = "/health"

# Path parameters worth lifting onto the request span
_TRACED_PATH_PARAMS = ("question_id", "solution_id", "procon_id")


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent exactly when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        admins=len(settings.auth.admin_emails),
    )


def _request_attributes(request, attributes):
    """Attach the path and the targeted question/solution/pro-con ids."""
    result = {**attributes}

    url = getattr(request, "url", None)
    if url is not None:
        result["path"] = url.path

    path_params = getattr(request, "path_params", None) or {}
    for name in _TRACED_PATH_PARAMS:
        if name in path_params:
            result[name] = str(path_params[name])

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health checks.

    Headers are never captured: the session lives in the ``auth_token``
    cookie.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=_UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the vote upserts and tally reads.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", url=engine.url.render_as_string())
