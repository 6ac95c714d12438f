"""Logging for the API: one line per record, tagged with the request it belongs to."""

from __future__ import annotations

import logging
import sys
import uuid

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"

_LINE_FORMAT = "%(asctime)s level=%(levelname)s logger=%(name)s request_id=%(request_id)s %(http)smsg=%(message)s"


class RequestContextFilter(logging.Filter):
    """Stamp request_id and the HTTP method/path onto every record.

    Outside a request (CLI, unit tests of the core) both read as "-".
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = g.get("request_id", "-")
            record.http = f"method={request.method} path={request.path} "
        else:
            record.request_id = "-"
            record.http = ""
        return True


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(lvl)

    # create_app may run more than once per process (tests, reloader)
    for existing in [h for h in root.handlers if getattr(h, "_wealthplanner", False)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(lvl)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(logging.Formatter(_LINE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    handler._wealthplanner = True

    root.addHandler(handler)


def init_request_logging(app: Flask) -> None:
    """Give each request an id (taken from the caller when sent) and echo it back."""

    @app.before_request
    def _bind_request_id() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        response.headers[REQUEST_ID_HEADER] = g.get("request_id", "-")
        return response


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
