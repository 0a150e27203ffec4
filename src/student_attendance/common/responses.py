from __future__ import annotations

import csv
import io
import logging
from functools import wraps
from typing import Iterable

from flask import Response, jsonify, request

from ..core.exceptions import DomainError, ValidationError
from .validators import sanitize_payload

logger = logging.getLogger(__name__)


def api_errors(failure_message: str):
    """Translate domain errors to JSON responses; anything else becomes a 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return jsonify({"message": str(e)}), e.status_code
            except Exception:
                logger.exception("%s (%s %s)", failure_message, request.method, request.path)
                return jsonify({"message": failure_message}), 500

        return wrapper

    return decorator


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return sanitize_payload(payload)


def parse_id(value: str, label: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} ID") from None


def csv_response(rows: Iterable[dict], *, fieldnames: list[str], filename: str) -> Response:
    """Write rows to a CSV download.

    Shared helper used by the attendance and report exports.
    """
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=fieldnames)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)

    csv_bytes = out.getvalue().encode("utf-8-sig")
    return Response(
        csv_bytes,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
