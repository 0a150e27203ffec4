from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.guards import login_required
from ..common.responses import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/activities", methods=["GET"], endpoint="list_activities")
    @login_required
    @api_errors("Failed to retrieve activities")
    def list_activities():
        activities = container.activity_service.recent(request.args.get("limit"))
        return jsonify([a.to_dict() for a in activities])
