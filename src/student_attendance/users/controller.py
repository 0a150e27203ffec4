from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import current_user_id, login_required
from ..common.responses import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/my-profile", methods=["GET"], endpoint="my_profile")
    @login_required
    @api_errors("Failed to retrieve profile")
    def my_profile():
        return jsonify(container.user_service.get_profile(current_user_id()))
