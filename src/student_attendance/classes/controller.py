from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import login_required, teacher_required
from ..common.responses import api_errors, json_body, parse_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    @login_required
    @api_errors("Failed to retrieve classes")
    def list_classes():
        return jsonify(container.class_service.list_classes())

    @app.route("/api/classes", methods=["POST"], endpoint="create_class")
    @teacher_required
    @api_errors("Failed to create class")
    def create_class():
        data = json_body()
        item = container.class_service.create_class(name=data.get("name"), description=data.get("description"))
        return jsonify(item.to_dict()), 201

    @app.route("/api/classes/<class_id>", methods=["PUT"], endpoint="update_class")
    @teacher_required
    @api_errors("Failed to update class")
    def update_class(class_id):
        cid = parse_id(class_id, "class")
        data = json_body()
        item = container.class_service.update_class(
            cid,
            name=data.get("name"),
            description=data.get("description"),
        )
        return jsonify(item.to_dict())

    @app.route("/api/classes/<class_id>", methods=["DELETE"], endpoint="delete_class")
    @teacher_required
    @api_errors("Failed to delete class")
    def delete_class(class_id):
        container.class_service.delete_class(parse_id(class_id, "class"))
        return "", 204
