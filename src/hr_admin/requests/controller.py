from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import fails_with, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.request_service

    @app.route("/api/requests", methods=["GET"], endpoint="list_requests")
    @fails_with("Failed to load requests")
    def list_requests():
        return jsonify([r.to_dict() for r in service.list_requests()])

    @app.route("/api/requests/next-id", methods=["GET"], endpoint="next_request_id")
    @fails_with("Failed to load requests")
    def next_request_id():
        return jsonify({"id": service.next_request_id()})

    @app.route("/api/employees/<employee_id>/requests", methods=["GET"], endpoint="employee_requests")
    @fails_with("Failed to load requests")
    def employee_requests(employee_id: str):
        return jsonify([r.to_dict() for r in service.list_for_employee(employee_id)])

    @app.route("/api/requests/<request_id>", methods=["GET"], endpoint="get_request")
    @fails_with("Failed to load request")
    def get_request(request_id: str):
        return jsonify(service.get_request(request_id).to_dict())

    @app.route("/api/requests", methods=["POST"], endpoint="create_request")
    @fails_with("Failed to create request")
    def create_request():
        req = service.create_request(json_body())
        return jsonify(req.to_dict()), 201

    @app.route("/api/requests/<request_id>", methods=["PUT"], endpoint="update_request")
    @fails_with("Failed to update request")
    def update_request(request_id: str):
        req = service.update_request(request_id, json_body())
        return jsonify(req.to_dict())

    @app.route("/api/requests/<request_id>/status", methods=["PUT"], endpoint="set_request_status")
    @fails_with("Failed to update request")
    def set_request_status(request_id: str):
        req = service.set_status(request_id, json_body().get("status"))
        return jsonify(req.to_dict())

    @app.route("/api/requests/<request_id>", methods=["DELETE"], endpoint="delete_request")
    @fails_with("Failed to delete request")
    def delete_request(request_id: str):
        service.delete_request(request_id)
        return jsonify({"message": "Request deleted successfully"})
