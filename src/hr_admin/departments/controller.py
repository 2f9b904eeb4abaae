from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import fails_with, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @fails_with("Failed to load departments")
    def list_departments():
        return jsonify(service.list_with_counts())

    @app.route("/api/departments/<path:name>", methods=["GET"], endpoint="get_department")
    @fails_with("Failed to load department")
    def get_department(name: str):
        return jsonify(service.get_with_count(name))

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @fails_with("Failed to create department")
    def create_department():
        department = service.create_department(json_body())
        return jsonify({**department.to_dict(), "employeeCount": service.employee_count(department.name)}), 201

    @app.route("/api/departments/<path:name>", methods=["PUT"], endpoint="update_department")
    @fails_with("Failed to update department")
    def update_department(name: str):
        department = service.update_department(name, json_body())
        return jsonify({**department.to_dict(), "employeeCount": service.employee_count(department.name)})

    @app.route("/api/departments/<path:name>", methods=["DELETE"], endpoint="delete_department")
    @fails_with("Failed to delete department")
    def delete_department(name: str):
        service.delete_department(name)
        return jsonify({"message": "Department deleted successfully"})
