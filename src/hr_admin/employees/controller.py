from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import fails_with, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @fails_with("Failed to load employees")
    def list_employees():
        return jsonify(service.list_view())

    @app.route("/api/employees/next-id", methods=["GET"], endpoint="next_employee_id")
    @fails_with("Failed to load employees")
    def next_employee_id():
        return jsonify({"id": service.next_employee_id()})

    @app.route("/api/employees/department/<path:department>", methods=["GET"], endpoint="employees_by_department")
    @fails_with("Failed to load employees")
    def employees_by_department(department: str):
        return jsonify([e.to_dict() for e in service.list_by_department(department)])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @fails_with("Failed to load employee")
    def get_employee(employee_id: str):
        return jsonify(service.get_employee(employee_id).to_dict())

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @fails_with("Failed to create employee")
    def create_employee():
        employee = service.create_employee(json_body())
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @fails_with("Failed to update employee")
    def update_employee(employee_id: str):
        employee = service.update_employee(employee_id, json_body())
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @fails_with("Failed to delete employee")
    def delete_employee(employee_id: str):
        service.delete_employee(employee_id)
        return jsonify({"message": "Employee deleted successfully"})

    @app.route("/api/employees/<employee_id>/transfer", methods=["POST"], endpoint="transfer_employee")
    @fails_with("Failed to transfer employee")
    def transfer_employee(employee_id: str):
        data = json_body()
        record = service.transfer(employee_id, str(data.get("toDepartment") or ""))
        return jsonify(record.to_dict()), 201
