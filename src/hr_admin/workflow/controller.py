from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import fails_with
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/workflow", methods=["GET"], endpoint="employee_workflow")
    @fails_with("Failed to load workflow")
    def employee_workflow(employee_id: str):
        page_s = request.args.get("page", "0")
        page = int(page_s) if page_s.isdigit() else 0
        return jsonify(container.workflow_service.page(employee_id, page).to_dict())
