from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import fails_with, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.transfer_service

    @app.route("/api/transfers", methods=["GET"], endpoint="list_transfers")
    @fails_with("Failed to load transfers")
    def list_transfers():
        return jsonify([t.to_dict() for t in service.list_transfers()])

    @app.route("/api/transfers/<transfer_id>/status", methods=["PUT"], endpoint="set_transfer_status")
    @fails_with("Failed to update transfer")
    def set_transfer_status(transfer_id: str):
        record = container.workflow_service.change_transfer_status(transfer_id, json_body().get("status"))
        return jsonify(record.to_dict())
