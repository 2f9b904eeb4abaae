from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import fails_with, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.account_service

    @app.route("/api/accounts", methods=["GET"], endpoint="list_accounts")
    @fails_with("Failed to load accounts")
    def list_accounts():
        return jsonify([a.to_dict() for a in service.list_accounts()])

    @app.route("/api/accounts/available", methods=["GET"], endpoint="list_available_accounts")
    @fails_with("Failed to load accounts")
    def list_available_accounts():
        return jsonify([a.to_dict() for a in service.list_available()])

    @app.route("/api/accounts", methods=["POST"], endpoint="create_account")
    @fails_with("Failed to create account")
    def create_account():
        account = service.create_account(json_body())
        return jsonify(account.to_dict()), 201

    @app.route("/api/accounts/<path:email>", methods=["PUT"], endpoint="update_account")
    @fails_with("Failed to update account")
    def update_account(email: str):
        account = service.update_account(email, json_body())
        return jsonify(account.to_dict())

    @app.route("/api/accounts/<path:email>", methods=["DELETE"], endpoint="delete_account")
    @fails_with("Failed to delete account")
    def delete_account(email: str):
        service.delete_account(email)
        return jsonify({"message": "Account deleted successfully"})
