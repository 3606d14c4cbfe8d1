from __future__ import annotations

from flask import Flask, request

from ..common.http import error_response, json_body, ok
from ..common.validators import optional_text, require_non_empty
from ..container import Container


def register(app: Flask, container: Container) -> None:
    directory = container.customer_directory

    @app.route("/api/customers", methods=["GET"], endpoint="list_customers")
    def list_customers():
        return ok(directory.search(request.args.get("search", "")))

    @app.route("/api/customers", methods=["POST"], endpoint="create_customer")
    def create_customer():
        try:
            data = json_body()
            customer = directory.create(
                name=require_non_empty(data.get("name"), "Customer name"),
                phone=require_non_empty(data.get("phone"), "Phone number"),
                address=optional_text(data.get("address")) or "",
                email=optional_text(data.get("email")),
            )
            return ok(customer, 201)
        except Exception as e:
            return error_response(e, action="create the customer")

    @app.route("/api/customers/stats", methods=["GET"], endpoint="customer_stats")
    def customer_stats():
        return ok(directory.stats())

    @app.route("/api/customers/<customer_id>", methods=["GET"], endpoint="get_customer")
    def get_customer(customer_id: str):
        try:
            return ok(directory.require(customer_id))
        except Exception as e:
            return error_response(e, action="load the customer")

    @app.route("/api/customers/<customer_id>", methods=["PATCH"], endpoint="update_customer")
    def update_customer(customer_id: str):
        try:
            return ok(directory.update(customer_id, **json_body()))
        except Exception as e:
            return error_response(e, action="update the customer")

    @app.route("/api/customers/<customer_id>", methods=["DELETE"], endpoint="delete_customer")
    def delete_customer(customer_id: str):
        try:
            directory.delete(customer_id)
            return ok({"customer_id": customer_id})
        except Exception as e:
            return error_response(e, action="delete the customer")
