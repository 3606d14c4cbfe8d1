from __future__ import annotations

from flask import Flask, request

from ..common.http import error_response, json_body, ok
from ..common.validators import optional_text, require_non_empty
from ..container import Container


def register(app: Flask, container: Container) -> None:
    directory = container.builder_directory

    @app.route("/api/builders", methods=["GET"], endpoint="list_builders")
    def list_builders():
        return ok(directory.search(request.args.get("search", "")))

    @app.route("/api/builders", methods=["POST"], endpoint="create_builder")
    def create_builder():
        try:
            data = json_body()
            builder = directory.create(
                name=require_non_empty(data.get("name"), "Builder name"),
                contact_person=require_non_empty(data.get("contact_person"), "Contact person"),
                phone=require_non_empty(data.get("phone"), "Phone number"),
                address=require_non_empty(data.get("address"), "Address"),
                email=optional_text(data.get("email")),
                registration_number=optional_text(data.get("registration_number")),
            )
            return ok(builder, 201)
        except Exception as e:
            return error_response(e, action="create the builder")

    @app.route("/api/builders/stats", methods=["GET"], endpoint="builder_stats")
    def builder_stats():
        return ok(directory.stats())

    @app.route("/api/builders/<builder_id>", methods=["GET"], endpoint="get_builder")
    def get_builder(builder_id: str):
        try:
            return ok(directory.require(builder_id))
        except Exception as e:
            return error_response(e, action="load the builder")

    @app.route("/api/builders/<builder_id>", methods=["PATCH"], endpoint="update_builder")
    def update_builder(builder_id: str):
        try:
            return ok(directory.update(builder_id, **json_body()))
        except Exception as e:
            return error_response(e, action="update the builder")

    @app.route("/api/builders/<builder_id>", methods=["DELETE"], endpoint="delete_builder")
    def delete_builder(builder_id: str):
        try:
            directory.delete(builder_id)
            return ok({"builder_id": builder_id})
        except Exception as e:
            return error_response(e, action="delete the builder")
