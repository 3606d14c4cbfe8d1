from __future__ import annotations

import os

from flask import Flask, request, send_from_directory, url_for
from werkzeug.utils import secure_filename

from ..common.datetime_utils import parse_iso_date
from ..common.http import error_response, fail, json_body, ok
from ..common.validators import optional_text, require_non_empty
from ..container import Container
from ..core.constants import DEFAULT_UPLOADED_BY
from ..core.exceptions import ValidationError
from .workflow import status_choices

_STAGE_DATES = ("collection_date", "data_entry_date", "registration_date", "delivery_date")


def register(app: Flask, container: Container) -> None:
    service = container.document_service

    def _parse_stage_dates(changes: dict) -> dict:
        for key in _STAGE_DATES:
            if key in changes and changes[key]:
                try:
                    changes[key] = parse_iso_date(str(changes[key]))
                except ValueError:
                    raise ValidationError(f"{key} must be YYYY-MM-DD")
            elif key in changes:
                changes[key] = None
        return changes

    @app.route("/api/documents", methods=["GET"], endpoint="list_documents")
    def list_documents():
        try:
            docs = service.list_documents(
                status=request.args.get("status") or None,
                document_type=request.args.get("type") or None,
                search=request.args.get("search") or None,
                assigned_to=request.args.get("assigned_to") or None,
            )
            return ok(docs)
        except Exception as e:
            return error_response(e, action="list documents")

    @app.route("/api/documents", methods=["POST"], endpoint="create_document")
    def create_document():
        try:
            data = json_body()
            document = service.create(
                document_type=require_non_empty(data.get("document_type"), "Document type"),
                customer_name=require_non_empty(data.get("customer_name"), "Customer name"),
                customer_phone=require_non_empty(data.get("customer_phone"), "Phone number"),
                builder_name=require_non_empty(data.get("builder_name"), "Builder name"),
                property_details=require_non_empty(data.get("property_details"), "Property details"),
                customer_email=optional_text(data.get("customer_email")),
                assigned_to=optional_text(data.get("assigned_to")),
                document_number=optional_text(data.get("document_number")),
            )
            return ok(document, 201)
        except Exception as e:
            return error_response(e, action="create the document")

    @app.route("/api/documents/stats", methods=["GET"], endpoint="document_stats")
    def document_stats():
        return ok(service.stats())

    @app.route("/api/documents/statuses", methods=["GET"], endpoint="document_statuses")
    def document_statuses():
        return ok(status_choices())

    @app.route("/api/documents/<document_id>", methods=["GET"], endpoint="get_document")
    def get_document(document_id: str):
        try:
            return ok(service.require(document_id))
        except Exception as e:
            return error_response(e, action="load the document")

    @app.route("/api/documents/<document_id>", methods=["PATCH"], endpoint="update_document")
    def update_document(document_id: str):
        try:
            changes = _parse_stage_dates(json_body())
            return ok(service.update(document_id, **changes))
        except Exception as e:
            return error_response(e, action="update the document")

    @app.route("/api/documents/<document_id>", methods=["DELETE"], endpoint="delete_document")
    def delete_document(document_id: str):
        try:
            service.delete(document_id)
            return ok({"document_id": document_id})
        except Exception as e:
            return error_response(e, action="delete the document")

    @app.route("/api/documents/<document_id>/status", methods=["POST"], endpoint="update_document_status")
    def update_document_status(document_id: str):
        try:
            status = require_non_empty(json_body().get("status"), "Status")
            return ok(service.update_status(document_id, status))
        except Exception as e:
            return error_response(e, action="update the status")

    @app.route("/api/documents/<document_id>/notes", methods=["POST"], endpoint="add_document_note")
    def add_document_note(document_id: str):
        try:
            note = require_non_empty(json_body().get("note"), "Note")
            return ok(service.add_note(document_id, note), 201)
        except Exception as e:
            return error_response(e, action="add the note")

    @app.route("/api/documents/<document_id>/files", methods=["POST"], endpoint="upload_document_file")
    def upload_document_file(document_id: str):
        try:
            service.require(document_id)
            upload = request.files.get("file")
            if upload is None or not upload.filename:
                return fail("File is required", 400)

            filename = secure_filename(upload.filename)
            if not filename:
                return fail("File name is not valid", 400)

            folder = app.config["UPLOAD_FOLDER"]
            os.makedirs(folder, exist_ok=True)
            stored_name = f"{document_id}_{filename}"
            upload.save(os.path.join(folder, stored_name))

            attachment = service.attach_file(
                document_id,
                name=upload.filename,
                url=url_for("uploaded_file", filename=stored_name),
                content_type=upload.mimetype or "",
                uploaded_by=optional_text(request.form.get("uploaded_by")) or DEFAULT_UPLOADED_BY,
            )
            return ok(attachment, 201)
        except Exception as e:
            return error_response(e, action="upload the file")

    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    def uploaded_file(filename: str):
        return send_from_directory(os.path.abspath(app.config["UPLOAD_FOLDER"]), filename)
