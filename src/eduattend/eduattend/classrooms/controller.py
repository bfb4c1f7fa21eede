from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .qr import decode_join_code, render_join_code_png
from .schema import (
    attendance_from_json,
    classroom_from_json,
    classroom_to_json,
    note_from_json,
    student_from_json,
)


def register(app: Flask, container: Container) -> None:
    service = container.classroom_service

    def json_errors(view):
        """Map domain errors to the JSON error body used across the API."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                app.logger.exception("Unhandled error in %s", request.path)
                return jsonify({"success": False, "message": "Internal server error"}), 500

        return wrapper

    def _json_body():
        data = request.get_json(silent=True)
        if data is None:
            raise ValidationError("Request body must be JSON")
        return data

    @app.route("/api/classrooms", methods=["GET"], endpoint="list_classrooms")
    @json_errors
    def list_classrooms():
        return jsonify([classroom_to_json(c) for c in service.list_all()])

    @app.route("/api/classrooms", methods=["POST"], endpoint="create_classroom")
    @json_errors
    def create_classroom():
        classroom = service.create(classroom_from_json(_json_body()))
        return jsonify(classroom_to_json(classroom))

    @app.route("/api/classrooms/<classroom_id>", methods=["GET"], endpoint="get_classroom")
    @json_errors
    def get_classroom(classroom_id: str):
        return jsonify(classroom_to_json(service.get_by_id(classroom_id)))

    @app.route("/api/classrooms/<classroom_id>/attendance", methods=["POST"], endpoint="replace_attendance")
    @json_errors
    def replace_attendance(classroom_id: str):
        records = attendance_from_json(_json_body())
        return jsonify(classroom_to_json(service.replace_attendance(classroom_id, records)))

    @app.route("/api/classrooms/<classroom_id>/notes", methods=["POST"], endpoint="add_note")
    @json_errors
    def add_note(classroom_id: str):
        note = note_from_json(_json_body())
        return jsonify(classroom_to_json(service.add_note(classroom_id, note)))

    @app.route("/api/classrooms/<classroom_id>/students", methods=["POST"], endpoint="add_student")
    @json_errors
    def add_student(classroom_id: str):
        student = student_from_json(_json_body())
        return jsonify(classroom_to_json(service.add_student(classroom_id, student)))

    @app.route("/api/classrooms/join", methods=["POST"], endpoint="join_classroom")
    @json_errors
    def join_classroom():
        data = _json_body()
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        student = student_from_json(data.get("student"))
        classroom = service.enroll_by_code(str(data.get("code") or ""), student)
        return jsonify(classroom_to_json(classroom))

    # ===== QR CODE ENDPOINTS =====

    @app.route("/api/classrooms/<classroom_id>/qr.png", methods=["GET"], endpoint="classroom_qr_image")
    @json_errors
    def classroom_qr_image(classroom_id: str):
        classroom = service.get_by_id(classroom_id)
        return send_file(render_join_code_png(classroom.join_code or ""), mimetype="image/png")

    @app.route("/api/classrooms/join/image", methods=["POST"], endpoint="join_classroom_image")
    @json_errors
    def join_classroom_image():
        """Accept an uploaded photo of a classroom QR code and enroll the student."""
        if "image" not in request.files:
            raise ValidationError("Missing image file")

        student = Student(
            student_id=(request.form.get("id") or "").strip(),
            name=request.form.get("name"),
            email=request.form.get("email"),
            avatar=request.form.get("avatar"),
            join_date=request.form.get("joinDate"),
            bio=request.form.get("bio"),
        )
        if not student.student_id:
            raise ValidationError("Student id is required")

        code = decode_join_code(request.files["image"].stream)
        if not code:
            raise ValidationError("No QR code found in image")

        return jsonify(classroom_to_json(service.enroll_by_code(code, student)))
