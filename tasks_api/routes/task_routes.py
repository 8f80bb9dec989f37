from flask import Blueprint, current_app, jsonify

from tasks_api.utils.store import get_store
from tasks_api.utils.validation import (
    ValidationError,
    parse_json_body,
    validate_new_task,
    validate_task_update,
)


tasks_bp = Blueprint("tasks", __name__)

TASK_NOT_FOUND = "Task not found"


@tasks_bp.get("", strict_slashes=False)
def list_tasks():
    try:
        tasks = get_store().list()
    except Exception:  # noqa: BLE001
        current_app.logger.exception("Error listing tasks")
        return jsonify(error="Failed to fetch tasks"), 500
    return jsonify([t.to_dict() for t in tasks]), 200


@tasks_bp.post("", strict_slashes=False)
def create_task():
    try:
        title, description = validate_new_task(parse_json_body())
    except ValidationError as exc:
        return jsonify(error=exc.message), 400

    task = get_store().create(title, description)
    current_app.logger.info("Task created id=%s", task.id)
    return jsonify(task.to_dict()), 201


@tasks_bp.get("/<task_id>")
def get_task(task_id):
    try:
        task = get_store().get(task_id)
    except Exception:  # noqa: BLE001
        current_app.logger.exception("Error fetching task id=%s", task_id)
        return jsonify(error="Failed to fetch task"), 500
    if task is None:
        return jsonify(error=TASK_NOT_FOUND), 404
    return jsonify(task.to_dict()), 200


@tasks_bp.put("/<task_id>")
def update_task(task_id):
    try:
        updates = validate_task_update(parse_json_body())
    except ValidationError as exc:
        return jsonify(error=exc.message), 400

    task = get_store().update(task_id, **updates)
    if task is None:
        return jsonify(error=TASK_NOT_FOUND), 404
    current_app.logger.info("Task updated id=%s fields=%s", task_id, sorted(updates))
    return jsonify(task.to_dict()), 200


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    try:
        deleted = get_store().delete(task_id)
    except Exception:  # noqa: BLE001
        current_app.logger.exception("Error deleting task id=%s", task_id)
        return jsonify(error="Failed to delete task"), 500
    if not deleted:
        return jsonify(error=TASK_NOT_FOUND), 404
    current_app.logger.info("Task deleted id=%s", task_id)
    return "", 204
