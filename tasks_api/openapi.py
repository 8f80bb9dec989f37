"""OpenAPI 3.0 description of the task endpoints.

This document is maintained by hand; keep it in step with
``tasks_api.routes.task_routes`` when routes or messages change.
"""

TASK_REF = {"$ref": "#/components/schemas/Task"}
ERROR_REF = {"$ref": "#/components/schemas/Error"}

ID_PARAMETER = {
    "name": "id",
    "in": "path",
    "required": True,
    "schema": {"type": "string"},
}


def _json(schema):
    return {"application/json": {"schema": schema}}


def _error(description):
    return {"description": description, "content": _json(ERROR_REF)}


def build_openapi_spec(server_url: str) -> dict:
    return {
        "openapi": "3.0.0",
        "info": {
            "title": "Tasks API",
            "version": "1.0.0",
            "description": "A simple CRUD API for tasks (in-memory data)",
        },
        "servers": [{"url": server_url, "description": "Current server"}],
        "paths": {
            "/tasks": {
                "get": {
                    "summary": "Get all tasks",
                    "responses": {
                        "200": {
                            "description": "List of tasks",
                            "content": _json({"type": "array", "items": TASK_REF}),
                        },
                        "500": _error("Server error"),
                    },
                },
                "post": {
                    "summary": "Create a new task",
                    "requestBody": {
                        "required": True,
                        "content": _json({
                            "type": "object",
                            "required": ["title", "description"],
                            "properties": {
                                "title": {"type": "string", "example": "New task"},
                                "description": {"type": "string", "example": "Task details"},
                            },
                        }),
                    },
                    "responses": {
                        "201": {"description": "Task created", "content": _json(TASK_REF)},
                        "400": _error("Validation error"),
                    },
                },
            },
            "/tasks/{id}": {
                "get": {
                    "summary": "Get a task by ID",
                    "parameters": [ID_PARAMETER],
                    "responses": {
                        "200": {"description": "Task found", "content": _json(TASK_REF)},
                        "404": _error("Task not found"),
                    },
                },
                "put": {
                    "summary": "Update a task",
                    "description": "At least one of title or description is required.",
                    "parameters": [ID_PARAMETER],
                    "requestBody": {
                        "required": True,
                        "content": _json({
                            "type": "object",
                            "properties": {
                                "title": {"type": "string"},
                                "description": {"type": "string"},
                            },
                        }),
                    },
                    "responses": {
                        "200": {"description": "Task updated", "content": _json(TASK_REF)},
                        "400": _error("Validation error"),
                        "404": _error("Task not found"),
                    },
                },
                "delete": {
                    "summary": "Delete a task",
                    "parameters": [ID_PARAMETER],
                    "responses": {
                        "204": {"description": "Task deleted (no content)"},
                        "404": _error("Task not found"),
                        "500": _error("Server error"),
                    },
                },
            },
        },
        "components": {
            "schemas": {
                "Task": {
                    "type": "object",
                    "required": ["id", "title", "description", "createdAt"],
                    "properties": {
                        "id": {"type": "string", "example": "1"},
                        "title": {"type": "string", "example": "Learn Next.js API routes"},
                        "description": {"type": "string", "example": "Build REST endpoints"},
                        "createdAt": {"type": "string", "format": "date-time"},
                    },
                },
                "Error": {
                    "type": "object",
                    "properties": {"error": {"type": "string", "example": "Task not found"}},
                },
            },
        },
    }
