import logging
from flask import Blueprint, jsonify, request
from routes import task_store_for
from services.usernameGate import current_username, forget_username, remember_username

logger = logging.getLogger(__name__)
api_bp = Blueprint("api", __name__, url_prefix="/api")


def _username_required():
    return jsonify({"error": "Username is required"}), 401


@api_bp.get("/health")
def health():
    return jsonify({"status": "ok"})


@api_bp.get("/session")
def get_session():
    return jsonify({"username": current_username()})


@api_bp.post("/session")
def start_session():
    body = request.get_json(silent=True) or {}
    username = remember_username(body.get("username"))
    if not username:
        return jsonify({"error": "Username is required"}), 400
    logger.info("Session started for %s", username)
    store = task_store_for(username)
    store.initialize_user()
    return jsonify(store.to_dict())


@api_bp.delete("/session")
def end_session():
    forget_username()
    return jsonify({"username": None})


@api_bp.get("/tasks")
def list_tasks():
    username = current_username()
    if not username:
        return _username_required()
    store = task_store_for(username)
    store.initialize_user()
    return jsonify(store.to_dict())


@api_bp.post("/tasks")
def add_task():
    username = current_username()
    if not username:
        return _username_required()
    body = request.get_json(silent=True) or {}
    label = body.get("label")
    store = task_store_for(username)
    if not store.add_task(label if isinstance(label, str) else "") and not store.error:
        # blank label: nothing sent, just report the current list
        store.load_tasks()
    return jsonify(store.to_dict())


@api_bp.delete("/tasks/<int:task_id>")
def delete_task(task_id):
    username = current_username()
    if not username:
        return _username_required()
    store = task_store_for(username)
    store.delete_task(task_id)
    return jsonify(store.to_dict())


@api_bp.delete("/tasks")
def clear_tasks():
    username = current_username()
    if not username:
        return _username_required()
    store = task_store_for(username)
    if store.load_tasks():
        store.clear_all_tasks()
    return jsonify(store.to_dict())
