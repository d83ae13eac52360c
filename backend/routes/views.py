import logging
from flask import Blueprint, flash, redirect, render_template, request, url_for
from routes import task_store_for
from services.usernameGate import current_username, forget_username, remember_username

logger = logging.getLogger(__name__)
views_bp = Blueprint("views", __name__)


def _back_to_list(store=None):
    if store is not None and store.error:
        flash(store.error, "error")
    return redirect(url_for("views.index"))


@views_bp.get("/")
def index():
    username = current_username()
    if not username:
        return render_template("gate.html")
    store = task_store_for(username)
    store.initialize_user()
    return render_template("todos.html", state=store.to_dict())


@views_bp.post("/login")
def login():
    username = remember_username(request.form.get("username"))
    if not username:
        return render_template("gate.html", error="Please enter a username."), 400
    logger.info("Session started for %s", username)
    return redirect(url_for("views.index"))


@views_bp.post("/logout")
def logout():
    forget_username()
    return redirect(url_for("views.index"))


@views_bp.post("/tasks")
def add_task():
    username = current_username()
    if not username:
        return _back_to_list()
    store = task_store_for(username)
    store.add_task(request.form.get("label"))
    return _back_to_list(store)


@views_bp.post("/tasks/<int:task_id>/delete")
def delete_task(task_id):
    username = current_username()
    if not username:
        return _back_to_list()
    store = task_store_for(username)
    store.delete_task(task_id)
    return _back_to_list(store)


@views_bp.post("/tasks/clear")
def clear_tasks():
    username = current_username()
    if not username:
        return _back_to_list()
    store = task_store_for(username)
    if store.load_tasks():
        store.clear_all_tasks()
    return _back_to_list(store)
