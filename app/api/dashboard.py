"""Static dashboard."""
from flask import Blueprint, current_app, send_from_directory

dashboard_blueprint = Blueprint("dashboard", __name__)


@dashboard_blueprint.route("/", methods=["GET"])
def index():
    """Serve the dashboard document."""
    return send_from_directory(current_app.static_folder, "index.html")
