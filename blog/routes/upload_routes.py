# blog/routes/upload_routes.py
from flask import Blueprint, current_app, send_from_directory

upload_bp = Blueprint("upload", __name__)


# 🖼️ Servir portadas guardadas en disco
@upload_bp.route("/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
