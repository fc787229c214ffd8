# blog/client/views.py
from functools import wraps

from flask import (
    Blueprint, abort, current_app, flash, g, redirect, render_template, request, session, url_for,
)

from blog.client.api import ApiClientError, BlogApiClient

web_bp = Blueprint("web", __name__, template_folder="templates")

SESSION_TOKEN_KEY = "api_token"


def make_api_client(token=None):
    return BlogApiClient(
        current_app.config["BLOG_API_URL"],
        token=token,
        timeout=current_app.config.get("API_TIMEOUT", 10),
    )


@web_bp.before_app_request
def load_user_info():
    """Contexto de usuario compartido: g.user_info (claims del API o None)."""
    token = session.get(SESSION_TOKEN_KEY)
    g.api = make_api_client(token)
    g.user_info = None
    if not token:
        return

    try:
        g.user_info = g.api.profile()
    except ApiClientError as e:
        current_app.logger.warning("⚠️ No se pudo obtener el perfil: %s", e)
        return

    if g.user_info is None:
        session.pop(SESSION_TOKEN_KEY, None)


@web_bp.app_context_processor
def inject_user_info():
    return {"user_info": getattr(g, "user_info", None), "api": getattr(g, "api", None)}


def user_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        if not g.user_info:
            flash("Iniciá sesión para continuar")
            return redirect(url_for("web.login"))
        return f(*args, **kwargs)
    return decorated


def _uploaded_file():
    file = request.files.get("file")
    if not file or not file.filename:
        return None
    return (file.filename, file.stream, file.mimetype)


def _fetch_post_or_404(post_id):
    try:
        return g.api.get_post(post_id)
    except ApiClientError as e:
        if e.status_code == 404:
            abort(404)
        flash(e.message)
        abort(redirect(url_for("web.index")))


@web_bp.route("/")
def index():
    page = request.args.get("page", 1, type=int)
    try:
        listing = g.api.list_posts(page=page)
    except ApiClientError as e:
        flash(e.message)
        listing = {"posts": [], "page": page, "pages": 0}
    return render_template("index.html", posts=listing["posts"], listing=listing)


@web_bp.route("/post/<identifier>")
def post_detail(identifier):
    post = _fetch_post_or_404(identifier)
    is_author = bool(g.user_info) and g.user_info.get("id") == post["author"]["id"]
    return render_template("post.html", post=post, is_author=is_author)


@web_bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        client = make_api_client()
        try:
            user = client.login(request.form.get("username", ""), request.form.get("password", ""))
        except ApiClientError as e:
            flash(e.message)
            return render_template("login.html"), e.status_code
        session[SESSION_TOKEN_KEY] = client.token
        flash(f"Hola {user['username']}")
        return redirect(url_for("web.index"))
    return render_template("login.html")


@web_bp.route("/register", methods=["GET", "POST"])
def register():
    if request.method == "POST":
        try:
            g.api.register(request.form.get("username", ""), request.form.get("password", ""))
        except ApiClientError as e:
            flash(e.message)
            return render_template("register.html"), e.status_code
        flash("Registro exitoso, ya podés iniciar sesión")
        return redirect(url_for("web.login"))
    return render_template("register.html")


@web_bp.route("/logout", methods=["POST"])
def logout():
    try:
        g.api.logout()
    except ApiClientError as e:
        current_app.logger.warning("⚠️ Logout en el API falló: %s", e)
    session.pop(SESSION_TOKEN_KEY, None)
    return redirect(url_for("web.index"))


@web_bp.route("/create", methods=["GET", "POST"])
@user_required
def create():
    if request.method == "POST":
        form = request.form
        try:
            post = g.api.create_post(
                form.get("title", ""), form.get("summary", ""), form.get("content", ""), _uploaded_file()
            )
        except ApiClientError as e:
            flash(e.message)
            return render_template("edit.html", post=form, editing=False), e.status_code
        return redirect(url_for("web.post_detail", identifier=post["id"]))
    return render_template("edit.html", post={}, editing=False)


@web_bp.route("/edit/<int:post_id>", methods=["GET", "POST"])
@user_required
def edit(post_id):
    if request.method == "POST":
        form = request.form
        try:
            g.api.update_post(
                post_id, form.get("title", ""), form.get("summary", ""), form.get("content", ""), _uploaded_file()
            )
        except ApiClientError as e:
            flash(e.message)
            return render_template("edit.html", post=dict(form, id=post_id), editing=True), e.status_code
        return redirect(url_for("web.post_detail", identifier=post_id))

    post = _fetch_post_or_404(post_id)
    return render_template("edit.html", post=post, editing=True)


@web_bp.route("/delete/<int:post_id>", methods=["POST"])
@user_required
def delete(post_id):
    try:
        g.api.delete_post(post_id)
    except ApiClientError as e:
        flash(e.message)
        return redirect(url_for("web.post_detail", identifier=post_id))
    flash("Post eliminado")
    return redirect(url_for("web.index"))
