from flask import Blueprint, request, jsonify, g, current_app
from sqlalchemy.orm import joinedload

from blog.extensions import db
from blog.models import Post
from blog.auth.decorators import login_required
from blog.utils.slugs import generate_unique_slug

post_bp = Blueprint("posts", __name__)

REQUIRED_FIELDS = ["title", "summary", "content"]


def cover_storage():
    return current_app.extensions["cover_storage"]


def uploaded_cover():
    file = request.files.get("file")
    if not file or not file.filename:
        return None
    return file


def discard_cover(stored):
    """Borra una portada recién guardada cuando el post no llegó a la BD."""
    try:
        cover_storage().delete(stored.path, stored.public_id)
    except Exception:
        current_app.logger.exception("⚠️ No se pudo borrar la portada huérfana %s", stored.path)


# 🟢 Crear un nuevo post
@post_bp.route("", methods=["POST"])
@login_required
def create_post():
    user = g.current_user
    data = request.form

    file = uploaded_cover()
    if not file:
        return jsonify({"error": "No file uploaded"}), 400

    missing = [f for f in REQUIRED_FIELDS if not data.get(f)]
    if missing:
        return jsonify({"error": f"Faltan campos obligatorios: {', '.join(missing)}"}), 400

    try:
        stored = cover_storage().save(file)
    except Exception as e:
        current_app.logger.exception("❌ Error al guardar la portada")
        return jsonify({"error": "Error al guardar la portada", "details": str(e)}), 500

    try:
        new_post = Post(
            title=data["title"],
            summary=data["summary"],
            content=data["content"],
            cover=stored.path,
            cover_public_id=stored.public_id,
            author_id=int(user["id"]),
            slug=generate_unique_slug(data["title"], user["id"]),
        )
        db.session.add(new_post)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        discard_cover(stored)
        current_app.logger.exception("❌ Error al crear post")
        return jsonify({"error": "Failed to create post", "details": str(e)}), 500

    current_app.logger.info("📝 Post %s creado por %s", new_post.id, user["username"])
    return jsonify(new_post.to_dict()), 200


# 🟡 Editar post (solo el autor)
@post_bp.route("", methods=["PUT"])
@login_required
def edit_post():
    user = g.current_user
    data = request.form

    post_id = data.get("id", type=int)
    post = db.session.get(Post, post_id) if post_id is not None else None
    if not post:
        return jsonify({"error": "Post not found"}), 404

    # 🔒 Validar permisos antes de tocar el disco
    if not post.is_author(user):
        return jsonify({"error": "You are not the author"}), 403

    file = uploaded_cover()
    stored = None
    if file:
        try:
            stored = cover_storage().save(file)
        except Exception as e:
            current_app.logger.exception("❌ Error al guardar la portada")
            return jsonify({"error": "Error al guardar la portada", "details": str(e)}), 500

    old_title = post.title
    old_cover, old_public_id = post.cover, post.cover_public_id

    try:
        post.title = data.get("title") or post.title
        post.summary = data.get("summary") or post.summary
        post.content = data.get("content") or post.content
        if stored:
            post.cover = stored.path
            post.cover_public_id = stored.public_id

        # 🧭 Slug nuevo solo si el título cambió
        if post.title != old_title:
            post.slug = generate_unique_slug(post.title, user["id"], exclude_id=post.id)

        db.session.commit()
    except Exception as e:
        db.session.rollback()
        if stored:
            discard_cover(stored)
        current_app.logger.exception("❌ Error al actualizar post %s", post_id)
        return jsonify({"error": "Failed to update post", "details": str(e)}), 500

    # 🖼️ La portada anterior ya no la referencia nadie
    if stored and old_cover:
        try:
            cover_storage().delete(old_cover, old_public_id)
        except Exception:
            current_app.logger.exception("⚠️ No se pudo borrar la portada anterior %s", old_cover)

    current_app.logger.info("✏️ Post %s actualizado por %s", post.id, user["username"])
    return jsonify(post.to_dict()), 200


# 🟣 Listar posts (los más recientes primero, máximo 20 por página)
@post_bp.route("", methods=["GET"])
def get_posts():
    max_per_page = current_app.config.get("POSTS_PER_PAGE", 20)
    page = request.args.get("page", 1, type=int)
    per_page = min(request.args.get("per_page", max_per_page, type=int), max_per_page)
    per_page = max(per_page, 1)

    try:
        query = (
            db.select(Post)
            .options(joinedload(Post.author))
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        pagination = db.paginate(query, page=page, per_page=per_page, error_out=False)
    except Exception as e:
        current_app.logger.exception("❌ Error al obtener los posts")
        return jsonify({"error": "Failed to get posts", "details": str(e)}), 500

    return jsonify({
        "posts": [p.to_dict() for p in pagination.items],
        "total": pagination.total,
        "page": pagination.page,
        "pages": pagination.pages,
        "per_page": pagination.per_page,
    }), 200


# 🔵 Ver un solo post (por ID o slug)
@post_bp.route("/<string:identifier>", methods=["GET"])
def get_post_detail(identifier):
    if identifier.isdigit():
        post = db.session.get(Post, int(identifier))
    else:
        post = Post.query.filter_by(slug=identifier).first()

    if not post:
        return jsonify({"error": "Post not found"}), 404

    return jsonify(post.to_dict()), 200


# 🔴 Borrar post (solo el autor) + su portada
@post_bp.route("/<int:id>", methods=["DELETE"])
@login_required
def delete_post(id):
    user = g.current_user
    post = db.session.get(Post, id)
    if not post:
        return jsonify({"error": "Post not found"}), 404

    if not post.is_author(user):
        return jsonify({"error": "You are not the author"}), 403

    try:
        if post.cover:
            cover_storage().delete(post.cover, post.cover_public_id)

        db.session.delete(post)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("❌ Error al eliminar post %s", id)
        return jsonify({"error": "Failed to delete post", "details": str(e)}), 500

    current_app.logger.info("🗑️ Post %s eliminado por %s", id, user["username"])
    return jsonify({"success": True}), 200
