from blog.extensions import db
from blog.models.user import utcnow


# blog/models/post.py
class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)

    # 🧠 Contenido
    title = db.Column(db.String(255), nullable=False)
    summary = db.Column(db.String(500), nullable=False)
    content = db.Column(db.Text, nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)

    # 🖼️ Portada (ruta local o URL) + clave para poder borrarla
    cover = db.Column(db.String, nullable=True)
    cover_public_id = db.Column(db.String, nullable=True)

    # 👤 Autor: se fija al crear y no cambia nunca
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    author = db.relationship("User", back_populates="posts")

    # ⏰ Timestamps
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def is_author(self, user):
        """True si los claims de sesión pertenecen al autor del post."""
        if not user or user.get("id") is None:
            return False
        try:
            return int(user["id"]) == self.author_id
        except (TypeError, ValueError):
            return False

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "content": self.content,
            "cover": self.cover,
            "slug": self.slug,
            "author": {
                "id": self.author_id,
                "username": self.author.username if self.author else None,
            },
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Post {self.title}>"
