from slugify import slugify

from blog.models import Post


def generate_unique_slug(title, user_id, exclude_id=None):
    """Genera un slug único agregando sufijo si ya existe"""
    base_slug = slugify(title or "") or "post"
    # Un slug solo con dígitos se confundiría con un id en /post/<identifier>
    if base_slug.isdigit():
        base_slug = f"post-{base_slug}"
    slug = base_slug
    i = 1
    while True:
        existing = Post.query.filter_by(slug=slug).first()
        if not existing or existing.id == exclude_id:
            return slug
        slug = f"{base_slug}-{i}-{user_id}"
        i += 1
