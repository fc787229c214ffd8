# blog/utils/cover_storage.py
"""
Almacenamiento de portadas de los posts.

Por defecto se guardan en disco (UPLOAD_FOLDER) con un nombre aleatorio que
conserva la extensión original del archivo subido. Con COVER_STORAGE=cloudinary
se suben a Cloudinary y se borran por su public_id.
"""
import os
import uuid
from dataclasses import dataclass

import cloudinary
import cloudinary.uploader


@dataclass
class StoredCover:
    path: str
    public_id: str


def original_extension(filename):
    """Texto tras el último punto del nombre original ("" si no hay punto)."""
    name = os.path.basename(filename or "")
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


class LocalCoverStorage:
    def __init__(self, folder, url_prefix="uploads"):
        self.folder = folder
        self.url_prefix = url_prefix.strip("/")

    def _disk_path(self, name):
        return os.path.join(self.folder, name)

    def save(self, file):
        os.makedirs(self.folder, exist_ok=True)

        # Primero un nombre temporal, luego se renombra con la extensión original
        tmp_name = uuid.uuid4().hex
        tmp_path = self._disk_path(tmp_name)
        file.save(tmp_path)

        ext = original_extension(file.filename)
        name = f"{tmp_name}.{ext}" if ext else tmp_name
        if name != tmp_name:
            os.replace(tmp_path, self._disk_path(name))

        return StoredCover(path=f"{self.url_prefix}/{name}", public_id=name)

    def delete(self, cover_path, public_id=None):
        name = public_id or os.path.basename(cover_path or "")
        if not name:
            return False
        path = self._disk_path(os.path.basename(name))
        if os.path.exists(path):
            os.remove(path)
            return True
        return False


class CloudinaryCoverStorage:
    def __init__(self, folder="blog_covers"):
        self.folder = folder

    def save(self, file):
        result = cloudinary.uploader.upload(
            file,
            folder=self.folder,
            resource_type="image",
        )
        url = result.get("secure_url")
        public_id = result.get("public_id")
        if not url:
            raise RuntimeError("No se recibió URL de Cloudinary")
        return StoredCover(path=url, public_id=public_id)

    def delete(self, cover_path, public_id=None):
        if not public_id:
            return False
        result = cloudinary.uploader.destroy(public_id)
        return result.get("result") == "ok"


def get_cover_storage(app):
    backend = (app.config.get("COVER_STORAGE") or "local").lower()
    if backend == "cloudinary":
        cloudinary.config(
            cloud_name=app.config.get("CLOUDINARY_CLOUD_NAME"),
            api_key=app.config.get("CLOUDINARY_API_KEY"),
            api_secret=app.config.get("CLOUDINARY_API_SECRET"),
            secure=True,
        )
        return CloudinaryCoverStorage(folder=app.config.get("CLOUDINARY_FOLDER", "blog_covers"))
    if backend != "local":
        raise ValueError(f"COVER_STORAGE desconocido: {backend}")
    return LocalCoverStorage(
        folder=app.config["UPLOAD_FOLDER"],
        url_prefix=app.config.get("UPLOAD_URL_PREFIX", "uploads"),
    )
