# blog/client/api.py
"""
Cliente HTTP del API del blog.

Mantiene la cookie de sesión ("token") en un requests.Session, igual que el
navegador con credentials: 'include'.
"""
import requests

TOKEN_COOKIE = "token"


class ApiClientError(Exception):
    def __init__(self, status_code, message):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class BlogApiClient:
    def __init__(self, base_url, token=None, timeout=10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if token:
            self.session.cookies.set(TOKEN_COOKIE, token)

    @property
    def token(self):
        return self.session.cookies.get(TOKEN_COOKIE) or None

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method, path, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        try:
            response = self.session.request(method, self._url(path), **kwargs)
        except requests.RequestException as e:
            # API caído o inalcanzable: mismo camino de error que un status HTTP
            raise ApiClientError(503, f"API no disponible: {e}") from e
        if not response.ok:
            raise ApiClientError(response.status_code, self._error_message(response))
        return response.json()

    @staticmethod
    def _error_message(response):
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason
        if isinstance(body, dict):
            return body.get("error") or str(body)
        return str(body)

    # 🔐 Auth
    def register(self, username, password):
        return self._request("POST", "/register", json={"username": username, "password": password})

    def login(self, username, password):
        return self._request("POST", "/login", json={"username": username, "password": password})

    def profile(self):
        """Claims del usuario logueado o None si no hay sesión válida."""
        try:
            return self._request("GET", "/profile")
        except ApiClientError as e:
            if e.status_code == 401:
                return None
            raise

    def logout(self):
        result = self._request("POST", "/logout")
        self.session.cookies.clear()
        return result

    # 📝 Posts
    def list_posts(self, page=1):
        return self._request("GET", "/post", params={"page": page})

    def get_post(self, identifier):
        return self._request("GET", f"/post/{identifier}")

    def create_post(self, title, summary, content, file):
        """file: (filename, fileobj[, content_type])"""
        data = {"title": title, "summary": summary, "content": content}
        return self._request("POST", "/post", data=data, files={"file": file})

    def update_post(self, post_id, title, summary, content, file=None):
        data = {"id": post_id, "title": title, "summary": summary, "content": content}
        files = {"file": file} if file else None
        return self._request("PUT", "/post", data=data, files=files)

    def delete_post(self, post_id):
        return self._request("DELETE", f"/post/{post_id}")

    def cover_url(self, cover):
        if not cover:
            return None
        if cover.startswith(("http://", "https://")):
            return cover
        return self._url(cover)
