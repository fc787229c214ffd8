import io
import unittest
from unittest.mock import Mock

import requests

from blog.client.api import ApiClientError, BlogApiClient


def fake_response(status_code=200, body=None):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = body
    response.text = ""
    response.reason = "Error"
    return response


class BlogApiClientTests(unittest.TestCase):
    def setUp(self):
        self.session = Mock()
        self.session.cookies = requests.cookies.RequestsCookieJar()
        self.client = BlogApiClient("http://api.test/", timeout=3, session=self.session)

    def test_list_posts_hits_post_endpoint(self):
        self.session.request.return_value = fake_response(body={"posts": [], "total": 0})
        self.assertEqual(self.client.list_posts(page=2), {"posts": [], "total": 0})
        self.session.request.assert_called_once_with(
            "GET", "http://api.test/post", params={"page": 2}, timeout=3
        )

    def test_error_status_raises_with_server_message(self):
        self.session.request.return_value = fake_response(400, {"error": "wrong credentials"})
        with self.assertRaises(ApiClientError) as ctx:
            self.client.login("alice", "nope")
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "wrong credentials")

    def test_unreachable_api_raises_client_error(self):
        self.session.request.side_effect = requests.ConnectionError("down")
        with self.assertRaises(ApiClientError) as ctx:
            self.client.list_posts()
        self.assertEqual(ctx.exception.status_code, 503)
        self.assertIn("down", ctx.exception.message)

    def test_profile_returns_none_when_unauthorized(self):
        self.session.request.return_value = fake_response(401, {"error": "Token requerido"})
        self.assertIsNone(self.client.profile())

    def test_profile_propagates_other_errors(self):
        self.session.request.return_value = fake_response(500, {"error": "boom"})
        with self.assertRaises(ApiClientError):
            self.client.profile()

    def test_create_post_sends_multipart_file(self):
        self.session.request.return_value = fake_response(body={"id": 1})
        cover = ("cover.png", io.BytesIO(b"img"), "image/png")
        self.client.create_post("Title", "Summary", "Content", cover)

        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("POST", "http://api.test/post"))
        self.assertEqual(kwargs["data"], {"title": "Title", "summary": "Summary", "content": "Content"})
        self.assertEqual(kwargs["files"], {"file": cover})

    def test_update_post_without_file_sends_no_files(self):
        self.session.request.return_value = fake_response(body={"id": 1})
        self.client.update_post(1, "T", "S", "C")

        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("PUT", "http://api.test/post"))
        self.assertEqual(kwargs["data"]["id"], 1)
        self.assertIsNone(kwargs["files"])

    def test_token_is_carried_as_cookie(self):
        client = BlogApiClient("http://api.test", token="abc", session=self.session)
        self.assertEqual(client.token, "abc")

    def test_logout_forgets_token(self):
        client = BlogApiClient("http://api.test", token="abc", session=self.session)
        self.session.request.return_value = fake_response(body="ok")
        client.logout()
        self.assertIsNone(client.token)

    def test_cover_url(self):
        self.assertEqual(self.client.cover_url("uploads/a.png"), "http://api.test/uploads/a.png")
        self.assertEqual(self.client.cover_url("https://cdn.test/a.png"), "https://cdn.test/a.png")
        self.assertIsNone(self.client.cover_url(None))


if __name__ == "__main__":
    unittest.main()
