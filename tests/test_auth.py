import unittest

from tests.base import ApiTestCase


class AuthApiTests(ApiTestCase):
    def test_register_returns_user_without_password(self):
        response = self.register("alice")
        self.assertEqual(response.status_code, 200)
        payload = response.json
        self.assertEqual(payload["username"], "alice")
        self.assertIn("id", payload)
        self.assertNotIn("password_hash", payload)

    def test_register_same_username_twice_fails(self):
        self.assertEqual(self.register("alice").status_code, 200)
        response = self.register("alice", password="another")
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json)

    def test_register_requires_username_and_password(self):
        response = self.client.post("/register", json={"username": "alice"})
        self.assertEqual(response.status_code, 400)

    def test_login_sets_http_only_cookie(self):
        self.register("alice")
        response = self.login("alice")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json["username"], "alice")

        set_cookie = response.headers.get("Set-Cookie", "")
        self.assertTrue(set_cookie.startswith("token="))
        self.assertIn("HttpOnly", set_cookie)

    def test_login_wrong_password_is_generic_error_without_token(self):
        self.register("alice")
        response = self.login("alice", password="nope")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json, {"error": "wrong credentials"})
        self.assertNotIn("token=", response.headers.get("Set-Cookie", ""))

    def test_login_unknown_user_gets_same_error(self):
        response = self.login("ghost")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json, {"error": "wrong credentials"})

    def test_profile_returns_claims(self):
        self.register("alice")
        user_id = self.login("alice").json["id"]

        response = self.client.get("/profile")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json, {"id": user_id, "username": "alice"})

    def test_profile_without_cookie_is_unauthorized(self):
        response = self.client.get("/profile")
        self.assertEqual(response.status_code, 401)

    def test_profile_with_garbage_token_is_unauthorized(self):
        self.client.set_cookie("token", "not-a-jwt")
        response = self.client.get("/profile")
        self.assertEqual(response.status_code, 401)

    def test_logout_clears_session(self):
        self.register("alice")
        self.login("alice")
        response = self.client.post("/logout")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json, "ok")

        self.assertEqual(self.client.get("/profile").status_code, 401)


if __name__ == "__main__":
    unittest.main()
