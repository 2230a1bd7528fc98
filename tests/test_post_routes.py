import unittest

from api_test_case import ApiTestCase


class TestPostRoutes(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.user = self._register("alice")
        self.headers = self._auth_header("alice@example.com")

    def test_create_post_requires_auth(self):
        response = self.client.post(
            "/posts",
            json={"userId": self.user["id"], "title": "t", "content": "c"},
        )
        self.assertEqual(response.status_code, 403)

    def test_create_post_embeds_owner_without_password(self):
        response = self.client.post(
            "/posts",
            json={"userId": self.user["id"], "title": "hello", "content": "world"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 201)
        body = response.get_json()
        self.assertEqual(body["message"], "Post created successfully")
        post = body["post"]
        self.assertEqual(post["title"], "hello")
        self.assertEqual(post["content"], "world")
        self.assertNotIn("userId", post)
        self.assertEqual(post["user"]["id"], self.user["id"])
        self.assertNotIn("password_hash", post["user"])
        self.assertEqual(post["categories"], [])
        self.assertEqual(post["comments"], [])

    def test_create_post_for_missing_user_returns_404(self):
        response = self.client.post(
            "/posts",
            json={"userId": 99, "title": "hello", "content": "world"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error"], "User not found")
        self.assertEqual(self.client.get("/posts").get_json(), [])

    def test_create_post_rejects_string_user_id(self):
        response = self.client.post(
            "/posts",
            json={"userId": "1", "title": "hello", "content": "world"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.get_json()["message"].startswith("'userId'"))

    def test_create_post_rejects_long_title(self):
        response = self.client.post(
            "/posts",
            json={"userId": self.user["id"], "title": "x" * 256, "content": "world"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Invalid body request")

    def test_create_post_with_explicit_id_conflict(self):
        post = self._create_post(self.headers, self.user["id"])

        response = self.client.post(
            "/posts",
            json={
                "id": post["id"],
                "userId": self.user["id"],
                "title": "again",
                "content": "again",
            },
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json()["error"], "Post already exists")

    def test_list_posts_is_public(self):
        self._create_post(self.headers, self.user["id"], title="one")
        self._create_post(self.headers, self.user["id"], title="two")

        response = self.client.get("/posts")
        self.assertEqual(response.status_code, 200)
        posts = response.get_json()
        self.assertEqual([p["title"] for p in posts], ["one", "two"])
        self.assertEqual(posts[0]["user"]["userName"], "alice")

    def test_get_post_nests_categories_and_comments(self):
        post = self._create_post(self.headers, self.user["id"])
        self.client.post(
            f"/posts/{post['id']}/categories",
            json={"name": "tech"},
            headers=self.headers,
        )
        self.client.post(
            f"/posts/{post['id']}/comments",
            json={"content": "first!"},
            headers=self.headers,
        )

        response = self.client.get(f"/posts/{post['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertEqual([c["name"] for c in body["categories"]], ["tech"])
        self.assertEqual(len(body["comments"]), 1)
        comment = body["comments"][0]
        self.assertEqual(comment["content"], "first!")
        self.assertNotIn("userId", comment)
        self.assertNotIn("postId", comment)

    def test_get_missing_post_returns_404(self):
        response = self.client.get("/posts/99", headers=self.headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error"], "Post not found")

    def test_update_post(self):
        post = self._create_post(self.headers, self.user["id"])

        response = self.client.put(
            f"/posts/{post['id']}",
            json={"title": "new title", "content": "new content"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertEqual(body["message"], "Post updated successfully")
        self.assertEqual(body["post"]["title"], "new title")
        self.assertEqual(body["post"]["content"], "new content")
        self.assertEqual(body["post"]["user"]["id"], self.user["id"])

    def test_update_missing_post_returns_404(self):
        response = self.client.put(
            "/posts/99",
            json={"title": "new title", "content": "new content"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 404)

    def test_update_post_rejects_missing_content(self):
        post = self._create_post(self.headers, self.user["id"])

        response = self.client.put(
            f"/posts/{post['id']}",
            json={"title": "new title"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.get_json()["message"].startswith("'content'"))

    def test_delete_post(self):
        post = self._create_post(self.headers, self.user["id"])

        response = self.client.delete(f"/posts/{post['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["message"], "Post deleted successfully")

        again = self.client.delete(f"/posts/{post['id']}", headers=self.headers)
        self.assertEqual(again.status_code, 404)

    def test_post_id_must_be_positive_integer(self):
        response = self.client.get("/posts/abc", headers=self.headers)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["message"], "post ID must be a positive integer")


if __name__ == "__main__":
    unittest.main()
