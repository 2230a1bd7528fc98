import os
import tempfile
import unittest


DEFAULT_PASSWORD = "password123"


class ApiTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        from blog_api import create_app
        from blog_api.db import db

        cls.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "JWT_SECRET_KEY": "test-secret",
            "LOG_LEVEL": "WARNING",
        })
        cls.db = db
        cls.client = cls.app.test_client()

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        with self.app.app_context():
            self.db.drop_all()
            self.db.create_all()

    def _register(self, user_name, email=None, password=DEFAULT_PASSWORD, **extra):
        email = email or f"{user_name}@example.com"
        response = self.client.post(
            "/users",
            json={"userName": user_name, "email": email, "password": password, **extra},
        )
        self.assertEqual(response.status_code, 201, response.get_json())
        return response.get_json()["user"]

    def _login(self, email, password=DEFAULT_PASSWORD):
        response = self.client.post(
            "/users/login",
            json={"email": email, "password": password},
        )
        self.assertEqual(response.status_code, 200, response.get_json())
        return response.get_json()["token"]

    def _auth_header(self, email, password=DEFAULT_PASSWORD):
        return {"Authorization": f"Bearer {self._login(email, password)}"}

    def _create_post(self, headers, user_id, title="hello", content="first post"):
        response = self.client.post(
            "/posts",
            json={"userId": user_id, "title": title, "content": content},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201, response.get_json())
        return response.get_json()["post"]
