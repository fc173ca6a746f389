import unittest

from flask_login import current_user
from werkzeug.security import generate_password_hash

from app import app, db, progress_gateway, seed_data, User


class AppTestCase(unittest.TestCase):
    def setUp(self):
        app.config.update(TESTING=True)
        with app.app_context():
            db.session.remove()
            db.drop_all()
            seed_data()
        self.client = app.test_client()

    def tearDown(self):
        with app.app_context():
            db.session.remove()
            db.drop_all()

    def _add_user(self, username, password="pw"):
        with app.app_context():
            user = User(username=username, password_hash=generate_password_hash(password))
            db.session.add(user)
            db.session.commit()
            return user.id

    def test_index_lists_levels(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn(b"Incident Response", resp.data)
        self.assertIn(b"Malware Hunter", resp.data)

    def test_signup_logs_in_and_redirects(self):
        with self.client as c:
            resp = c.post(
                "/signup",
                data={"username": "neo", "email": "neo@example.com", "password": "pw", "confirm": "pw"},
            )
            self.assertEqual(resp.status_code, 302)
            self.assertIn("/dashboard", resp.headers["Location"])
            self.assertTrue(current_user.is_authenticated)

    def test_signup_rejects_mismatched_passwords(self):
        resp = self.client.post(
            "/signup",
            data={"username": "neo", "password": "pw", "confirm": "other"},
        )
        self.assertIn(b"Passwords do not match", resp.data)
        with app.app_context():
            self.assertIsNone(User.query.filter_by(username="neo").first())

    def test_signup_rejects_taken_username(self):
        self._add_user("neo")
        resp = self.client.post(
            "/signup",
            data={"username": "neo", "password": "pw", "confirm": "pw"},
        )
        self.assertIn(b"Username already taken", resp.data)

    def test_login_with_bad_password(self):
        self._add_user("neo")
        resp = self.client.post("/login", data={"username": "neo", "password": "nope"})
        self.assertIn(b"Invalid credentials", resp.data)

    def test_logout_requires_login_again(self):
        self._add_user("neo")
        self.client.post("/login", data={"username": "neo", "password": "pw"})
        self.assertEqual(self.client.get("/dashboard").status_code, 200)
        self.client.get("/logout")
        self.assertEqual(self.client.get("/dashboard").status_code, 302)

    def test_leaderboard_orders_by_total_score(self):
        low, high = self._add_user("low"), self._add_user("high")
        with app.app_context():
            progress_gateway.upsert(low, 1, 3, completed=True)
            progress_gateway.upsert(high, 1, 10, completed=True)
            progress_gateway.upsert(high, 6, 8, completed=True)
        resp = self.client.get("/leaderboard")
        self.assertEqual(resp.status_code, 200)
        self.assertLess(resp.data.index(b"<td>high</td>"), resp.data.index(b"<td>low</td>"))

        rows = self.client.get("/api/leaderboard").get_json()["leaderboard"]
        self.assertEqual(rows[0], {"username": "high", "total_score": 18, "completed": 2})

    def test_seed_is_idempotent(self):
        with app.app_context():
            seed_data()
            self.assertEqual(len(progress_gateway.list_levels()), 10)


if __name__ == "__main__":
    unittest.main()
