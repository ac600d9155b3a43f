"""End-to-end tests of client construction."""

import os
import shutil
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from pyjoplin import ClientConfig, JoplinClient
from pyjoplin.exceptions import AuthorizationRejected, NoServiceFoundError
from tests.fake_service import FakeJoplin


class JoplinClientTest(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.token_path = os.path.join(self.tmpdir, ".joplin-auth-token")
        self.config = ClientConfig(token_path=self.token_path)
        self.sleep = MagicMock()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_discovery_and_handshake(self):
        fake = FakeJoplin(live_ports=[41186])
        fake.add_json("POST", "/auth", {"auth_token": "hs", "status": "waiting"})
        fake.add_json(
            "GET",
            "/auth/check",
            {"status": "waiting"},
            {"status": "waiting"},
            {"status": "accepted", "token": "tok123"},
        )

        client = JoplinClient(self.config, session=fake.session, sleep=self.sleep)

        self.assertEqual(client.port, 41186)
        self.assertEqual(client.token, "tok123")
        with open(self.token_path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "tok123")
        self.assertTrue(all(c["port"] <= 41186 for c in fake.calls))
        self.assertNotIn("token", fake.requests_to("POST", "/auth")[0]["params"])

    def test_cached_token_and_notes_carry_it(self):
        with open(self.token_path, "w", encoding="utf-8") as f:
            f.write("saved\n")
        fake = FakeJoplin(live_ports=[41184])
        fake.add_json("GET", "/notes/abc", {"id": "abc"})

        client = JoplinClient(self.config, session=fake.session, sleep=self.sleep)
        note = client.notes.get("abc")

        self.assertEqual(note.id, "abc")
        self.assertEqual(fake.requests_to("POST", "/auth"), [])
        self.assertEqual(fake.calls[-1]["params"]["token"], "saved")
        self.assertEqual(fake.calls[-1]["timeout"], self.config.request_timeout)

    def test_no_service(self):
        fake = FakeJoplin(live_ports=[])
        with self.assertRaises(NoServiceFoundError):
            JoplinClient(self.config, session=fake.session)
        self.assertEqual(len(fake.calls), 11)

    def test_rejected_handshake_propagates(self):
        fake = FakeJoplin(live_ports=[41184])
        fake.add_json("POST", "/auth", {"auth_token": "hs", "status": "waiting"})
        fake.add_json("GET", "/auth/check", {"status": "rejected"})

        with self.assertRaises(AuthorizationRejected):
            JoplinClient(self.config, session=fake.session, sleep=self.sleep)
        self.assertFalse(os.path.exists(self.token_path))

    def test_failed_connect_closes_owned_session(self):
        fake = FakeJoplin(live_ports=[41184])
        fake.add_json("POST", "/auth", {"auth_token": "hs", "status": "waiting"})
        fake.add_json("GET", "/auth/check", {"status": "rejected"})

        with patch("pyjoplin.client.requests.Session", return_value=fake.session):
            with self.assertRaises(AuthorizationRejected):
                JoplinClient(self.config, sleep=self.sleep)

        fake.session.close.assert_called_once_with()

    def test_failed_discovery_closes_owned_session(self):
        fake = FakeJoplin(live_ports=[])

        with patch("pyjoplin.client.requests.Session", return_value=fake.session):
            with self.assertRaises(NoServiceFoundError):
                JoplinClient(self.config)

        fake.session.close.assert_called_once_with()

    def test_failed_connect_leaves_injected_session_open(self):
        fake = FakeJoplin(live_ports=[])

        with self.assertRaises(NoServiceFoundError):
            JoplinClient(self.config, session=fake.session)

        fake.session.close.assert_not_called()

    def test_context_manager_closes_session(self):
        with open(self.token_path, "w", encoding="utf-8") as f:
            f.write("saved")
        fake = FakeJoplin(live_ports=[41184])

        with JoplinClient(self.config, session=fake.session) as client:
            self.assertEqual(repr(client), "<JoplinClient: http://localhost:41184>")

        fake.session.close.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
