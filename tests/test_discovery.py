"""Tests for port discovery."""

import logging
import unittest

from pyjoplin.discovery import PortLocator
from pyjoplin.exceptions import NetworkError, NoServiceFoundError
from tests.fake_service import FakeJoplin, make_response


class PortLocatorTest(unittest.TestCase):
    def test_first_live_port_wins(self):
        fake = FakeJoplin(live_ports=[41186, 41190])
        locator = PortLocator(fake.session, probe_timeout=0.5)

        self.assertEqual(locator.locate(), 41186)

        probed = [c["port"] for c in fake.calls]
        self.assertEqual(probed, [41184, 41185, 41186])
        self.assertTrue(all(c["path"] == "/ping" for c in fake.calls))
        self.assertTrue(all(c["timeout"] == 0.5 for c in fake.calls))

    def test_non_2xx_probe_is_not_live(self):
        fake = FakeJoplin(live_ports=[41184, 41185])
        fake.routes[("GET", "/ping")].clear()
        fake.add("GET", "/ping", make_response(500, "boom"), make_response(200, "ok"))

        self.assertEqual(PortLocator(fake.session).locate(), 41185)

    def test_failed_probe_logs_below_warning(self):
        fake = FakeJoplin(live_ports=[41184, 41185])
        fake.routes[("GET", "/ping")].clear()
        fake.add("GET", "/ping", make_response(500, "boom"), make_response(200, "ok"))

        with self.assertLogs("pyjoplin", level=logging.DEBUG) as logs:
            PortLocator(fake.session).locate()

        self.assertTrue(logs.records)
        self.assertTrue(all(r.levelno < logging.WARNING for r in logs.records))

    def test_no_live_port(self):
        fake = FakeJoplin(live_ports=[])
        locator = PortLocator(fake.session, ports=range(41184, 41187))

        with self.assertRaises(NoServiceFoundError) as ctx:
            locator.locate()

        self.assertEqual([c["port"] for c in fake.calls], [41184, 41185, 41186])
        self.assertIsInstance(ctx.exception.last_error, NetworkError)
        self.assertIs(ctx.exception.__cause__, ctx.exception.last_error)
        self.assertIn("41186", str(ctx.exception))

    def test_ports_scanned_in_ascending_order(self):
        fake = FakeJoplin(live_ports=[41188])
        locator = PortLocator(fake.session, ports=[41188, 41185])

        self.assertEqual(locator.locate(), 41188)
        self.assertEqual([c["port"] for c in fake.calls], [41185, 41188])


if __name__ == "__main__":
    unittest.main()
