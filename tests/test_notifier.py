"""Notifier and logging setup tests."""
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from core import notifier
from core.logging_setup import LOG_FILE_NAME, setup_logging


class NotifierTests(unittest.TestCase):
    def setUp(self):
        notifier._last_alert = 0

    @patch("core.notifier.notification")
    def test_alert_respects_cooldown(self, notification_mock):
        self.assertTrue(notifier.alert("first"))
        self.assertFalse(notifier.alert("second"))
        notification_mock.notify.assert_called_once()
        self.assertEqual(notification_mock.notify.call_args.kwargs["message"], "first")

    @patch("core.notifier.notification")
    def test_backend_failure_is_logged(self, notification_mock):
        notification_mock.notify.side_effect = NotImplementedError("no backend")
        with self.assertLogs(level="ERROR"):
            self.assertFalse(notifier.alert("boom"))


class LoggingSetupTests(unittest.TestCase):
    def test_setup_creates_rotating_log(self):
        root_logger = logging.getLogger()
        saved = root_logger.handlers[:]
        saved_level = root_logger.level
        root_logger.handlers = []
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        os.environ["APP_LOG_DIR"] = temp_dir.name
        try:
            setup_logging()
            setup_logging()
            self.assertEqual(len(root_logger.handlers), 2)
            self.assertTrue(os.path.exists(os.path.join(temp_dir.name, LOG_FILE_NAME)))
        finally:
            for handler in root_logger.handlers:
                handler.close()
            root_logger.handlers = saved
            root_logger.setLevel(saved_level)
            os.environ.pop("APP_LOG_DIR", None)
