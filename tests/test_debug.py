import unittest

from connectfour.debug import DebugManager, DebugLevel, LOGGER_NAME


class TestDebugManager(unittest.TestCase):
    def setUp(self):
        self.manager = DebugManager()
        self.manager.configure(level=DebugLevel.DEBUG, components=[])

    def test_given_level_when_logging_below_it_then_message_dropped(self):
        self.manager.configure(level=DebugLevel.INFO)
        with self.assertLogs(LOGGER_NAME, level='DEBUG') as captured:
            self.manager.info("kept", "engine")
            self.manager.debug("dropped", "engine")
        self.assertEqual(len(captured.records), 1)
        self.assertIn("[engine] kept", captured.output[0])

    def test_given_component_filter_when_logging_then_other_components_dropped(self):
        self.manager.configure(components=["board"])
        with self.assertLogs(LOGGER_NAME, level='DEBUG') as captured:
            self.manager.warning("from board", "board")
            self.manager.warning("from engine", "engine")
        self.assertEqual([r.getMessage() for r in captured.records], ["[board] from board"])

    def test_given_level_name_when_setting_from_string_then_applied(self):
        self.assertTrue(self.manager.set_from_string("Trace"))
        self.assertEqual(self.manager.level, DebugLevel.TRACE)
        self.assertFalse(self.manager.set_from_string("chatty"))
        self.assertEqual(self.manager.level, DebugLevel.TRACE)

    def test_given_timer_when_ended_then_elapsed_returned_once(self):
        self.manager.start_timer("scan")
        elapsed = self.manager.end_timer("scan")
        self.assertGreaterEqual(elapsed, 0.0)
        with self.assertLogs(LOGGER_NAME, level='WARNING'):
            self.assertIsNone(self.manager.end_timer("scan"))

    def tearDown(self):
        self.manager.configure(level=DebugLevel.WARNING, components=[])


if __name__ == "__main__":
    unittest.main()
