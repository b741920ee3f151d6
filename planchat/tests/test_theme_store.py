import json
import tempfile
import unittest
from pathlib import Path

from planchat.events.Event_Bus import EventBus, THEME_CHANGED
from planchat.infra.Theme_Store import ThemeStore


class TestThemeStore(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "prefs" / "theme.json"
        self.bus = EventBus()
        self.changes = []
        self.bus.subscribe(THEME_CHANGED, lambda name, payload: self.changes.append(payload["theme"]))
        self.store = ThemeStore(path=self.path, event_bus=self.bus)

    def tearDown(self):
        self.tmp.cleanup()

    def test_defaults_to_light(self):
        self.assertEqual(self.store.load(), "light")
        self.assertEqual(self.changes, ["light"])

    def test_set_persists_across_instances(self):
        self.store.set("dark")
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"theme": "dark"})
        self.assertEqual(ThemeStore(path=self.path, event_bus=self.bus).load(), "dark")

    def test_toggle_flips(self):
        self.store.load()
        self.assertEqual(self.store.toggle(), "dark")
        self.assertEqual(self.store.toggle(), "light")
        self.assertEqual(self.changes, ["light", "dark", "light"])

    def test_unknown_theme_rejected(self):
        with self.assertRaises(ValueError):
            self.store.set("solarized")
        self.assertFalse(self.path.exists())

    def test_garbage_file_falls_back_to_default(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{broken", encoding="utf-8")
        self.assertEqual(self.store.load(), "light")

        self.path.write_text(json.dumps({"theme": "purple"}), encoding="utf-8")
        self.assertEqual(self.store.load(), "light")


if __name__ == '__main__':
    unittest.main()
