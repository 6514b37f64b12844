import unittest

from dimensional_cache.events import SpawnEvent


class SpawnEventTests(unittest.TestCase):
    def test_arguments(self):
        event = SpawnEvent(["--open", "/data/plate1.tif"])
        self.assertEqual(event.arguments, ("--open", "/data/plate1.tif"))
        self.assertEqual(SpawnEvent([]).arguments, ())

    def test_read_only(self):
        args = ["a", "b"]
        event = SpawnEvent(args)
        args.append("c")
        self.assertEqual(event.arguments, ("a", "b"))
        with self.assertRaises(AttributeError):
            event.args = ("x",)  # type: ignore[misc]

    def test_equality(self):
        self.assertEqual(SpawnEvent(("a",)), SpawnEvent(["a"]))
        self.assertEqual(hash(SpawnEvent(("a",))), hash(SpawnEvent(["a"])))

    def test_rejects_non_strings(self):
        with self.assertRaises(TypeError):
            SpawnEvent(["a", 1])
        with self.assertRaises(TypeError):
            SpawnEvent("abc")


if __name__ == "__main__":
    unittest.main()
