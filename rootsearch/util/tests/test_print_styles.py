import contextlib
import io
from unittest import TestCase


# ======================================================================

class TestPrintStyles(TestCase):
    def setUp(self):
        from rootsearch.util.print_styles import (PrintStyles, AddDotStyle,
                                                  LevelTabStyle)
        self.fmt = PrintStyles(display_level=1)
        self.fmt.add('solver', LevelTabStyle())
        self.fmt.add('step', AddDotStyle(), parent='solver')
        self.fmt.add('detail', LevelTabStyle(), parent='step')

    def _output(self, *args, **kwargs) -> str:
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            self.fmt.print(*args, **kwargs)
        return buf.getvalue()

    def test_levels(self):
        self.assertEqual(self._output('solver', "Start"), "Start\n")
        self.assertEqual(self._output('step', "Hidden"), "")
        self.assertEqual(self._output('step', "Shown", display_level=2),
                         "... Shown\n")
        self.assertEqual(self._output('detail', "Deep", display_level=3),
                         "        Deep\n")

        self.fmt.display_level = 0
        self.assertEqual(self._output('solver', "Silent"), "")

    def test_apply(self):
        self.assertEqual(self.fmt.apply('step', "x"), "... x")
        with self.assertRaises(ValueError):
            self.fmt.apply('missing', "x")

    def test_add_errors(self):
        from rootsearch.util.print_styles import LevelTabStyle

        with self.assertRaises(ValueError):
            self.fmt.add('solver', LevelTabStyle())
        with self.assertRaises(ValueError):
            self.fmt.add('other', LevelTabStyle(), parent='missing')

    def test_unknown_style(self):
        with self.assertWarns(UserWarning):
            out = self._output('missing', "Plain")
        self.assertEqual(out, "Plain\n")
