import unittest

from numberline import NumberLine, NumberLineOptions, PeriodicScale, ZoomSession


def make_number_line() -> NumberLine:
    return NumberLine(NumberLineOptions(
        pattern=[3, 1, 1, 1, 1, 2, 1, 1, 1, 1],
        breakpoint_lower_bound=100,
        breakpoint_upper_bound=150,
        scale=PeriodicScale(base_coverage=1000, base_length=100),
    ))


class TestZoomSession(unittest.TestCase):
    def setUp(self):
        self.number_line = make_number_line()
        self.session = self.number_line.zoom_session()

    def test_session_is_bound(self):
        self.assertIsInstance(self.session, ZoomSession)
        self.assertIs(self.session.number_line, self.number_line)
        self.assertFalse(self.session.valid)

    def test_first_zoom_records_value(self):
        value = self.number_line.value_at(70)
        self.assertTrue(self.session.zoom_around(value, 70, 0.2))
        self.assertTrue(self.session.valid)
        self.assertEqual(self.session.last_value, value)
        self.assertEqual(self.session.last_address, 70)
        self.assertAlmostEqual(self.number_line.value_at(70), value)

    def test_drift_at_same_address_is_corrected(self):
        value = self.number_line.value_at(70)
        self.session.zoom_around(value, 70, 0.2)
        drifted = self.number_line.value_at(70) + 0.01
        position = self.number_line.position_of(drifted)
        self.assertTrue(self.session.zoom_around(drifted, 70, 0.2))
        self.assertAlmostEqual(self.number_line.position_of(value), position)
        self.assertEqual(self.session.last_value, value)

    def test_new_address_is_not_corrected(self):
        value = self.number_line.value_at(70)
        self.session.zoom_around(value, 70, 0.2)
        other = self.number_line.value_at(80)
        position = self.number_line.position_of(other)
        self.assertTrue(self.session.zoom_around(other, 80, 0.2))
        self.assertAlmostEqual(self.number_line.position_of(other), position)
        self.assertEqual(self.session.last_value, other)
        self.assertEqual(self.session.last_address, 80)

    def test_pan_invalidates(self):
        value = self.number_line.value_at(70)
        self.session.zoom_around(value, 70, 0.2)
        self.number_line.pan_by(10)
        self.assertFalse(self.session.valid)
        drifted = self.number_line.value_at(70) + 0.01
        position = self.number_line.position_of(drifted)
        self.assertTrue(self.session.zoom_around(drifted, 70, 0.2))
        self.assertAlmostEqual(self.number_line.position_of(drifted), position)
        self.assertEqual(self.session.last_value, drifted)

    def test_scale_category_change_invalidates(self):
        self.number_line.zoom_to(1.9)
        value = self.number_line.value_at(70)
        self.session.zoom_around(value, 70, 0.05)
        drifted = self.number_line.value_at(70) + 0.01
        position = self.number_line.position_of(drifted)
        self.assertTrue(self.session.zoom_around(drifted, 70, 0.1))
        self.assertEqual(self.number_line.scale_category, 1)
        self.assertAlmostEqual(self.number_line.position_of(drifted), position)
        self.assertEqual(self.session.last_value, drifted)

    def test_rejected_zoom_leaves_everything(self):
        value = self.number_line.value_at(70)
        self.session.zoom_around(value, 70, 0.2)
        magnification = self.number_line.magnification
        displacement = self.number_line.displacement
        self.assertFalse(self.session.zoom_around(value, 70, -5))
        self.assertEqual(self.number_line.magnification, magnification)
        self.assertEqual(self.number_line.displacement, displacement)
        self.assertTrue(self.session.valid)

    def test_reset(self):
        self.session.zoom_around(self.number_line.value_at(70), 70, 0.2)
        self.session.reset()
        self.assertFalse(self.session.valid)
        self.assertIsNone(self.session.last_value)


if __name__ == '__main__':
    unittest.main()
