import dataclasses
import unittest

from numberline import (ConfigurationError, InvalidBreakpointsError, InvalidInitialMagnificationError,
                        InvalidPatternError, InvalidStretchModuloError, InvalidSubdivisionError,
                        InvalidZoomFactorError, InvalidZoomPeriodError, NumberLine, NumberLineOptions,
                        PeriodicScale, SubdivisionScale)


def periodic_options(**overrides) -> NumberLineOptions:
    options = dict(
        pattern=[3, 1, 1, 1, 1, 2, 1, 1, 1, 1],
        breakpoint_lower_bound=100,
        breakpoint_upper_bound=150,
        scale=PeriodicScale(base_coverage=1000, base_length=100),
    )
    options.update(overrides)
    return NumberLineOptions(**options)


def subdivision_options(**scale_overrides) -> NumberLineOptions:
    parameters = dict(base_unit_value=1000, subdivision_fallout=[200, 100, 50, 20, 10], maximum_length_of_last_subdivision=500)
    parameters.update(scale_overrides)
    return periodic_options(scale=SubdivisionScale(**parameters))


class TestOptionDefaults(unittest.TestCase):
    def test_defaults(self):
        options = periodic_options()
        self.assertEqual(options.initial_magnification, 1)
        self.assertEqual(options.initial_displacement, 0)
        self.assertIsNone(options.label_strategy)
        self.assertEqual(options.breakpoints, (100, 150))

    def test_stretch_modulo_default(self):
        self.assertEqual(SubdivisionScale(1000).stretch_modulo, 1.3)

    def test_periodic_zoom_factor_defaults_to_breakpoint_ratio(self):
        options = periodic_options()
        self.assertEqual(options.scale.factor_for(options.breakpoints), 1.5)

    def test_options_are_frozen(self):
        options = periodic_options()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            options.initial_magnification = 3
        with self.assertRaises(AttributeError):
            options.scale.zoom_factor = 0
        number_line = NumberLine(options)
        number_line.zoom_to(0.5)
        self.assertAlmostEqual(number_line.unit_value, 15)

    def test_valid_options_construct(self):
        NumberLine(periodic_options())
        NumberLine(subdivision_options())
        NumberLine(periodic_options(initial_magnification=0))


class TestOptionValidation(unittest.TestCase):
    def test_empty_pattern(self):
        with self.assertRaises(InvalidPatternError):
            NumberLine(periodic_options(pattern=[]))

    def test_non_positive_pattern(self):
        with self.assertRaises(InvalidPatternError):
            NumberLine(periodic_options(pattern=[3, 1, 0]))

    def test_breakpoints(self):
        with self.assertRaises(InvalidBreakpointsError):
            NumberLine(periodic_options(breakpoint_lower_bound=150, breakpoint_upper_bound=100))
        with self.assertRaises(InvalidBreakpointsError):
            NumberLine(periodic_options(breakpoint_lower_bound=0))

    def test_equal_breakpoints_are_fine(self):
        number_line = NumberLine(periodic_options(breakpoint_upper_bound=100))
        number_line.zoom_to(1.5)
        self.assertEqual(number_line.unit_length, 100)

    def test_zoom_period(self):
        with self.assertRaises(InvalidZoomPeriodError):
            NumberLine(periodic_options(scale=PeriodicScale(1000, 100, zoom_period=0)))
        with self.assertRaises(InvalidZoomPeriodError):
            NumberLine(periodic_options(scale=PeriodicScale(1000, 100, zoom_period=-2)))

    def test_zoom_factor(self):
        with self.assertRaises(InvalidZoomFactorError):
            NumberLine(periodic_options(scale=PeriodicScale(1000, 100, zoom_factor=0)))
        with self.assertRaises(InvalidZoomFactorError):
            NumberLine(periodic_options(scale=PeriodicScale(1000, 100, zoom_factor=-2)))
        with self.assertRaises(InvalidZoomFactorError):
            NumberLine(periodic_options(scale=PeriodicScale(1000, 100, zoom_factor=0.5)))
        NumberLine(periodic_options(scale=PeriodicScale(1000, 100, zoom_factor=1)))

    def test_base_coverage(self):
        with self.assertRaises(ConfigurationError):
            NumberLine(periodic_options(scale=PeriodicScale(0, 100)))

    def test_stretch_modulo(self):
        with self.assertRaises(InvalidStretchModuloError):
            NumberLine(subdivision_options(stretch_modulo=1))
        with self.assertRaises(InvalidStretchModuloError):
            NumberLine(subdivision_options(stretch_modulo=0.5))

    def test_initial_magnification(self):
        with self.assertRaises(InvalidInitialMagnificationError):
            NumberLine(periodic_options(initial_magnification=-1))

    def test_initial_magnification_zero_undefined_for_subdivisions(self):
        options = dataclasses.replace(subdivision_options(), initial_magnification=0)
        with self.assertRaises(InvalidInitialMagnificationError):
            NumberLine(options)

    def test_subdivision_not_descending(self):
        with self.assertRaises(InvalidSubdivisionError):
            NumberLine(subdivision_options(subdivision_fallout=[100, 200]))
        with self.assertRaises(InvalidSubdivisionError):
            NumberLine(subdivision_options(subdivision_fallout=[200, 200, 100]))

    def test_subdivision_last_not_positive(self):
        with self.assertRaises(InvalidSubdivisionError):
            NumberLine(subdivision_options(subdivision_fallout=[200, 100, 0]))

    def test_subdivision_first_above_base(self):
        with self.assertRaises(InvalidSubdivisionError):
            NumberLine(subdivision_options(subdivision_fallout=[2000, 100]))

    def test_subdivision_maximum_length(self):
        with self.assertRaises(InvalidSubdivisionError):
            NumberLine(subdivision_options(maximum_length_of_last_subdivision=0))

    def test_errors_are_value_errors(self):
        for error in (InvalidPatternError, InvalidBreakpointsError, InvalidZoomPeriodError, InvalidZoomFactorError,
                      InvalidStretchModuloError, InvalidInitialMagnificationError, InvalidSubdivisionError):
            self.assertTrue(issubclass(error, ConfigurationError))
            self.assertTrue(issubclass(error, ValueError))


if __name__ == '__main__':
    unittest.main()
