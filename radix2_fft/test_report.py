import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from radix2_fft.fft_iterative import fft_iterative
from radix2_fft.report import (energy_concentration, frequency_analysis, plot_spectrum,
                               print_complex_array, timed)
from radix2_fft.signals import generate_test_signal
from radix2_fft.verify import detailed_example, main, vector_demo, verify_fft


class TestReport(unittest.TestCase):

    def test_print_format(self):
        out = io.StringIO()
        with redirect_stdout(out):
            print_complex_array(np.arange(10) * (1 - 0.5j), 'Output')
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[1], 'Output:')
        self.assertEqual(lines[3], '[1] = 1.0000 + -0.5000i')
        self.assertEqual(lines[-1], '... (2 more elements)')
        self.assertEqual(len(lines), 2 + 8 + 1)

    def test_no_mutation(self):
        x = fft_iterative(generate_test_signal(16, 'random', 7))
        ref = x.copy()
        with redirect_stdout(io.StringIO()):
            print_complex_array(x, 'x')
        frequency_analysis(x)
        energy_concentration(x, [0, 1])
        plt.close(plot_spectrum(x))
        self.assertTrue(np.array_equal(x, ref))

    def test_sine_concentration(self):
        for n in (8, 64, 1024):
            a = frequency_analysis(fft_iterative(generate_test_signal(n, 'sine')))
            self.assertAlmostEqual(a['magnitude_1'], n / 2)
            self.assertAlmostEqual(a['magnitude_n1'], n / 2)
            self.assertAlmostEqual(a['concentration'], 100.0)

    def test_concentration(self):
        self.assertEqual(energy_concentration(np.zeros(4), [1]), 0.0)
        self.assertAlmostEqual(energy_concentration([1, 1, 1, 1], [0]), 25.0)
        self.assertAlmostEqual(energy_concentration([1, 1, 1, 1], [0, 0]), 25.0)

    def test_timed(self):
        result, us = timed(sum, [1, 2, 3])
        self.assertEqual(result, 6)
        self.assertGreaterEqual(us, 0)


class TestDriver(unittest.TestCase):

    def test_verify_backends(self):
        for backend in ('iterative', 'recursive', 'vector'):
            with redirect_stdout(io.StringIO()):
                a = verify_fft(32, backend)
            self.assertAlmostEqual(a['concentration'], 100.0)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            verify_fft(8, 'bluestein')

    def test_detailed_example(self):
        with redirect_stdout(io.StringIO()):
            out = detailed_example(16, rng=3)
        self.assertTrue(np.allclose(out['impulse'], np.ones(16)))
        self.assertTrue(np.allclose(out['exponential'], 16 * np.eye(16)[1]))

    def test_vector_demo(self):
        with redirect_stdout(io.StringIO()) as out:
            mags = vector_demo((8, 16))
        self.assertAlmostEqual(mags[8], 4)
        self.assertAlmostEqual(mags[16], 8)
        self.assertIn('Magnitude at bin 1: 8.0000 (expected: 8.0000)', out.getvalue())

    def test_vector_demo_single_sample(self):
        with redirect_stdout(io.StringIO()) as out:
            mags = vector_demo((1, 2))
        self.assertAlmostEqual(mags[1], 0)
        self.assertAlmostEqual(mags[2], 0)  # sin(0), sin(pi)
        self.assertIn('Magnitude at bin 0: 0.0000 (expected: 0.0000)', out.getvalue())

    def test_main_rejects_bad_sizes(self):
        for argv in (['--sizes', '3'], ['--sizes', '8', '0'], ['--detail-size', '12']):
            with self.subTest(argv=argv):
                with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()) as err:
                    with self.assertRaises(SystemExit) as cm:
                        main(argv)
                self.assertEqual(cm.exception.code, 2)
                self.assertIn('is not a power of two', err.getvalue())

    def test_main(self):
        with redirect_stdout(io.StringIO()) as out:
            ret = main(['--sizes', '8', '16', '--seed', '1', '--vector'])
        self.assertEqual(ret, 0)
        self.assertIn('=== Verifying 16-point FFT (iterative) ===', out.getvalue())
        self.assertIn('--- Random Signal ---', out.getvalue())


if __name__ == '__main__':
    unittest.main()
