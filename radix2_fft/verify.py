#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# demo driver: runs the transforms on test signals and prints what comes out


import argparse

import matplotlib.pyplot as plt

from radix2_fft.complex_ops import is_power_of_two
from radix2_fft.fft_iterative import fft_iterative
from radix2_fft.fft_recursive import fft_recursive
from radix2_fft.fft_vector import deinterleave, fft_vector, interleave, vector_fft
from radix2_fft.report import (frequency_analysis, plot_spectrum, print_complex_array,
                               print_frequency_analysis, timed)
from radix2_fft.signals import SIGNAL_KINDS, SIGNAL_NAMES, generate_test_signal


TEST_SIZES = (8, 16, 32, 64, 128, 256, 512, 1024)
VECTOR_SIZES = (8, 16, 32, 64)

BACKENDS = {
    'iterative': fft_iterative,
    'recursive': fft_recursive,
    'vector': vector_fft,
}


def get_backend(name):
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f'unknown backend {name!r}, choose from {sorted(BACKENDS)}') from None


def verify_fft(n, backend='iterative', plot=False):
    """
    fft of a single period sine. the energy should sit in bins 1 and n-1, each with magnitude n/2.

    Returns
    -------
    analysis : dict
        see report.frequency_analysis

    """
    fft = get_backend(backend)
    print(f'\n=== Verifying {n}-point FFT ({backend}) ===')

    signal = generate_test_signal(n, 'sine')
    print_complex_array(signal, 'Input Signal (Sine Wave)')

    _, time_us = timed(fft, signal)

    print_complex_array(signal, 'FFT Output')
    print(f'Time taken: {time_us:.2f} microseconds')

    analysis = frequency_analysis(signal)
    print_frequency_analysis(analysis, n)
    if plot:
        plot_spectrum(signal, f'{n}-point FFT of sine')
    return analysis


def detailed_example(n=16, rng=None):
    """every signal kind through the iterative fft. only the simple ones get printed."""
    print(f'\n\n=== Detailed Example: {n}-point FFT ===')
    outputs = {}
    for kind in SIGNAL_KINDS:
        print(f'\n--- {SIGNAL_NAMES[kind]} Signal ---')
        signal = generate_test_signal(n, kind, rng)
        verbose = kind in ('impulse', 'sine', 'cosine')
        if verbose:
            print_complex_array(signal, 'Input')
        fft_iterative(signal)
        if verbose:
            print_complex_array(signal, 'FFT Output')
        outputs[kind] = signal
    return outputs


def vector_demo(sizes=VECTOR_SIZES):
    """interleaved vector backend on sine inputs, returns {n: magnitude at bin 1}"""
    print('Vector FFT Test Program')
    print('=======================\n')
    mags = {}
    for n in sizes:
        print(f'Testing {n}-point FFT:')
        data = interleave(generate_test_signal(n, 'sine'))
        print_complex_array(deinterleave(data), 'Input Signal')

        _, time_us = timed(fft_vector, data, n)

        print_complex_array(deinterleave(data), 'FFT Output')
        print(f'Time: {time_us / 1000:.3f} ms')
        k = 1 % n  # a single sample only has bin 0
        mags[n] = (data[2 * k] ** 2 + data[2 * k + 1] ** 2) ** 0.5
        expected = n / 2 if n > 1 else 0.0
        print(f'Magnitude at bin {k}: {mags[n]:.4f} (expected: {expected:.4f})\n')
    return mags


def main(argv=None):
    parser = argparse.ArgumentParser(description='1D FFT using the radix2 Cooley-Tukey algorithm')
    parser.add_argument('--sizes', type=int, nargs='+', default=list(TEST_SIZES),
                        help='fft sizes to verify, powers of two')
    parser.add_argument('--backend', choices=sorted(BACKENDS), default='iterative')
    parser.add_argument('--detail-size', type=int, default=16,
                        help='size of the detailed example, 0 to skip it')
    parser.add_argument('--seed', type=int, help='seed for the random signal')
    parser.add_argument('--vector', action='store_true', help='also run the interleaved vector demo')
    parser.add_argument('--plot', action='store_true', help='plot the verified spectra')
    args = parser.parse_args(argv)
    for n in args.sizes:
        if not is_power_of_two(n):
            parser.error(f'--sizes: {n} is not a power of two')
    if args.detail_size and not is_power_of_two(args.detail_size):
        parser.error(f'--detail-size: {args.detail_size} is not a power of two')

    print('1D FFT Implementation using Cooley-Tukey Algorithm')
    print('==================================================')

    for n in args.sizes:
        verify_fft(n, args.backend, plot=args.plot)

    if args.detail_size:
        detailed_example(args.detail_size, args.seed)

    if args.vector:
        print()
        vector_demo()

    if args.plot:
        plt.show()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
