#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# console and plot output for fft results. nothing in here modifies its input.


import time

import numpy as np
import matplotlib.pyplot as plt

from radix2_fft.complex_ops import energy


PRINT_LIMIT = 8  # nr of elements printed per array


def print_complex_array(arr, title, limit=PRINT_LIMIT):
    print(f'\n{title}:')
    n = len(arr)
    for i in range(min(n, limit)):
        z = complex(arr[i])
        print(f'[{i}] = {z.real:.4f} + {z.imag:.4f}i')
    if n > limit:
        print(f'... ({n - limit} more elements)')


def energy_concentration(spectrum, bins):
    """
    percentage of the spectrum energy that falls into bins

    Parameters
    ----------
    spectrum : complex sequence
        fft output
    bins : iterable of int
        bins of interest. duplicates are counted once.

    Returns
    -------
    percentage : float
        0 for an all zero spectrum

    """
    total = energy(spectrum)
    if total == 0:
        return 0.0
    peak = sum(abs(spectrum[k]) ** 2 for k in set(bins))
    return 100 * peak / total


def frequency_analysis(spectrum):
    """
    magnitudes at bin 1 and bin n-1 (the two bins of a single period real tone)
    and the share of energy in them
    """
    n = len(spectrum)
    mag1 = abs(spectrum[1 % n])
    mag_n1 = abs(spectrum[n - 1])
    return {
        'magnitude_1': mag1,
        'magnitude_n1': mag_n1,
        'concentration': energy_concentration(spectrum, (1 % n, n - 1)),
    }


def print_frequency_analysis(analysis, n):
    print('\nFrequency Analysis:')
    print(f"Magnitude at bin 1: {analysis['magnitude_1']:.4f}")
    print(f"Magnitude at bin {n - 1}: {analysis['magnitude_n1']:.4f}")
    print(f"Energy concentration: {analysis['concentration']:.2f}%")


def timed(func, *args, **kwargs):
    """run func, return (result, runtime in microseconds)"""
    start = time.perf_counter()
    result = func(*args, **kwargs)
    return result, (time.perf_counter() - start) * 1e6


def plot_spectrum(spectrum, title='Spectrum', show=False):
    """
    plot magnitude spectrum in dB

    Parameters
    ----------
    spectrum : complex sequence
        fft output
    title : str, optional
        plot title
    show :  bool, optional
        call plt.show(). The default is False.

    Returns
    -------
    fig : matplotlib figure

    """
    mag = np.abs(np.asarray(spectrum, dtype=complex))
    with np.errstate(divide='ignore'):
        mag_db = 20 * np.log10(mag)
    finite = np.isfinite(mag_db)
    if finite.any():
        mag_db[~finite] = np.min(mag_db[finite])  # set -inf values to lowest occurring value in plot
    else:
        mag_db[:] = 0
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.set_title(title)
    ax.plot(mag_db, label='magnitude')
    ax.set_xlabel('bin')
    ax.set_ylabel('dB')
    ax.legend()
    ax.grid()
    if show:
        plt.show()
    return fig
