#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import numpy as np

from radix2_fft.complex_ops import check_length


SIGNAL_KINDS = ('impulse', 'sine', 'cosine', 'exponential', 'random')

SIGNAL_NAMES = {
    'impulse': 'Impulse',
    'sine': 'Sine Wave',
    'cosine': 'Cosine Wave',
    'exponential': 'Complex Exponential',
    'random': 'Random',
}


def generate_test_signal(n, kind='sine', rng=None):
    """
    make a complex test signal

    Parameters
    ----------
    n : int
        signal length, power of two
    kind : str or int
        one of SIGNAL_KINDS, or its index (0: impulse ... 4: random)
    rng : numpy Generator or int, optional
        random source or seed for the 'random' kind. The default is a fresh unseeded generator.

    Returns
    -------
    x : complex array
        test signal

    """
    check_length(n)
    if isinstance(kind, (int, np.integer)):
        if not 0 <= kind < len(SIGNAL_KINDS):
            raise ValueError(f'unknown signal type {kind}')
        kind = SIGNAL_KINDS[kind]

    t = 2 * np.pi * np.arange(n) / n  # one period over the vector
    if kind == 'impulse':
        x = np.zeros(n, dtype=complex)
        x[0] = 1
    elif kind == 'sine':
        x = np.sin(t).astype(complex)
    elif kind == 'cosine':
        x = np.cos(t).astype(complex)
    elif kind == 'exponential':
        x = np.exp(1j * t)
    elif kind == 'random':
        rng = np.random.default_rng(rng)
        x = (rng.random(n) - 0.5) + 1j * (rng.random(n) - 0.5)
    else:
        raise ValueError(f'unknown signal type {kind!r}')
    return x
