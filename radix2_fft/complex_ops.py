#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# shared helpers for the radix2 transforms


import cmath

import numpy as np


class InvalidLengthError(ValueError):
    """sequence length is not a power of two (or smaller than one)"""


def is_power_of_two(n):
    return n >= 1 and (n & (n - 1)) == 0


def check_length(n):
    """
    check that n is a valid radix2 fft size

    Parameters
    ----------
    n : int
        sequence length

    Returns
    -------
    log2n : int
        nr of stages (also nr. bits of index)

    """
    if not isinstance(n, (int, np.integer)) or not is_power_of_two(int(n)):
        raise InvalidLengthError(f'input length has to be a power of two, got {n!r}')
    return int(n).bit_length() - 1


def check_sequence(x):
    """
    check a sequence that gets transformed in place. returns log2n.
    numpy arrays have to be complex, else the imaginary parts would be dropped on writeback.
    """
    if isinstance(x, np.ndarray):
        if x.ndim != 1:
            raise ValueError(f'only one dimensional sequences are supported, got shape {x.shape}')
        if not np.iscomplexobj(x):
            raise TypeError(f'in place transform needs a complex array, got dtype {x.dtype}')
    return check_length(len(x))


def twiddle(m, period, ifft=False):
    """
    twiddle factor e^(-2*pi*i*m/period), point on the unit circle.
    conjugated for the inverse transform.
    """
    sign = 1 if ifft else -1
    return cmath.exp(sign * 2j * cmath.pi * m / period)


def cmult4(ar, ai, br, bi):
    """
    complex multiplier using 4 real multipliers on separate real/imag parts.
    works elementwise on numpy arrays as well as on floats.

    Parameters
    ----------
    ar : float or array
        a real
    ai : float or array
        a imag
    br : float or array
        b real
    bi : float or array
        b imag

    Returns
    -------
    cr : float or array
        output real
    ci : float or array
        output imag

    """
    cr = ar * br - ai * bi
    ci = ar * bi + ai * br
    return cr, ci


def energy(x):
    """sum of squared magnitudes"""
    return float(np.sum(np.abs(np.asarray(x, dtype=complex)) ** 2))
