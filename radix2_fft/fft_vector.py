#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import numpy as np

from radix2_fft.bit_reverse import bit_reverse_indices
from radix2_fft.complex_ops import InvalidLengthError, check_length, check_sequence, cmult4


def interleave(x):
    """complex vector -> float64 buffer of 2n values, real at 2i and imag at 2i+1"""
    x = np.asarray(x, dtype=complex)
    data = np.empty(2 * len(x))
    data[0::2] = x.real
    data[1::2] = x.imag
    return data


def deinterleave(data):
    """interleaved float buffer -> complex vector"""
    data = np.asarray(data, dtype=float)
    return data[0::2] + 1j * data[1::2]


def fft_vector(data, n, ifft=False):
    """
    radix2 dit fft on interleaved real/imag storage

    Works on separate real and imag views of the buffer, like two data memories.
    Every stage computes all of its butterflies with one set of array operations.

    Parameters
    ----------
    data : float64 array
        interleaved data, 2*n long. overwritten in place.
    n : int
        fft size, has to be a power of two
    ifft : bool, optional
        inverse transform (scaled by 1/n). The default is False.

    Returns
    -------
    data : float64 array
        the same buffer, holding the interleaved DFT

    """
    check_length(n)
    if not isinstance(data, np.ndarray) or data.ndim != 1 or len(data) != 2 * n:
        raise InvalidLengthError(f'interleaved buffer has to be {2 * n} values long')
    if data.dtype != np.float64:
        raise TypeError(f'interleaved buffer has to be float64, got dtype {data.dtype}')

    xr = data[0::2]  # real mem
    xi = data[1::2]  # imag mem
    brev = bit_reverse_indices(n)
    xr[:] = xr[brev]
    xi[:] = xi[brev]

    sign = 1 if ifft else -1
    length = 2
    while length <= n:
        half = length // 2
        w = np.exp(sign * 2j * np.pi * np.arange(half) / length)  # twiddles of this stage
        ar = xr.reshape(-1, length)[:, :half]
        ai = xi.reshape(-1, length)[:, :half]
        br = xr.reshape(-1, length)[:, half:]
        bi = xi.reshape(-1, length)[:, half:]
        vr, vi = cmult4(br, bi, w.real, w.imag)
        ur, ui = ar.copy(), ai.copy()  # copy, ar/ai get overwritten first
        ar[:], ai[:] = ur + vr, ui + vi
        br[:], bi[:] = ur - vr, ui - vi
        length <<= 1

    if ifft:
        data /= n
    return data


def vector_fft(x, ifft=False):
    """
    vector backend with the same contract as fft_iterative:
    transforms the complex sequence x in place and returns it.
    """
    check_sequence(x)
    data = interleave(x)
    fft_vector(data, len(x), ifft)
    out = deinterleave(data)
    for i in range(len(x)):
        x[i] = complex(out[i])
    return x
