#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# in place radix2 division in time fft


from radix2_fft.bit_reverse import bit_reverse
from radix2_fft.complex_ops import check_sequence, twiddle


def _bfl(u, b, w):
    """butterfly: returns u + b*w, u - b*w"""
    v = b * w
    return u + v, u - v


def fft_stage(x, length, ifft=False):
    """
    perform one radix2 stage on bit reversed data

    Parameters
    ----------
    x : mutable sequence
        complex data, overwritten in place
    length : int
        block size of this stage (2, 4, 8, ... len(x))
    ifft : bool, optional
        fft or ifft stage. The default is False.

    Returns
    -------
    None.

    """
    half = length // 2
    wlen = twiddle(1, length, ifft)  # principal twiddle of this stage
    for i in range(0, len(x), length):
        w = 1 + 0j
        for j in range(half):
            x[i + j], x[i + j + half] = _bfl(x[i + j], x[i + j + half], w)
            w *= wlen


def fft_iterative(x, ifft=False):
    """
    Cooley Tukey radix2 division in time fft, iterative and in place.

    The input is bit reversed first, then log2(n) butterfly stages with doubling
    block size are performed. Output is in natural order, bin k is frequency k.
    The forward transform is unnormalized, the inverse scales by 1/n.

    Parameters
    ----------
    x : mutable sequence
        complex input vector (list or complex numpy array). has to be a power of two long.
    ifft : bool, optional
        inverse transform. The default is False.

    Returns
    -------
    x : mutable sequence
        the same sequence, holding the DFT of the input

    """
    n = len(x)
    check_sequence(x)
    bit_reverse(x)

    length = 2
    while length <= n:
        fft_stage(x, length, ifft)
        length <<= 1

    if ifft:
        for i in range(n):
            x[i] /= n
    return x


def ifft_iterative(x):
    return fft_iterative(x, ifft=True)
