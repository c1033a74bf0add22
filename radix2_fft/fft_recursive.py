#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# recursive radix2 fft, used to cross check the iterative one


from radix2_fft.complex_ops import check_sequence, twiddle


def _fft_rec(x, ifft):
    """returns the transform of list x as a new list"""
    n = len(x)
    if n <= 1:
        return list(x)

    # even and odd halves only live inside this call
    even = _fft_rec(x[0::2], ifft)
    odd = _fft_rec(x[1::2], ifft)

    half = n // 2
    out = [0j] * n
    for k in range(half):
        t = twiddle(k, n, ifft) * odd[k]
        out[k] = even[k] + t
        out[k + half] = even[k] - t
    return out


def fft_recursive(x, ifft=False):
    """
    divide and conquer radix2 fft

    Splits into even and odd samples, transforms both halves recursively and
    recombines them with twiddle weighted sums. No bit reversal needed.
    The result is built in a separate buffer and copied into x at the end,
    a failing call leaves x untouched.

    Parameters
    ----------
    x : mutable sequence
        complex input vector. has to be a power of two long.
    ifft : bool, optional
        inverse transform (scaled by 1/n). The default is False.

    Returns
    -------
    x : mutable sequence
        the same sequence, overwritten with its DFT

    """
    n = len(x)
    check_sequence(x)
    out = _fft_rec([x[i] for i in range(n)], ifft)
    if ifft:
        out = [v / n for v in out]

    for i in range(n):
        x[i] = out[i]
    return x


def ifft_recursive(x):
    return fft_recursive(x, ifft=True)
