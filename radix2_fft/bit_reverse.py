#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import numpy as np

from radix2_fft.complex_ops import check_length


def reverse_bits(num, log2n):
    """
    reverse the log2n lowest bits of num (i.e. 100 for 001)

    Parameters
    ----------
    num : int
        index to reverse
    log2n : int
        nr bits of vector index (e.g. 4 for len(x)=16)

    Returns
    -------
    result : int
        bit reversed index

    """
    result = 0
    for _ in range(log2n):
        result = (result << 1) | (num & 1)
        num >>= 1
    return result


def bit_reverse(x):
    """
    index bit reverse a sequence in place

    Each pair is swapped once, from the lower index. Palindromic indices stay where they are.

    Parameters
    ----------
    x : mutable sequence
        complex input, length has to be a power of two

    Returns
    -------
    x : mutable sequence
        the same sequence, in bit reversed order

    """
    log2n = check_length(len(x))
    for i in range(len(x)):
        j = reverse_bits(i, log2n)
        if i < j:
            x[i], x[j] = x[j], x[i]
    return x


def bit_reverse_indices(n):
    """bit reversal permutation of range(n) as an index array"""
    log2n = check_length(n)
    return np.array([reverse_bits(i, log2n) for i in range(n)], dtype=np.intp)
