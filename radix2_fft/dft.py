# naive O(n^2) dft, reference for the fast transforms. works for any length.

import numpy as np


def dft_matrix(n, ifft=False):
    sign = 1 if ifft else -1
    i, j = np.ogrid[0:n, 0:n]
    return np.exp((i * j) * (sign * 2j * np.pi / n))


def dft(x):
    x = np.asarray(x, dtype=complex)
    return dft_matrix(len(x)) @ x


def idft(x):
    x = np.asarray(x, dtype=complex)
    return dft_matrix(len(x), ifft=True) @ x / len(x)
