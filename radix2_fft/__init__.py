"""radix2 Cooley-Tukey fft: iterative, recursive and interleaved vector backends"""

from radix2_fft.complex_ops import InvalidLengthError
from radix2_fft.bit_reverse import bit_reverse, reverse_bits
from radix2_fft.fft_iterative import fft_iterative, ifft_iterative
from radix2_fft.fft_recursive import fft_recursive, ifft_recursive
from radix2_fft.fft_vector import fft_vector, vector_fft
from radix2_fft.signals import generate_test_signal
