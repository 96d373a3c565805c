import operator

import numpy as np


def is_power_of_two(n) -> bool:
	"""Return True iff integer n is 2**k for some k >= 0. O(1)."""
	n = operator.index(n)
	if n <= 0:
		return False
	return (n & (n - 1)) == 0


def bit_reverse_permute(a: np.ndarray) -> None:
	"""Reorder a 1D array in place so that a[i] <-> a[rev(i)].

	rev(i) reverses the log2(n) low bits of i. Length must be a power of two.
	"""
	n = a.shape[0]
	if n <= 2:
		# rev(i) == i for n in {1, 2}
		return
	j = 0
	for i in range(n - 2):
		if i < j:
			a[[i, j]] = a[[j, i]]
		k = n >> 1
		while k <= j:
			j -= k
			k >>= 1
		j += k
