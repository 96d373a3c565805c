import numpy as np

from .bits import is_power_of_two
from .errors import InvalidLengthError


def generate_hadamard_matrix(n: int) -> np.ndarray:
	"""Dense n x n Walsh matrix in natural order, built by Kronecker powers of H2.

	Symmetric, so row i is also hadamard() of the i-th impulse.
	"""
	if not is_power_of_two(n):
		raise InvalidLengthError(n)
	h2 = np.array([[1.0, 1.0], [1.0, -1.0]])
	out = np.ones((1, 1))
	for _ in range(int(n).bit_length() - 1):
		out = np.kron(h2, out)
	return out


def sign_changes(row: np.ndarray) -> int:
	row = np.asarray(row)
	return int(np.count_nonzero(row[1:] != row[:-1]))


def generate_walsh_matrix(n: int) -> np.ndarray:
	"""Sequency-ordered Walsh matrix: Hadamard rows sorted by sign changes.

	Row k has exactly k sign changes; row i is sequency() of the i-th impulse.
	"""
	H = generate_hadamard_matrix(n)
	order = np.argsort([sign_changes(r) for r in H], kind="stable")
	return H[order]
