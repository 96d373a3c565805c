import numpy as np

from .bits import bit_reverse_permute, is_power_of_two
from .errors import InvalidLengthError


def hadamard(x) -> np.ndarray:
	"""Fast Walsh-Hadamard Transform in Hadamard (natural, dyadic) order.

	Returns a new array with the transform (unnormalized); the input is not
	modified. The dtype of an ndarray input is kept, and its integer overflow
	follows numpy's fixed-width semantics. A list or tuple of Python ints is
	held in an object array, as are Fraction values, so both stay exact.

	Raises InvalidLengthError if len(x) is not a power of two.
	"""
	a = _working_copy(x)
	_hadamard_inplace(a)
	return a


def sequency(x) -> np.ndarray:
	"""Fast Walsh Transform in sequency (Manz) order.

	Coefficient k corresponds to the Walsh function with k sign changes.
	Same input handling as hadamard().
	"""
	a = _working_copy(x)
	_sequency_inplace(a)
	return a


_ORDERINGS = {
	"hadamard": hadamard,
	"natural": hadamard,
	"dyadic": hadamard,
	"sequency": sequency,
	"walsh": sequency,
}


def fwht(x, ordering: str = "hadamard") -> np.ndarray:
	"""Dispatch to hadamard() or sequency() by ordering name."""
	try:
		transform = _ORDERINGS[ordering.lower()]
	except (KeyError, AttributeError):
		raise ValueError(f"Unknown ordering {ordering!r}, expected one of {sorted(_ORDERINGS)}") from None
	return transform(x)


def scale(x) -> np.ndarray:
	"""Divide every element by len(x), as float64.

	Applying the same transform twice multiplies by n, so
	scale(t(t(x))) recovers x. Any length > 0 is accepted.
	"""
	a = np.asarray(x, dtype=np.float64)
	if a.ndim != 1:
		raise ValueError("Input must be 1D array")
	n = a.shape[0]
	if n == 0:
		raise InvalidLengthError(n, "Cannot scale an empty sequence")
	return a / n


def _working_copy(x) -> np.ndarray:
	if isinstance(x, (list, tuple)) and all(isinstance(v, int) for v in x):
		# Python ints never overflow, keep them as objects
		a = np.array(x, dtype=object)
	else:
		a = np.array(x, copy=True)
	if a.ndim != 1:
		raise ValueError("Input must be 1D array")
	if not is_power_of_two(a.shape[0]):
		raise InvalidLengthError(a.shape[0])
	return a


def _hadamard_inplace(a: np.ndarray) -> None:
	n = a.shape[0]
	lag = 1
	while lag < n:
		offset = lag * 2
		for i in range(0, n, offset):
			left = a[i:i + lag]
			right = a[i + lag:i + offset]
			s, d = left + right, left - right
			a[i:i + lag] = s
			a[i + lag:i + offset] = d
		lag = offset


def _sequency_inplace(a: np.ndarray) -> None:
	n = a.shape[0]
	bit_reverse_permute(a)
	offset = n
	while offset > 1:
		lag = offset >> 1
		for group, i in enumerate(range(0, n, offset)):
			left = a[i:i + lag]
			right = a[i + lag:i + offset]
			s, d = left + right, left - right
			# odd groups swap sum and difference
			if group & 1:
				s, d = d, s
			a[i:i + lag] = s
			a[i + lag:i + offset] = d
		offset = lag
