from .bits import is_power_of_two
from .errors import InvalidLengthError
from .fwht import fwht, hadamard, scale, sequency
from .matrix import generate_hadamard_matrix, generate_walsh_matrix

__all__ = [
	"InvalidLengthError",
	"fwht",
	"generate_hadamard_matrix",
	"generate_walsh_matrix",
	"hadamard",
	"is_power_of_two",
	"scale",
	"sequency",
]
