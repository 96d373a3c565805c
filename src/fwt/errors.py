class InvalidLengthError(ValueError):
	"""Raised when a sequence length cannot be transformed.

	Transforms need a power-of-two length; scaling needs a non-empty input.
	"""

	def __init__(self, length: int, message: str = "Length must be power of two and > 0"):
		self.length = length
		super().__init__(f"{message} (got {length})")
