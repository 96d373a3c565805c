import argparse
import numpy as np
from .errors import InvalidLengthError
from .fwht import fwht, scale


def _format(y: np.ndarray) -> str:
	return " ".join(str(v) for v in y.tolist())


def main(argv=None):
	p = argparse.ArgumentParser(prog="fwt", description="Fast Walsh Transform")
	p.add_argument("values", nargs="*", type=float, help="Sequence to transform (length must be a power of two)")
	p.add_argument("--ordering", type=str, default="hadamard", choices=["hadamard", "sequency"], help="Coefficient ordering")
	p.add_argument("--inverse", action="store_true", help="Scale the transform by 1/N (inverts a transformed input)")
	p.add_argument("--check", action="store_true", help="Report round-trip error of scale(T(T(x))) instead of the transform")

	# Random input when no values are given
	p.add_argument("--size", type=int, default=8, help="Random sequence size (power of two)")
	p.add_argument("--seed", type=int, default=123)
	args = p.parse_args(argv)

	if args.values:
		x = np.array(args.values, dtype=np.float64)
		if np.all(np.isfinite(x)) and np.all(x == np.round(x)):
			# Python ints stay exact past the int64 range
			x = [int(v) for v in args.values]
	else:
		rng = np.random.default_rng(args.seed)
		x = rng.standard_normal(max(args.size, 0))

	try:
		y = fwht(x, args.ordering)
	except InvalidLengthError as e:
		p.error(str(e))

	if args.check:
		z = scale(fwht(y, args.ordering))
		rmse = float(np.sqrt(np.mean((z - np.asarray(x, dtype=np.float64)) ** 2)))
		print(f"ordering={args.ordering} N={len(x)}")
		print(f"RMSE={rmse:.6g}")
	elif args.inverse:
		print(_format(scale(y)))
	else:
		print(_format(y))


if __name__ == "__main__":
	main()
