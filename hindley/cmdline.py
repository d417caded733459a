"""
Type inference for a tiny let-polymorphic expression language.

{0}

For example:

    hindley identity const

will print the inferred types of those two gallery examples, or explain why not.

    hindley -l

will list the gallery, and

    hindley -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="hindley",
	description="Infer types for a gallery of example expressions.",
)
parser.add_argument("example", nargs="*", help="names from the gallery; all of them if none.")
parser.add_argument('-l', "--list", action="store_true", help="List the gallery and stop.")
parser.add_argument('-m', "--monomorphic", action="store_true", help="Do not generalize let-bound parameters.")
parser.add_argument('-o', "--occurs-check", action="store_true", help="Refuse to build infinite types.")
parser.add_argument('-v', "--verbose", action="count", help="Trace each let-binding as it is made.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .gallery import EXAMPLES
	from .type_inference import Options, infer_types
	from .algebra import Render
	if args.list:
		for name, expr in EXAMPLES.items():
			print("%-22s %s" % (name, expr))
		return
	unknown = [name for name in args.example if name not in EXAMPLES]
	if unknown:
		parser.error("not in the gallery: " + ", ".join(unknown))
	options = Options(generalize_let=not args.monomorphic, occurs_check=args.occurs_check)
	report = Report(verbose=args.verbose, max_issues=len(EXAMPLES)+1)
	try:
		for name in args.example or EXAMPLES:
			expr = EXAMPLES[name]
			typ = infer_types(expr, report, options)
			if typ is not None:
				print("%s : %s" % (expr, typ.visit(Render())))
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
