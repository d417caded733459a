"""
Solving one equation between types at a time.

The unifier (gamma) maps variable numbers to types. It lives only as long as
one call-site takes to resolve, and grows as the equation is taken apart.
Bindings are made without first consulting what gamma already says about
either side, so a later binding for the same variable replaces an earlier one.
That makes the order of solving part of the result: depth-first, parameter
before result.
"""
from .algebra import MonoType, TypeVariable, Arrow
from .diagnostics import Incompatible, RecursiveType

def unify(a: MonoType, b: MonoType, gamma: dict, stem=None, occurs_check=False) -> dict:
	"""
	Extend gamma so that a and b come out the same after substitution.
	A problem with the parameter is reported before any problem with the result.
	Raises some flavor of Unification.
	"""
	def bind(v: TypeVariable, term: MonoType):
		# A variable is free to stand for anything, unless asked to be careful.
		if occurs_check and term.mentions(v):
			raise RecursiveType(v, term, stem)
		gamma[v.nr] = term
	def U(x, y):
		if type(x) is TypeVariable:
			if x != y:
				bind(x, y)
		elif type(y) is TypeVariable:
			bind(y, x)
		elif type(x) is Arrow and type(y) is Arrow:
			U(x.arg, y.arg)
			U(x.res, y.res)
		else:
			raise Incompatible(x, y, stem)
	U(a, b)
	return gamma

def solve(a: MonoType, b: MonoType, stem=None, occurs_check=False) -> dict:
	""" Unify into a brand-new unifier and hand it back. """
	return unify(a, b, {}, stem, occurs_check)
