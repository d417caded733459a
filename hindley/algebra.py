"""
The term language of types, and the schemes built over it.

Design Note:
-------------
There are no base types. A type is either a variable or an arrow between types.
Variables are numbered by whoever mints them (see stacking.Context.fresh);
nothing here keeps a counter, so separate inference passes cannot interfere.
"""
from typing import Iterable

#########################

class MonoType:
	def visit(self, visitor:"TypeVisitor"): raise NotImplementedError(type(self))
	def mentions(self, v:"TypeVariable") -> bool: raise NotImplementedError(type(self))
	def substitute(self, gamma:dict) -> "MonoType":
		"""
		Replace each variable mentioned in gamma by its image.
		The image goes in as-is: it is not itself rewritten again.
		"""
		return self.visit(Rewrite(gamma)) if gamma else self

class TypeVariable(MonoType):
	def __init__(self, nr:int):
		assert isinstance(nr, int), type(nr)
		self.nr = nr
	def __repr__(self): return "<%s>" % self.nr
	def __eq__(self, other): return type(other) is TypeVariable and other.nr == self.nr
	def __hash__(self): return hash((TypeVariable, self.nr))
	def visit(self, visitor): return visitor.on_variable(self)
	def mentions(self, v): return v.nr == self.nr

class Arrow(MonoType):
	def __init__(self, arg:MonoType, res:MonoType): self.arg, self.res = arg, res
	def __repr__(self):
		if isinstance(self.arg, Arrow): return "(%r) -> %r" % (self.arg, self.res)
		return "%r -> %r" % (self.arg, self.res)
	def __eq__(self, other): return type(other) is Arrow and other.arg == self.arg and other.res == self.res
	def __hash__(self): return hash((Arrow, self.arg, self.res))
	def visit(self, visitor): return visitor.on_arrow(self)
	def mentions(self, v):
		return self.arg.mentions(v) or self.res.mentions(v)

def curry(args:Iterable[MonoType], res:MonoType) -> MonoType:
	""" curry([a, b], c) is a -> b -> c; with no args, just c. """
	for a in reversed(tuple(args)):
		res = Arrow(a, res)
	return res

#########################

class Scheme:
	"""
	A type together with the variables (by number) which are universally
	quantified in it. Once made, a scheme does not change: instantiation
	builds a new type and leaves the scheme alone.
	"""
	__slots__ = ("typ", "generic")
	def __init__(self, typ:MonoType, generic:Iterable[int]=()):
		self.typ = typ
		self.generic = frozenset(generic)
	def __repr__(self):
		if not self.generic: return repr(self.typ)
		return "forall %s. %r" % (" ".join("<%d>"%nr for nr in sorted(self.generic)), self.typ)
	def __eq__(self, other):
		return isinstance(other, Scheme) and (self.typ, self.generic) == (other.typ, other.generic)
	def __hash__(self): return hash((self.typ, self.generic))
	def instantiate(self, supply) -> MonoType:
		"""
		Rename each quantified variable to a brand-new one from the supply,
		which is anything with a `fresh()` method (normally a Context).
		Minting goes in ascending order, so numbering is deterministic.
		"""
		if not self.generic:
			return self.typ
		gamma = {nr: supply.fresh() for nr in sorted(self.generic)}
		return self.typ.substitute(gamma)

def monomorphic(typ:MonoType) -> Scheme:
	return Scheme(typ)

#########################

class TypeVisitor:
	def on_variable(self, v:TypeVariable): pass
	def on_arrow(self, a:Arrow): pass

def _name_variable(n):
	name = ""
	while n:
		n, remainder = divmod(n-1, 26)
		name = chr(97+remainder) + name
	return name

class Render(TypeVisitor):
	""" Return a string representation of the term, naming variables in order of appearance. """
	def __init__(self):
		self.delta = {}
	def on_variable(self, v: TypeVariable):
		if v.nr not in self.delta:
			self.delta[v.nr] = "?%s"%_name_variable(len(self.delta)+1)
		return self.delta[v.nr]
	def on_arrow(self, a: Arrow):
		pattern = "(%s) -> %s" if isinstance(a.arg, Arrow) else "%s -> %s"
		return pattern % (a.arg.visit(self), a.res.visit(self))

class Rewrite(TypeVisitor):
	""" One pass of substitution. Gamma maps variable numbers to types. """
	def __init__(self, gamma:dict):
		self.gamma = gamma
	def on_variable(self, v: TypeVariable):
		return self.gamma.get(v.nr, v)
	def on_arrow(self, a: Arrow):
		return Arrow(a.arg.visit(self), a.res.visit(self))
