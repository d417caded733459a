"""
The lexical context of one inference pass.

It owns the supply of fresh type variables and a stack of scopes,
each scope mapping names to schemes. The counter lives here rather
than in some global, so separate passes number their variables
independently and identically.
"""
from contextlib import contextmanager
from .algebra import MonoType, TypeVariable, Scheme
from .diagnostics import Undefined

class Context:
	_scopes : list[dict[str, Scheme]]

	def __init__(self):
		self._counter = 0
		self._scopes = []

	def __repr__(self):
		return "<Context: %d vars, %d scopes>" % (self._counter, len(self._scopes))

	@property
	def depth(self) -> int: return len(self._scopes)

	def fresh(self) -> TypeVariable:
		nr = self._counter
		self._counter += 1
		return TypeVariable(nr)

	def enter(self):
		self._scopes.append({})

	def exit(self):
		assert self._scopes, "exit() without a matching enter()"
		self._scopes.pop()

	@contextmanager
	def scope(self):
		""" Paired enter/exit. The exit happens however the block is left. """
		self.enter()
		try:
			yield self
		finally:
			self.exit()

	def insert(self, name:str, scheme:Scheme):
		assert self._scopes, "insert(%r) with no scope open" % name
		assert isinstance(scheme, Scheme), scheme
		self._scopes[-1][name] = scheme

	def find(self, name:str) -> Scheme:
		for scope in reversed(self._scopes):
			if name in scope:
				return scope[name]
		raise Undefined(name)

	def lookup(self, name:str) -> MonoType:
		""" The innermost binding for name, instantiated afresh. """
		return self.find(name).instantiate(self)
