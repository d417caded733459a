"""
The four forms of expression the inference engine understands.
Some front-end builds these bottom-up; the engine only ever reads them.
Identifiers are plain strings, compared by value.
"""
from typing import NamedTuple, Union


class Id(NamedTuple):
	name: str
	def __str__(self): return self.name


class Fn(NamedTuple):
	param: str
	body: "ValueExpression"
	def __str__(self): return "(\\%s -> %s)" % (self.param, self.body)


class Let(NamedTuple):
	""" The bound name is not in scope within its own value. No recursion. """
	name: str
	params: tuple[str, ...]
	value: "ValueExpression"
	body: "ValueExpression"
	def __str__(self):
		head = " ".join((self.name, *self.params))
		return "let %s = %s in %s" % (head, self.value, self.body)


class Call(NamedTuple):
	callee: "ValueExpression"
	argument: "ValueExpression"
	def __str__(self): return "(%s %s)" % (self.callee, self.argument)


ValueExpression = Union[Id, Fn, Let, Call]


def let(name:str, params, value:ValueExpression, body:ValueExpression) -> Let:
	""" Convenience: accepts any iterable of parameter names. """
	return Let(name, tuple(params), value, body)

def call(callee:ValueExpression, *arguments:ValueExpression) -> ValueExpression:
	""" Curried application: call(f, a, b) == Call(Call(f, a), b) """
	assert arguments
	for a in arguments:
		callee = Call(callee, a)
	return callee
