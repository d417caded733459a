import sys, random
from typing import Any, Optional
from .algebra import MonoType, Render
from .syntax import ValueExpression

class TooManyIssues(Exception):
	pass

#########################
# The things that can go wrong while inferring a type.
# Each carries the expression at which it was noticed.

class InferenceError(Exception):
	gripe: str
	at: Optional[ValueExpression]
	def describe(self) -> str: raise NotImplementedError(type(self))

class Undefined(InferenceError):
	gripe = "I don't see what %r refers to."
	def __init__(self, name:str, at:ValueExpression=None):
		super().__init__(name)
		self.name, self.at = name, at
	def describe(self): return self.gripe % self.name

class ExpectedFn(InferenceError):
	gripe = "Dunno how to call something of type %s as a function."
	def __init__(self, typ:MonoType, at:ValueExpression=None):
		super().__init__(typ)
		self.typ, self.at = typ, at
	def describe(self): return self.gripe % self.typ.visit(Render())

class Unification(InferenceError):
	gripe = "Cannot make %s and %s agree."
	def __init__(self, prior:MonoType, term:MonoType, at:ValueExpression=None):
		super().__init__(prior, term)
		self.prior, self.term, self.at = prior, term, at
	def describe(self):
		delta = Render()
		return self.gripe % (self.prior.visit(delta), self.term.visit(delta))

class Incompatible(Unification):
	gripe = "This tries to be both %s and also %s, which cannot happen."

class RecursiveType(Unification):
	gripe = "This tries to equate %s with %s which contains it, but a type cannot be part of itself."

#########################

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott", 'Jeepers', 'Nuts', 'Rats',
	]
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Pic:
	""" One issue, formatted for a human. """
	def __init__(self, intro:str, lines:list[str], footer=(), cause:InferenceError=None):
		self._intro, self._lines, self._footer = intro, lines, footer
		self.cause = cause
	def as_text(self):
		return '\n'.join([self._intro, *("    "+line for line in self._lines), *self._footer])

class Report:
	""" Collects the issues from one or more inference passes. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self): return tuple(self._issues)
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the inference engine calls:
	def failed_inference(self, root:ValueExpression, ex:InferenceError):
		problem = ["in:  %s" % (root,)]
		if ex.at is not None and ex.at != root:
			problem.append("at:  %s" % (ex.at,))
		self.issue(Pic(ex.describe(), problem, cause=ex))

	def bound(self, name:str, scheme):
		self.info("%s : %r" % (name, scheme))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
