from typing import NamedTuple, Optional

from boozetools.support.foundation import Visitor
from . import syntax
from .algebra import MonoType, Arrow, Scheme, Render, curry, monomorphic
from .diagnostics import Report, InferenceError, Undefined, ExpectedFn
from .stacking import Context
from .unification import solve

class Options(NamedTuple):
	generalize_let: bool = True  # Off means every let-binding is monomorphic.
	occurs_check: bool = False

def infer(expr:syntax.ValueExpression, options:Options=Options(), report:Report=None) -> MonoType:
	""" Type one expression in a brand-new context. The first error raises. """
	return DeductionEngine(Context(), options, report).visit(expr)

def infer_types(expr:syntax.ValueExpression, report:Report, options:Options=Options()) -> Optional[MonoType]:
	""" Same, but the failure goes in the report and you get None. """
	try:
		typ = infer(expr, options, report)
	except InferenceError as ex:
		report.failed_inference(expr, ex)
		return None
	report.info("%s : %s" % (expr, typ.visit(Render())))
	return typ

class DeductionEngine(Visitor):
	"""
	Visiting an expression yields its type.

	Scopes are only ever opened through `Context.scope()`, so whatever
	a failing sub-expression raises, the stack unwinds back to how it was.
	"""
	def __init__(self, context:Context, options:Options=Options(), report:Report=None):
		self._context = context
		self._options = options
		self._report = report or Report()

	def visit_Id(self, expr:syntax.Id):
		try:
			return self._context.lookup(expr.name)
		except Undefined as ex:
			ex.at = expr
			raise

	def visit_Fn(self, expr:syntax.Fn):
		# Parameters are never generalized; only let-bound functions are.
		with self._context.scope() as ctx:
			param = ctx.fresh()
			ctx.insert(expr.param, monomorphic(param))
			res = self.visit(expr.body)
		return Arrow(param, res)

	def visit_Let(self, expr:syntax.Let):
		"""
		This is where let-polymorphism comes from, such as it is:
		only the variables made for the explicit parameters get quantified.
		"""
		ctx = self._context
		with ctx.scope():
			params = []
			for name in expr.params:
				v = ctx.fresh()
				ctx.insert(name, monomorphic(v))
				params.append(v)
			value = self.visit(expr.value)
		generic = [v.nr for v in params] if self._options.generalize_let else ()
		scheme = Scheme(curry(params, value), generic)
		self._report.bound(expr.name, scheme)
		with ctx.scope():
			ctx.insert(expr.name, scheme)
			return self.visit(expr.body)

	def visit_Call(self, expr:syntax.Call):
		fn_type = self.visit(expr.callee)
		if not isinstance(fn_type, Arrow):
			raise ExpectedFn(fn_type, expr)
		arg_type = self.visit(expr.argument)
		gamma = solve(fn_type.arg, arg_type, expr, self._options.occurs_check)
		return fn_type.res.substitute(gamma)
