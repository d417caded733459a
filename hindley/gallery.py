"""
A few expressions worth looking at, ready-made since there is no parser.
Some type-check. Some are meant not to.
"""
from .syntax import Id, Fn, Call, let

x, y, f, g, a = map(Id, "xyfga")
IDENTITY = Fn("x", x)

EXAMPLES = {
	"identity": IDENTITY,
	"let_identity": let("id", [], IDENTITY, Id("id")),
	"identity_identity": Fn("y", let("id", [], IDENTITY, Call(Id("id"), Id("id")))),
	"identity_application": Fn("y", let("id", [], IDENTITY, Call(Id("id"), y))),
	"scope_leak": Fn("y", let("id", [], IDENTITY, Call(Id("id"), x))),
	"unbound": Id("xyz"),
	"self_application": Fn("x", Call(x, x)),
	"compose": Fn("f", Fn("g", Fn("x", Call(f, Call(g, x))))),
	"const": let("const", "ab", a, Id("const")),
	"poly_self_apply": let("f", "a", a, Call(Id("f"), Id("f"))),
}
