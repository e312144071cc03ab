"""Registry of special forms for the forklisp evaluator.

Maps head atoms to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary function
application. Every handler has the signature

    handler(tail, env, arguments, evaluate_fn) -> value | TailCall

where `tail` is the unevaluated operand list. Handlers return a TailCall
for their tail position instead of evaluating it.
"""

from forklisp.types.atom import Atom
from forklisp.evaluation.special_forms.quote_form import quote_form
from forklisp.evaluation.special_forms.list_form import list_form
from forklisp.evaluation.special_forms.prog2_form import prog2_form
from forklisp.evaluation.special_forms.if_form import if_form
from forklisp.evaluation.special_forms.lambda_form import lambda_form
from forklisp.evaluation.special_forms.letrec_form import letrec_form

SPECIAL_FORMS = {
    Atom("quote"): quote_form,
    Atom("list"): list_form,
    Atom("prog2"): prog2_form,
    Atom("if"): if_form,
    Atom("lambda"): lambda_form,
    Atom("letrec"): letrec_form,
}
