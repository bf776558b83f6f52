"""Registry of node forms for the Rinha evaluator.

Maps each Term class to the handler that evaluates it. The evaluator consults
this table to dispatch on the kind of node it is given.
"""

from rinha.syntax.terms import (
    IntLiteral, StrLiteral, BoolLiteral, Print, Binary, If, Let, Var, Function, Call,
)
from rinha.evaluation.node_forms.literal_forms import int_form, str_form, bool_form
from rinha.evaluation.node_forms.print_form import print_form
from rinha.evaluation.node_forms.binary_form import binary_form
from rinha.evaluation.node_forms.if_form import if_form
from rinha.evaluation.node_forms.let_form import let_form
from rinha.evaluation.node_forms.var_form import var_form
from rinha.evaluation.node_forms.function_form import function_form
from rinha.evaluation.node_forms.call_form import call_form

NODE_FORMS = {
    IntLiteral: int_form,
    StrLiteral: str_form,
    BoolLiteral: bool_form,
    Print: print_form,
    Binary: binary_form,
    If: if_form,
    Let: let_form,
    Var: var_form,
    Function: function_form,
    Call: call_form,
}
