"""Registry of builtin forms for the zenlisp evaluator.

Maps operator keywords to handler functions. Handlers receive their operands
unevaluated, so short-circuiting forms (and, or, if) and binding forms (set)
share one calling convention with the eager ones. The evaluator consults this
table only after bound names and property access have been ruled out.
"""

from zenlisp.evaluation.special_forms.arithmetic_forms import (
    add_form,
    sub_form,
    mul_form,
    div_form,
    mod_form,
)
from zenlisp.evaluation.special_forms.comparison_forms import (
    gt_form,
    lt_form,
    gte_form,
    lte_form,
    equals_form,
    not_equals_form,
)
from zenlisp.evaluation.special_forms.logic_forms import and_form, or_form, not_form
from zenlisp.evaluation.special_forms.if_form import if_form
from zenlisp.evaluation.special_forms.list_forms import (
    list_form,
    car_form,
    cdr_form,
    concat_form,
    length_form,
)
from zenlisp.evaluation.special_forms.set_form import set_form
from zenlisp.evaluation.special_forms.print_form import print_form

SPECIAL_FORMS = {
    "+": add_form,
    "-": sub_form,
    "*": mul_form,
    "/": div_form,
    "%": mod_form,
    ">": gt_form,
    "<": lt_form,
    ">=": gte_form,
    "<=": lte_form,
    "==": equals_form,
    "!=": not_equals_form,
    "and": and_form,
    "or": or_form,
    "not": not_form,
    "if": if_form,
    "list": list_form,
    "car": car_form,
    "first": car_form,  # alias for car
    "cdr": cdr_form,
    "rest": cdr_form,  # alias for cdr
    "concat": concat_form,
    "length": length_form,
    "set": set_form,
    "print": print_form,
}
