"""Registry of the control forms every Crisp environment needs.

Maps names to native handlers that choose for themselves which of their
(unevaluated) arguments to evaluate, and when. ``register`` in
``crisp.builtin.env_builtin`` installs them in an Environment's function table.
"""

from crisp.evaluation.special_forms.progn_form import progn_form
from crisp.evaluation.special_forms.if_form import if_form, when_form
from crisp.evaluation.special_forms.while_form import while_form
from crisp.evaluation.special_forms.set_form import set_form, let_form
from crisp.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    "progn": progn_form,
    "if": if_form,
    "when": when_form,
    "while": while_form,
    "set": set_form,
    "let": let_form,
    "defun": defun_form,
}
