"""Interactive widgets.

This package is split into submodules:
- base: capability interfaces shared by all widgets
- select: single-choice selection with filtering and pagination
- input: free-text line entry
"""

from .base import Prompt, PromptAgainer, WantsStdio
from .input import Input, InputTemplateData, input_question_template
from .select import Select, SelectTemplateData, select_question_template

__all__ = [
    "Prompt",
    "PromptAgainer",
    "WantsStdio",
    "Input",
    "InputTemplateData",
    "input_question_template",
    "Select",
    "SelectTemplateData",
    "select_question_template",
]
