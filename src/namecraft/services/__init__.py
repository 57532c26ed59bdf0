"""I/O services for namecraft.

- storage: definition and answer memory files
- transport: interactive prompt channel
"""

from .storage import AnswerMemoryLoad, load_answers, load_definition, save_answers
from .transport import ConsoleTransport, PromptTransport

__all__ = [
    "AnswerMemoryLoad",
    "ConsoleTransport",
    "PromptTransport",
    "load_answers",
    "load_definition",
    "save_answers",
]
