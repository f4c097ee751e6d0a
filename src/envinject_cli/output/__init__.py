"""Result models and reporting for injection runs."""

from .models import FileReplacement, InjectionResult, TokenOutcome, TokenStatus
from .reporter import ConsoleReporter, InjectionReporter

__all__ = [
    'FileReplacement',
    'InjectionResult',
    'TokenOutcome',
    'TokenStatus',
    'ConsoleReporter',
    'InjectionReporter',
]
