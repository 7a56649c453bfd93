"""
Utils Package
-----------
Contains utility classes for text processing, rule tables and logging setup.
"""

from .text_processing import TextProcessor
from .pattern_registry import PatternRegistry, RuleSet, RULES_VERSION, default_rules
from .logging_config import configure_logging

__all__ = [
    'TextProcessor',
    'PatternRegistry',
    'RuleSet',
    'RULES_VERSION',
    'default_rules',
    'configure_logging'
]
