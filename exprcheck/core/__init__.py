"""exprcheck core: shared types, message catalogs, and configuration.

    from exprcheck.core import Diagnostic, VerdictReport, get_config
"""

from exprcheck.core.config import ExprCheckConfig, get_config, set_config
from exprcheck.core.messages import available_languages, get_message
from exprcheck.core.types import (
    Diagnostic,
    DiagnosticKind,
    ParenDirection,
    Step,
    VerdictReport,
)

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "ExprCheckConfig",
    "ParenDirection",
    "Step",
    "VerdictReport",
    "available_languages",
    "get_config",
    "get_message",
    "set_config",
]
