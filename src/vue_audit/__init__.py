"""Rule-based linter and auto-fixer for Vue single-file components."""

__all__ = [
    "__version__",
    "analyze",
    "fix",
    "VueAnalyzer",
    "VueFixer",
    "RuleOptions",
    "load_options",
    "Issue",
    "quality_score",
    "find_new_issues",
]
__version__ = "0.1.0"

# Engine entrypoints
from vue_audit.core.config import RuleOptions, load_options  # noqa: E402, F401
from vue_audit.core.runner import (  # noqa: E402, F401
    VueAnalyzer,
    analyze,
    find_new_issues,
    fix,
)
from vue_audit.fixers import VueFixer  # noqa: E402, F401
from vue_audit.model.issue import Issue  # noqa: E402, F401
from vue_audit.policy.quality import quality_score  # noqa: E402, F401
