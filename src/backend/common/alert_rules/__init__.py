"""Source-agnostic alert rules for supplier scorecards.

This package intentionally contains only domain logic:
- Rule inputs are normalized SupplierRecords + a recipient + an explicit "today".
- No scraping, templating of dashboards, or mail delivery lives here.
"""

from .config import AlertRulesConfig
from .context import AlertContext
from .models import AlertKind, AlertRunReport, Notification, Priority
from .runner import AlertRunner

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
