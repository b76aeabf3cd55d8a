"""Lead-in scanning and payload boundary resolution.

Both are pure query functions over the document text.
"""

from .boundary import resolve_boundary
from .lead_in import LEAD_IN_RE, find_lead_in

__all__ = ["LEAD_IN_RE", "find_lead_in", "resolve_boundary"]
