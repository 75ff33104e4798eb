"""Loading campaign snapshots from JSON."""

from .loader import load_campaigns, parse_campaigns

__all__ = ["load_campaigns", "parse_campaigns"]
