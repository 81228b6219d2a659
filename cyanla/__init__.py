"""Visitor-side services for a company HR help desk: interview booking, FAQ, site map and navigation, assistant chat rules and history, and live-chat presentation rules."""

__version__ = "1.0.0"