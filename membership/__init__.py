"""
Membership platform - subscription-gated access control.

Events, courses, and the services directory are gated by a FREE/PREMIUM
subscription. The `membership.access` package decides who sees what.
"""

__version__ = "0.1.0"
