"""
Image Viewer Shell Services Package.

This package contains service layer modules that wrap core logic for the
Flask routes.

ARCHITECTURE RULE:
- Services may ONLY import from core/* modules
"""

from web.services import viewer_service

__all__ = [
    "viewer_service",
]
