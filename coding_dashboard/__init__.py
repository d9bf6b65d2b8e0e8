"""
Qualitative text analysis dashboard.
This package contains the modularized steps of the Streamlit app.
"""

from coding_dashboard.app_core import DashboardApp

__all__ = ["DashboardApp"]
