"""
Main entry point for the Qualitative Text Dashboard.
This file imports the modularized app from the coding_dashboard package.

Run with:
    streamlit run main_app.py
"""

from coding_dashboard.app_core import main


if __name__ == "__main__":
    main()
