"""
geoffrey: scaffolding for data science projects (command: geoff).
"""

__version__ = "0.1.0"
