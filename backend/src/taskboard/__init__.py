"""
Taskboard Backend - Personal Task Management Service

REST backend for creating, filtering and annotating to-do items, plus a
small async client package for consuming it.

Version: 1.0.0
"""

__version__ = "1.0.0"
