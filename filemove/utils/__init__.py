"""
Utility Module

Logging setup, path normalization and filesystem helpers.

Author: FileMove Project
License: MIT
"""
