"""
Reviewflow: review-owner resolution for pull requests from CODEOWNERS files.
"""

__version__ = "0.1.0"
