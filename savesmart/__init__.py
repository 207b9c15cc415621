"""
SaveSmart - Onboarding Package

The budget-profile onboarding form of SaveSmart: income sources, expense
categories and savings goals, validated as they are typed.

DESIGN PRINCIPLES:
1. Validate on every change, show errors inline
2. Bad input is a value, never an exception
3. The parent owns the record; inputs only report partial updates
4. Drafts survive a reload
"""

__version__ = "1.0.0"
__author__ = "SaveSmart Team"
