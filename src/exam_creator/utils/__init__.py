"""
Utility helpers for Exam Creator.
"""
