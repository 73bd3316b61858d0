"""
Browser surface for Exam Creator (Streamlit app and browser-side actions).
"""
