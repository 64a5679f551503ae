"""
Interactive pygame editor built on gridpath.core.
"""
