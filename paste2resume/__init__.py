"""
paste2resume - turn pasted profile text into a resume PDF.
"""

__version__ = "1.0.0"
