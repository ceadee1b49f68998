"""
godiagram - orientation and board geometry for Go diagrams.
"""
__version__ = "0.1.0"
