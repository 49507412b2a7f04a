"""
shiftinclude - file inclusion with line selection and indentation shifting

Expands ``{{#include path[:selector]}}`` directives in text blocks, used as an
mdBook preprocessor or standalone.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
