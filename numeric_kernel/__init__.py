"""
Numeric Kernel

Fixed-point number format checks for electronic document submission:
- N(m.k) format value objects and notation parsing
- Boolean and reason-coded validation of numeric literals
- Field-level validation of whole documents
"""

__version__ = "0.1.0"
