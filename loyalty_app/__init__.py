"""
Loyalty Cards - client and loyalty point management
"""
__version__ = "1.0.0"
