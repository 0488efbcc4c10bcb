"""
User account service - registration and login over a small RPC surface,
backed by MongoDB.
"""

__version__ = "0.1.0"
