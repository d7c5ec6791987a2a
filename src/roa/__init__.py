"""ROA

Hierarchical resource links for REST-style APIs. Records derive a canonical
link from their parent chain, expose their own and ancestor links, and run
access checks that cascade up the same chain.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
