"""Runnable examples of classic object-oriented design patterns.

Modules: calculator (simple factory), cashier (strategy), decorator,
proxy and factory_method.
"""

__version__ = "0.1.0"

__all__ = ["calculator", "cashier", "decorator", "factory_method", "proxy"]