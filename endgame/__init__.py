"""A top-down arcade shooter on pygame: menus, three levels and the end screens."""

__version__ = "0.1.0"
__all__ = ["__version__"]