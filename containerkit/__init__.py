"""Container utilities: element lookup, bounded spans and an iterable stack."""

__version__ = "0.1.0"
__all__ = ["easyfind", "span", "mutant_stack"]