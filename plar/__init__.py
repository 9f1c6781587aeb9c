"""PLAR credit-reconciliation engine.

Credits prior training time against a syllabus for a single in-memory
editing session.
"""

from plar.core.logger import setup_logger

__version__ = "0.1.0"

__all__ = ["__version__", "setup_logger"]
