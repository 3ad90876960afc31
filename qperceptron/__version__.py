"""
Version information for the package.
"""

__version__ = "0.1.0"
__author__ = "nkurangafredrick146-code"
__author_email__ = "frextech@example.com"
__license__ = "MIT"
__description__ = "A two-qubit state-vector simulator and quantum perceptron evaluator"
__url__ = "https://github.com/nkurangafredrick146-code/qperceptron"

__all__ = [
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__description__",
    "__url__",
]
