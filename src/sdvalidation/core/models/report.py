"""
Validation report records.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ValidationError:
    """
    A single schema conformance problem found in a document.

    This is a plain record, not an exception: the document validator collects
    these in traversal order and returns them.

    Attributes:
        path (str): Slash-delimited location of the offending node, with
            schema.org URL prefixes removed (``/`` for the document root)
        message (str): Human readable description of the problem
    """

    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        """Convert the record to a JSON-serializable dictionary."""
        return {"path": self.path, "message": self.message}
