"""
Validation result summary.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.models import ValidationError


@dataclass
class ValidationResult:
    """
    Container for the outcome of validating one document.

    Attributes:
        is_valid (bool): Whether the document conforms to the vocabulary
        errors (List[ValidationError]): Problems found, in traversal order
        warnings (List[str]): Non-fatal notes about the validation
        context (Optional[Dict[str, Any]]): Additional context, such as the source
    """

    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "is_valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": list(self.warnings),
            "context": dict(self.context or {}),
        }
