"""Custom exceptions for monomer parsing and HOR assembly."""

from typing import Optional, Dict, Any, List
from pathlib import Path

from asat_hor.core.types import LabelComponent


class AsatHorError(Exception):
    """Base exception for alpha-satellite HOR errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def get_error_details(self) -> Dict[str, Any]:
        """Get structured error details for logging."""
        return {"error": type(self).__name__, "message": self.message}


class ParseError(AsatHorError, ValueError):
    """Monomer label or HOR notation does not match the grammar."""

    def __init__(self, label: Any, component: LabelComponent, reason: str,
                 position: Optional[int] = None) -> None:
        self.label = label
        self.component = component
        self.reason = reason
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Invalid label {label!r}: {reason} ({component.value}{where})"
        )

    def get_error_details(self) -> Dict[str, Any]:
        details = super().get_error_details()
        details.update({
            "label": self.label,
            "component": self.component.value,
            "reason": self.reason,
            "position": self.position
        })
        return details


class AssemblyError(AsatHorError):
    """HOR assembly failed."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.position = position
        super().__init__(message)


class EmptyInputError(AssemblyError):
    """No monomers were supplied for assembly."""

    def __init__(self, message: str = "Cannot assemble a HOR from zero monomers") -> None:
        super().__init__(message)


class IndexOutOfBoundsError(AsatHorError, IndexError):
    """Run index outside of [0, run_count)."""

    def __init__(self, index: int, run_count: int) -> None:
        self.index = index
        self.run_count = run_count
        super().__init__(f"Run index {index} out of range for HOR with {run_count} runs")

    def get_error_details(self) -> Dict[str, Any]:
        details = super().get_error_details()
        details.update({"index": self.index, "run_count": self.run_count})
        return details


class NotationError(AsatHorError):
    """HOR cannot be written in compact notation."""

    def __init__(self, message: str, signatures: Optional[List[str]] = None) -> None:
        self.signatures = signatures or []
        super().__init__(message)


class ConfigurationError(AsatHorError):
    """Configuration error."""

    def __init__(self, message: str, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path
        super().__init__(message)
