#!/usr/bin/env python3

from dataclasses import dataclass
from typing import List, Optional

from resgen.core.errors import ConfigurationError


@dataclass(frozen=True)
class ValidationIssue:
    """One violated rule, located by property lineage and resource."""
    message: str
    lineage: Optional[str] = None
    resource: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class ValidationResult:
    def __init__(self):
        self.issues: List[ValidationIssue] = []

    @property
    def errors(self) -> List[str]:
        return [issue.message for issue in self.issues]

    def add(self, message: str, lineage: Optional[str] = None, resource: Optional[str] = None):
        self.issues.append(ValidationIssue(message, lineage, resource))

    def report(
        self,
        msg: str,
        strict: bool = False,
        exc_type: type = ConfigurationError,
        *,
        lineage: Optional[str] = None,
        resource: Optional[str] = None,
    ):
        """
        Add an error to the result, or raise an exception if in strict mode.

        Args:
            msg (str): The error message.
            strict (bool): Whether to raise immediately.
            exc_type (type): Exception type to raise if strict. Default is ConfigurationError.
            lineage (str): Lineage of the offending property, if any.
            resource (str): Name of the resource being validated, if any.
        """
        if strict:
            raise exc_type(msg)
        self.add(msg, lineage, resource)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.issues.extend(other.issues)
        return self

    def raise_if_invalid(self, exc_type: type = ConfigurationError) -> None:
        """Raise a single exception listing every collected issue."""
        if self.is_valid():
            return
        lines = "\n".join(f"  - {m}" for m in self.errors)
        raise exc_type(f"{len(self.issues)} configuration error(s):\n{lines}")

    def is_valid(self) -> bool:
        return not self.issues

    def __len__(self):
        return len(self.issues)

    def __bool__(self):
        # a result is always truthy, even with no issues; use is_valid()
        return True

    def __iter__(self):
        return iter(self.errors)

    def __repr__(self):
        return f"<ValidationResult valid={self.is_valid()} errors={len(self.issues)}>"
