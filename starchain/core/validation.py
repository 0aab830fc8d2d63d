"""
Findings reported by chain validation
"""

from dataclasses import dataclass
from typing import List, Union

NO_ERRORS = "No errors found"


@dataclass(frozen=True)
class IntegrityError:
    """A block whose stored hash no longer matches its content"""
    height: int
    hash: str

    @property
    def message(self) -> str:
        return f"Invalid block: {self.height}, {self.hash}"

    def to_dict(self):
        return {'type': 'integrity', 'height': self.height, 'hash': self.hash, 'message': self.message}


@dataclass(frozen=True)
class LinkageError:
    """A block whose previous hash does not point at its predecessor"""
    height: int
    previous_height: int

    @property
    def message(self) -> str:
        return f"Invalid link between {self.height} and {self.previous_height}"

    def to_dict(self):
        return {
            'type': 'linkage',
            'height': self.height,
            'previous_height': self.previous_height,
            'message': self.message
        }


ValidationFinding = Union[IntegrityError, LinkageError]
ValidationReport = Union[List[ValidationFinding], str]


def is_clean(report: ValidationReport) -> bool:
    """True when a validation report carries no findings"""
    return report == NO_ERRORS
