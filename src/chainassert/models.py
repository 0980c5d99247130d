"""Failure signals and structured failure reports for chainassert."""
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

MULTIPLE_FAILURES_HEADER = "The following assertions failed"


class _NoneType:
    """Marker for an expected/actual value that was not supplied."""

    _instance = None

    def __new__(cls) -> "_NoneType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NONE"


NONE: Any = _NoneType()


# Custom Exceptions
class ChainAssertError(Exception):
    """Base exception for library errors that are not assertion failures."""
    pass


class AssertionFailure(AssertionError):
    """A single assertion did not hold.

    ``expected`` and ``actual`` are kept for hosts that render diffs; they are
    ``NONE`` when the assertion did not supply them.
    """

    def __init__(
        self,
        message: str,
        expected: Any = NONE,
        actual: Any = NONE,
    ) -> None:
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    @property
    def has_expected(self) -> bool:
        return self.expected is not NONE

    @property
    def has_actual(self) -> bool:
        return self.actual is not NONE

    def __repr__(self) -> str:
        return f"AssertionFailure({self.message!r})"


class MultipleFailuresError(AssertionError):
    """Several assertion failures collected by one soft scope."""

    def __init__(self, failures: Sequence[BaseException]) -> None:
        self.failures: Tuple[BaseException, ...] = tuple(failures)
        super().__init__(_combined_message(self.failures))

    @property
    def message(self) -> str:
        return _combined_message(self.failures)

    def to_report(self) -> "FailureReport":
        """Structured view of the collected failures, in occurrence order."""
        return FailureReport.from_errors(self.failures)

    def __repr__(self) -> str:
        return f"MultipleFailuresError(failures={len(self.failures)})"


def error_message(error: BaseException) -> str:
    """Message text of an error, falling back to its type name."""
    text = str(error)
    return text if text else type(error).__name__


def _combined_message(failures: Tuple[BaseException, ...]) -> str:
    count = len(failures)
    noun = "failure" if count == 1 else "failures"
    lines = [f"{MULTIPLE_FAILURES_HEADER} ({count} {noun})"]
    for failure in failures:
        # continuation lines stay under their own bullet
        entry = error_message(failure).replace("\n", "\n\t  ")
        lines.append(f"\t- {entry}")
    return "\n".join(lines)


class FailureRecord(BaseModel):
    """One collected failure, serialisable for host reporting."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(
        ...,
        ge=0,
        description="Position of the failure in occurrence order",
    )
    error_type: str = Field(
        ...,
        min_length=1,
        description="Qualified class name of the raised error",
    )
    message: str = Field(
        ...,
        description="Message text of the failure",
    )

    @classmethod
    def from_error(cls, index: int, error: BaseException) -> "FailureRecord":
        error_cls = type(error)
        return cls(
            index=index,
            error_type=f"{error_cls.__module__}.{error_cls.__qualname__}",
            message=error_message(error),
        )


class FailureReport(BaseModel):
    """All failures raised together by one soft scope."""

    model_config = ConfigDict(frozen=True)

    failure_count: int = Field(
        ...,
        ge=0,
        description="Number of collected failures",
    )
    failures: List[FailureRecord] = Field(
        default_factory=list,
        description="Collected failures in occurrence order",
    )

    @classmethod
    def from_errors(cls, errors: Iterable[BaseException]) -> "FailureReport":
        records = [FailureRecord.from_error(i, error) for i, error in enumerate(errors)]
        return cls(failure_count=len(records), failures=records)

    def messages(self) -> List[str]:
        return [record.message for record in self.failures]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize report to a plain dictionary."""
        return self.model_dump()
