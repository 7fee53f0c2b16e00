"""Creation pipeline shared by every record factory.

A pipeline is an ordered composition of hooks: configure hooks derive a new
record with defaults filled in, validate hooks raise on the first broken rule,
and describe hooks contribute fields to the diagnostic event handed to the
observer. Extending a pipeline appends hooks, so base steps always run before
type-specific ones.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Mapping, TypeVar

R = TypeVar("R")

ConfigureHook = Callable[[Any], Any]
ValidateHook = Callable[[Any], None]
DescribeHook = Callable[[Any], Mapping[str, Any]]


@dataclass(frozen=True)
class CreationEvent:
    """Diagnostic emitted once per successful creation."""

    name: str
    record: Any
    fields: Mapping[str, Any] = field(default_factory=dict)


CreationObserver = Callable[[CreationEvent], None]


@dataclass(frozen=True)
class CreationPipeline(Generic[R]):
    """Immutable configure → validate → describe chain."""

    event: str
    configure: tuple[ConfigureHook, ...] = ()
    validate: tuple[ValidateHook, ...] = ()
    describe: tuple[DescribeHook, ...] = ()

    def extend(
        self,
        configure: ConfigureHook | None = None,
        validate: ValidateHook | None = None,
        describe: DescribeHook | None = None,
    ) -> "CreationPipeline[R]":
        """Return a new pipeline with the given hooks appended after the current ones."""
        return replace(
            self,
            configure=self.configure + ((configure,) if configure else ()),
            validate=self.validate + ((validate,) if validate else ()),
            describe=self.describe + ((describe,) if describe else ()),
        )

    def describe_record(self, record: R) -> dict[str, Any]:
        """Diagnostic fields for ``record``, always led by its ``kind`` (class name)."""
        described: dict[str, Any] = {"kind": type(record).__name__}
        for hook in self.describe:
            described.update(hook(record))
        return described

    def run(self, record: R, observer: CreationObserver | None = None) -> R:
        """
        Configure, validate and announce a raw record.

        Args:
            record: Record produced by a factory's ``create()``
            observer: Called with a ``CreationEvent`` after validation succeeds

        Returns:
            The configured and validated record

        Raises:
            ValidationError: On the first broken rule; the observer is not called
        """
        for step in self.configure:
            record = step(record)

        for check in self.validate:
            check(record)

        if observer is not None:
            observer(CreationEvent(name=self.event, record=record, fields=self.describe_record(record)))
        return record
