from dataclasses import dataclass

import pytest

from evt2doc.errors import Evt2DocError, StageError
from evt2doc.stages import Outcome, Stage, chain, run_pipeline


class Boom(StageError):
    pass


@dataclass(frozen=True)
class AddOptions:
    amount: int = 1


class Add(Stage):
    Error = Boom
    Options = AddOptions

    def __init__(self):
        self.calls = 0

    def apply(self, data, options):
        self.calls += 1
        return data + options.amount


class Fail(Stage):
    Error = Boom

    def __init__(self):
        self.calls = 0

    def apply(self, data, options):
        self.calls += 1
        raise Boom(f"ne valja: {data}")


class Buggy(Stage):
    Error = Boom

    def apply(self, data, options):
        raise KeyError("bug")


def test_run_uses_default_options():
    assert Add().run(1).value == Add().run_with(1, AddOptions()).value == 2


def test_run_with_options():
    outcome = Add().run_with(1, AddOptions(amount=10))
    assert outcome.ok
    assert outcome.unwrap() == 11


def test_declared_error_becomes_failure():
    outcome = Fail().run(3)
    assert not outcome.ok
    assert isinstance(outcome.error, Boom)
    with pytest.raises(Boom, match="ne valja: 3"):
        outcome.unwrap()


def test_other_exceptions_propagate():
    with pytest.raises(KeyError):
        Buggy().run(1)


def test_failing_stage_short_circuits_chain():
    first, second = Fail(), Add()
    outcome = chain(1, first).then(second)
    assert first.calls == 1
    assert second.calls == 0
    assert isinstance(outcome.error, Boom)


def test_then_passes_options():
    outcome = chain(1, Add()).then(Add(), AddOptions(amount=5))
    assert outcome.value == 7


def test_run_pipeline():
    add = Add()
    assert run_pipeline(0, add, (add, AddOptions(3)), add).value == 5
    assert add.calls == 3


def test_run_pipeline_stops_at_failure():
    last = Add()
    outcome = run_pipeline(0, Add(), Fail(), last)
    assert not outcome.ok
    assert last.calls == 0


def test_run_pipeline_without_steps():
    assert run_pipeline("x").value == "x"


def test_map_error():
    outcome = Fail().run(1).map_error(lambda e: Evt2DocError(f"konvertovano: {e}"))
    assert type(outcome.error) is Evt2DocError
    assert "konvertovano" in str(outcome.error)

    success = Add().run(1)
    assert success.map_error(lambda e: pytest.fail("ne poziva se")) is success


def test_failure_requires_error():
    with pytest.raises(ValueError):
        Outcome.failure(None)


def test_repr():
    assert repr(Outcome.success(1)) == "Outcome.success(1)"
    assert repr(Outcome.failure(Boom("x"))).startswith("Outcome.failure(")
