import dataclasses

import pytest

from sfwrap.engine_eval import EngineEval, EvalType


def test_from_descriptor_centipawn():
    assert EvalType.from_descriptor("cp") is EvalType.CENTIPAWN


def test_from_descriptor_mate():
    assert EvalType.from_descriptor("mate") is EvalType.MATE


@pytest.mark.parametrize("descriptor", ["", "CP", "mates", "centipawn", " cp"])
def test_from_descriptor_rejects_unknown(descriptor):
    with pytest.raises(ValueError):
        EvalType.from_descriptor(descriptor)


@pytest.mark.parametrize("eval_type", list(EvalType))
def test_str_round_trips_through_descriptor(eval_type):
    assert EvalType.from_descriptor(str(eval_type)) is eval_type


def test_str_of_types_matches_uci_descriptors():
    descriptors = [str(EvalType.from_descriptor(d)) for d in ("cp", "mate")]
    assert descriptors == ["cp", "mate"]
    assert str(EvalType.CENTIPAWN) == "cp"
    assert str(EvalType.MATE) == "mate"


def test_engine_eval_str_centipawn():
    assert str(EngineEval(EvalType.CENTIPAWN, 35)) == "cp 35"


def test_engine_eval_str_negative_mate():
    assert str(EngineEval(EvalType.MATE, -3)) == "mate -3"


@pytest.mark.parametrize(
    "eval_type, value",
    [(EvalType.CENTIPAWN, 0), (EvalType.CENTIPAWN, -120), (EvalType.MATE, 7)],
)
def test_engine_eval_str_can_be_parsed_back(eval_type, value):
    descriptor, number = str(EngineEval(eval_type, value)).split(" ")
    assert EngineEval(EvalType.from_descriptor(descriptor), int(number)) == EngineEval(
        eval_type, value
    )


def test_engine_eval_fields():
    evaluation = EngineEval(EvalType.MATE, 4)
    assert evaluation.eval_type is EvalType.MATE
    assert evaluation.value == 4


def test_engine_eval_equality():
    assert EngineEval(EvalType.MATE, 3) == EngineEval(EvalType.MATE, 3)
    assert (EngineEval(EvalType.MATE, 3) == EngineEval(EvalType.MATE, 2)) is False
    assert (EngineEval(EvalType.MATE, 3) == EngineEval(EvalType.CENTIPAWN, 3)) is False


def test_engine_eval_is_immutable():
    evaluation = EngineEval(EvalType.CENTIPAWN, 10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        evaluation.value = 20
    assert evaluation.value == 10