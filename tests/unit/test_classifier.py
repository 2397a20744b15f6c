"""Tests for classify — stable partition and malformed input handling."""

from __future__ import annotations

from typing import Any

import pytest

from bindforge.core.classifier import classify
from bindforge.core.errors import MalformedInterfaceError
from bindforge.models.abi import ConstructorMember


def _function(name: str, mutability: str = "view") -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": [],
        "outputs": [],
        "stateMutability": mutability,
    }


def _event(name: str) -> dict[str, Any]:
    return {"type": "event", "name": name, "inputs": [], "anonymous": False}


_CONSTRUCTOR = {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"}


class TestPartition:
    def test_order_preserved_within_partitions(self):
        result = classify([_function("f1"), _event("e1"), _CONSTRUCTOR, _function("f2")])

        assert [f.name for f in result.functions] == ["f1", "f2"]
        assert [e.name for e in result.events] == ["e1"]
        assert isinstance(result.constructor, ConstructorMember)

    def test_no_constructor(self):
        result = classify([_function("f1")])
        assert result.constructor is None

    def test_empty_abi(self):
        result = classify([])
        assert result.functions == []
        assert result.events == []
        assert result.constructor is None

    def test_raw_is_verbatim(self, gcoti_abi: list[dict[str, Any]]):
        result = classify(gcoti_abi)
        assert result.raw == gcoti_abi
        assert [list(m) for m in result.raw] == [list(m) for m in gcoti_abi]

    def test_other_tags_kept_aside(self):
        error = {"type": "error", "name": "Unauthorized", "inputs": []}
        receive = {"type": "receive", "stateMutability": "payable"}
        result = classify([_function("f1"), error, receive])

        assert [f.name for f in result.functions] == ["f1"]
        assert result.others == [error, receive]

    def test_mutability_parsed(self):
        result = classify([_function("read", "pure"), _function("pay", "payable")])
        read, pay = result.functions
        assert read.is_read_only is True
        assert pay.is_read_only is False

    def test_gcoti(self, gcoti_abi: list[dict[str, Any]]):
        result = classify(gcoti_abi)
        assert [f.name for f in result.functions] == ["cap", "transfer"]
        assert [e.name for e in result.events] == ["Transfer"]
        assert result.constructor is not None
        assert result.constructor.state_mutability == "payable"
        assert [p.name for p in result.constructor.inputs] == [
            "initialOwner", "recipient", "totalSupply",
        ]


class TestMalformed:
    def test_missing_type_tag(self):
        member = _function("f1")
        del member["type"]
        with pytest.raises(MalformedInterfaceError, match="missing its type tag"):
            classify([member])

    def test_not_a_list(self):
        with pytest.raises(MalformedInterfaceError, match="must be a list"):
            classify({"type": "function"})

    def test_member_not_an_object(self):
        with pytest.raises(MalformedInterfaceError, match="must be an object"):
            classify(["function"])

    def test_invalid_mutability(self):
        with pytest.raises(MalformedInterfaceError, match="malformed"):
            classify([_function("f1", "sometimes")])

    def test_function_without_name(self):
        member = _function("f1")
        del member["name"]
        with pytest.raises(MalformedInterfaceError):
            classify([member])

    def test_two_constructors(self):
        with pytest.raises(MalformedInterfaceError, match="second constructor"):
            classify([_CONSTRUCTOR, _CONSTRUCTOR])
