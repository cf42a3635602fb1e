from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import pytest

from prometheus_wire.core.models import Comment, CommentType, LabelList, SampleData


def test_label_list_accessors() -> None:
    labels = LabelList.from_map({"code": "200", "method": "post", "le": "+Inf", "ratio": "1.5e-3"})

    assert labels.get_string("method") == "post"
    assert labels.get_string("missing") is None
    assert labels.get_number("code") == 200.0
    assert labels.get_number("le") == math.inf
    assert labels.get_number("ratio") == 0.0015
    assert labels.get_number("method") is None
    assert labels.get_number("missing") is None


def test_label_list_get_number_requires_whole_value() -> None:
    labels = LabelList({"a": "12abc", "b": " 7 "})
    assert labels.get_number("a") is None
    assert labels.get_number("b") == 7.0


def test_label_list_is_an_immutable_mapping() -> None:
    source = {"a": "1"}
    labels = LabelList(source)
    source["a"] = "changed"

    assert labels["a"] == "1"
    assert len(labels) == 1
    assert list(labels) == ["a"]
    assert labels == {"a": "1"}
    assert LabelList() == LabelList({})
    assert hash(LabelList({"a": "1", "b": "2"})) == hash(LabelList({"b": "2", "a": "1"}))
    with pytest.raises(TypeError):
        labels["b"] = "2"  # type: ignore[index]


def test_records_are_frozen() -> None:
    sample = SampleData("m", LabelList(), 1.0)
    comment = Comment("m", CommentType.TYPE, "gauge")

    assert sample.timestamp is None
    with pytest.raises(FrozenInstanceError):
        sample.value = 2.0  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        comment.text = "counter"  # type: ignore[misc]


def test_comment_type_values() -> None:
    assert [t.value for t in CommentType] == ["HELP", "TYPE"]
    assert CommentType("TYPE") is CommentType.TYPE
