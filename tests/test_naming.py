from __future__ import annotations

import collections
import datetime as dt
import hashlib

import numpy as np
import pytest

from singleton_registry import digest_name, is_storable, type_name


def test_digest_is_sha256_hex_of_utf8_name() -> None:
    assert digest_name("svc") == hashlib.sha256(b"svc").hexdigest()
    assert digest_name("café") == hashlib.sha256("café".encode("utf-8")).hexdigest()
    assert len(digest_name("")) == 64


def test_digest_rejects_non_str() -> None:
    with pytest.raises(TypeError):
        digest_name(42)  # type: ignore[arg-type]


def test_type_name_for_instances_and_classes() -> None:
    assert type_name(dt.datetime.now()) == "datetime.datetime"
    assert type_name(dt.datetime) == "datetime.datetime"
    assert type_name(collections.OrderedDict()) == "collections.OrderedDict"
    assert type_name(object()) == "object"
    assert type_name([]) == "list"


def test_type_name_uses_qualname_for_nested_classes() -> None:
    class Inner:
        pass

    assert type_name(Inner()).endswith("test_type_name_uses_qualname_for_nested_classes.<locals>.Inner")


def test_is_storable() -> None:
    assert not is_storable(None)
    assert not is_storable(3)
    assert not is_storable("text")
    assert not is_storable(np.uint8(7))
    assert is_storable(np.array(7))
    assert is_storable(object())
    assert is_storable(int)
