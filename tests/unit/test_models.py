import dataclasses

import pytest
from prettyimports.support.models import (
    ClassifiedImports,
    ImportStatement,
    NamedBinding,
    NoChange,
    Replace,
    TextSpan,
)


def test_classified_imports_defaults():
    ci = ClassifiedImports()
    assert ci.third_party == ()
    assert ci.local == ()


def test_classified_imports_is_frozen():
    ci = ClassifiedImports()
    with pytest.raises(dataclasses.FrozenInstanceError):
        ci.local = (ImportStatement("x", TextSpan(0, 1)),)


def test_named_binding_display_name():
    assert NamedBinding("a", "a").display_name == "a"
    assert not NamedBinding("a", "a").is_aliased
    aliased = NamedBinding(local_name="b", imported_name="a")
    assert aliased.display_name == "b"
    assert aliased.is_aliased


def test_side_effect_detection():
    span = TextSpan(0, 1)
    assert ImportStatement("./a.css", span).is_side_effect
    assert not ImportStatement("x", span, named_bindings=()).is_side_effect
    assert not ImportStatement("x", span, default_binding="x").is_side_effect


def test_no_change():
    assert not NoChange().changed
    assert NoChange().apply("text") == "text"


def test_replace_apply():
    edit = Replace(TextSpan(0, 5), "HELLO")
    assert edit.changed
    assert edit.apply("hello world") == "HELLO world"
