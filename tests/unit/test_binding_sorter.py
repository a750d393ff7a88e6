from prettyimports.core.binding_sorter import sort_named_bindings, with_sorted_bindings
from prettyimports.support.models import ImportStatement, NamedBinding, TextSpan


def binding(name: str, alias: str | None = None, type_only: bool = False) -> NamedBinding:
    return NamedBinding(local_name=alias or name, imported_name=name, is_type_only=type_only)


def names(bindings):
    return [b.display_name for b in bindings]


def test_sorts_by_name():
    assert names(sort_named_bindings([binding("b"), binding("a")])) == ["a", "b"]


def test_sorts_by_alias_when_aliased():
    bindings = [binding("zeta", "alpha"), binding("beta")]
    assert names(sort_named_bindings(bindings)) == ["alpha", "beta"]


def test_case_sensitive_ordering():
    bindings = [binding("useState"), binding("Component"), binding("createContext")]
    assert names(sort_named_bindings(bindings)) == ["Component", "createContext", "useState"]


def test_type_only_bindings_sort_with_the_rest():
    bindings = [binding("Props", type_only=True), binding("FC", type_only=True), binding("memo")]
    assert names(sort_named_bindings(bindings)) == ["FC", "Props", "memo"]


def test_empty_and_single():
    assert sort_named_bindings([]) == ()
    assert sort_named_bindings([binding("a")]) == (binding("a"),)


def test_with_sorted_bindings_returns_new_statement():
    original = ImportStatement(
        module_path="react",
        source_span=TextSpan(0, 10),
        named_bindings=(binding("useState"), binding("createContext")),
        default_binding="React",
    )

    updated = with_sorted_bindings(original)

    assert names(updated.named_bindings) == ["createContext", "useState"]
    assert updated.default_binding == "React"
    # Original is untouched
    assert names(original.named_bindings) == ["useState", "createContext"]


def test_with_sorted_bindings_without_braces():
    statement = ImportStatement(module_path="zod", source_span=TextSpan(0, 5), default_binding="z")
    assert with_sorted_bindings(statement) is statement
