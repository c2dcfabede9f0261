import pydantic
import pytest

from compound_names import InvalidArgumentError
from compound_names.grammar import Name, parse_name


def test_mutators_return_new_names(name_factory):
    n1 = name_factory("base")
    n2 = n1.append("end")
    assert n1.as_string() == "base"
    assert n2.as_string() == "base.end"
    assert n1 is not n2


def test_insert_preserves_receiver(name_factory):
    n1 = name_factory("a", "c")
    n2 = n1.insert(1, "b")
    assert n1.as_string() == "a.c"
    assert n2.as_string() == "a.b.c"


def test_insert_at_end_and_front(name_factory):
    name = name_factory("m")
    assert name.insert(0, "f").as_string() == "f.m"
    assert name.insert(1, "l").as_string() == "m.l"


def test_remove_preserves_receiver(name_factory):
    n1 = name_factory("x", "y", "z")
    n2 = n1.remove(1)
    assert n1.as_string() == "x.y.z"
    assert n2.as_string() == "x.z"


def test_set_component_preserves_receiver(name_factory):
    n1 = name_factory("v1", "v2")
    n2 = n1.set_component(0, "new_v1")
    assert n1.as_string() == "v1.v2"
    assert n2.as_string() == "new_v1.v2"
    assert n2.get_component(0) == "new_v1"


def test_concat(name_factory):
    n1 = name_factory("one")
    n2 = name_factory("two", "three")
    n3 = n1.concat(n2)
    assert n1.as_string() == "one"
    assert n3.as_string() == "one.two.three"
    assert n3.count() == n1.count() + n2.count()


def test_concat_keeps_receiver_delimiter():
    result = Name(["a"], "/").concat(Name(["b.c"], "."))
    assert result.delimiter == "/"
    assert list(result.components) == ["a", "b.c"]


def test_length_laws(name_factory):
    name = name_factory("a", "b")
    assert name.append("c").count() == 3
    assert name.insert(1, "c").count() == 3
    assert name.remove(0).count() == 1
    assert len(name) == 2


def test_empty_string_versus_no_components():
    n1 = parse_name("")
    assert n1.count() == 1
    assert n1.get_component(0) == ""
    assert not n1.is_empty()

    n2 = n1.remove(0)
    assert n2.count() == 0
    assert n2.is_empty()
    assert n2.as_string() == ""

    n3 = n2.append("first")
    assert n3.count() == 1
    assert n3.as_string() == "first"


def test_chained_operations(name_factory):
    result = name_factory("a").append("b").insert(0, "start").remove(2)
    assert result.as_string() == "start.a"


def test_as_string_does_not_mask():
    name = Name(["a.b", "c"])
    assert name.as_string() == "a.b.c"
    assert name.as_data_string() == r"a\.b.c"


def test_as_string_with_delimiter_override():
    name = parse_name("oss.cs.fau.de")
    assert name.as_string("/") == "oss/cs/fau/de"
    assert name.delimiter == "."


def test_as_data_string_uses_own_delimiter():
    name = Name(["a/b", "c.d"], "/")
    assert name.as_data_string() == r"a\/b/c.d"
    assert str(name) == r"a\/b/c.d"


def test_clone_is_equal_but_distinct(name_factory):
    name = name_factory("cmp", "test")
    clone = name.clone()
    assert name.is_equal(clone)
    assert clone is not name


def test_clone_of_empty_name():
    empty = parse_name("").remove(0)
    clone = empty.clone()
    assert clone.is_empty()
    assert clone == empty


def test_equality_and_hash(name_factory):
    n1 = name_factory("hash", "check")
    n2 = name_factory("hash", "check")
    assert n1.is_equal(n2)
    assert n1 == n2
    assert n1.hash_code() == n2.hash_code()
    assert hash(n1) == hash(n2)
    assert len({n1, n2}) == 1


def test_is_equal_with_foreign_objects(name_factory):
    name = name_factory("a")
    assert not name.is_equal(None)
    assert not name.is_equal("a")
    assert name != "a"


def test_hash_code_is_signed_32_bit():
    value = Name(["a" * 50, "b" * 50]).hash_code()
    assert -(2**31) <= value < 2**31


def test_hash_code_known_value():
    # "ab" -> 97 * 31 + 98
    assert Name(["ab"]).hash_code() == 3105
    assert Name([]).hash_code() == 0


def test_name_is_frozen(name_factory):
    name = name_factory("a")
    with pytest.raises(pydantic.ValidationError):
        name.delimiter = "/"


def test_accessors():
    name = Name(["a"], "#")
    assert name.get_delimiter_character() == "#"
    assert name.get_no_components() == 1


@pytest.mark.parametrize("index", [-1, 2])
def test_get_component_out_of_range(index, name_factory):
    name = name_factory("a", "b")
    with pytest.raises(InvalidArgumentError):
        name.get_component(index)


def test_get_component_rejects_non_integer(name_factory):
    with pytest.raises(InvalidArgumentError):
        name_factory("a").get_component("0")
    with pytest.raises(InvalidArgumentError):
        name_factory("a").get_component(True)


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_out_of_range(index, name_factory):
    with pytest.raises(InvalidArgumentError):
        name_factory("a", "b").insert(index, "x")


def test_remove_out_of_range(name_factory):
    with pytest.raises(InvalidArgumentError):
        name_factory("a").remove(1)
    with pytest.raises(InvalidArgumentError):
        parse_name("").remove(0).remove(0)


def test_set_component_out_of_range(name_factory):
    with pytest.raises(InvalidArgumentError):
        name_factory("a").set_component(1, "x")


@pytest.mark.parametrize("component", [None, 1, b"x"])
def test_component_must_be_string(component, name_factory):
    name = name_factory("a")
    with pytest.raises(InvalidArgumentError):
        name.append(component)
    with pytest.raises(InvalidArgumentError):
        name.set_component(0, component)
    with pytest.raises(InvalidArgumentError):
        name.insert(0, component)


@pytest.mark.parametrize("delimiter", ["", "..", "\\", None])
def test_invalid_delimiter(delimiter):
    with pytest.raises(InvalidArgumentError):
        Name(["a"], delimiter)
    with pytest.raises(InvalidArgumentError):
        parse_name("a", delimiter)


def test_invalid_display_delimiter(name_factory):
    with pytest.raises(InvalidArgumentError):
        name_factory("a", "b").as_string("\\")


def test_constructor_rejects_bad_components():
    with pytest.raises(InvalidArgumentError):
        Name(None)
    with pytest.raises(InvalidArgumentError):
        Name("a.b")
    with pytest.raises(InvalidArgumentError):
        Name(["a", None])


def test_concat_requires_name(name_factory):
    with pytest.raises(InvalidArgumentError):
        name_factory("a").concat(None)
    with pytest.raises(InvalidArgumentError):
        name_factory("a").concat("b")


def test_parse_requires_string():
    with pytest.raises(InvalidArgumentError):
        parse_name(None)


def test_invalid_argument_is_value_error(name_factory):
    with pytest.raises(ValueError):
        name_factory("a").get_component(5)


def test_model_validate_checks_delimiter():
    with pytest.raises(pydantic.ValidationError):
        Name.model_validate({"components": ["a"], "delimiter": "\\"})


def test_iteration_yields_components():
    name = parse_name(r"a\.b.c")
    assert list(name) == ["a.b", "c"]
    assert [c for c in Name([])] == []
