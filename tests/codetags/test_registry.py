import pytest

import codetags
from codetags import DEFAULT_INSTANCE_NAME, Codetags, InvalidArgumentError
from codetags.registry import assert_space


def test_default_instance(make_registry):
    registry = make_registry()
    assert registry.default.name == DEFAULT_INSTANCE_NAME
    assert registry.names() == [DEFAULT_INSTANCE_NAME]
    assert registry.get_instance("codetags") is registry.default
    assert registry.get_instance("Code-Tags") is not registry.default


def test_module_level_default():
    assert isinstance(codetags.default, Codetags)
    assert codetags.default_registry.default is codetags.default
    assert codetags.get_instance(DEFAULT_INSTANCE_NAME) is codetags.default


@pytest.mark.parametrize("name", ["codetags", "CodeTags", "CODETAGS", "codeTAGS"])
def test_reserved_name(make_registry, name):
    with pytest.raises(InvalidArgumentError) as exc_info:
        make_registry().new_instance(name)
    assert str(exc_info.value) == "CODETAGS is the default instance name. Please provide another name."


@pytest.mark.parametrize("name", [None, 12, ["abc"]])
def test_name_must_be_a_string(make_registry, name):
    with pytest.raises(InvalidArgumentError) as exc_info:
        make_registry().new_instance(name)
    assert str(exc_info.value) == "name of a new instance must be a string"
    with pytest.raises(InvalidArgumentError):
        make_registry().get_instance(name)


def test_assert_space():
    assert assert_space("my app") == "MY_APP"
    # the error is also a ValueError
    with pytest.raises(ValueError):
        assert_space("codetags")


def test_new_instance_namespace(make_registry):
    registry = make_registry({"DEVEBOT_POSITIVE_TAGS": "abc", "CODETAGS_POSITIVE_TAGS": "def"})
    devebot = registry.new_instance("devebot")
    assert devebot.name == "DEVEBOT"
    assert devebot.get_presets().namespace == "DEVEBOT"
    assert devebot.is_active("abc")
    assert not devebot.is_active("def")
    assert registry.default.is_active("def")
    assert not registry.default.is_active("abc")


def test_new_instance_explicit_namespace(make_registry):
    registry = make_registry({"SHARED_POSITIVE_TAGS": "abc"})
    instance = registry.new_instance("worker", {"namespace": "shared", "version": "1.0.0"})
    assert instance.get_presets().namespace == "SHARED"
    assert instance.get_presets().version == "1.0.0"
    assert instance.is_active("abc")


def test_get_instance_reuses_and_reinitializes(make_registry):
    registry = make_registry()
    first = registry.get_instance("devebot")
    assert "devebot" in registry
    assert "DEVEBOT" in registry
    assert 12 not in registry
    assert registry.get_instance("Devebot") is first
    same = registry.get_instance("DEVEBOT", {"positiveTagsLabel": "UPGRADE_ENABLED"})
    assert same is first
    assert first.get_presets().positive_tags_label == "UPGRADE_ENABLED"
    assert first.get_presets().namespace == "DEVEBOT"


def test_new_instance_replaces(make_registry):
    registry = make_registry()
    first = registry.new_instance("devebot")
    second = registry.new_instance("devebot")
    assert first is not second
    assert registry.get_instance("devebot") is second
    assert registry.names() == [DEFAULT_INSTANCE_NAME, "DEVEBOT"]


def test_instances_share_no_state(make_registry):
    registry = make_registry()
    one = registry.new_instance("one").register(["tag-1"])
    two = registry.new_instance("two")
    assert one.is_active("tag-1")
    assert not two.is_active("tag-1")
    assert not registry.default.is_active("tag-1")
    assert two.get_declared_tags() == []


def test_reset_keeps_constructed_namespace(make_registry):
    registry = make_registry({"ONE_POSITIVE_TAGS": "abc"})
    one = registry.new_instance("one").initialize({"namespace": "elsewhere"})
    assert not one.is_active("abc")
    one.reset()
    assert one.get_presets().namespace == "ONE"
    assert one.is_active("abc")
