"""Tests for chain configuration and planning."""

import pytest

from walkchainlib.sync import (
    ChainConfig,
    ChainConfigError,
    ChainPlan,
    DirectLinkResolver,
    IdLinkResolver,
    IdMatch,
    LinkStrategy,
)
from walkchainlib.aio import AsyncChainPlan


class TestChainConfig:

    def test_direct_constructor(self):
        config = ChainConfig.direct("parent", merge_property="settings")

        assert config.link_name == "parent"
        assert config.strategy is LinkStrategy.DIRECT
        assert config.merge_property == "settings"
        assert config.validate() == []

    def test_by_id_constructor(self):
        config = ChainConfig.by_id("extends", "name", id_match=IdMatch.LOOSE)

        assert config.strategy is LinkStrategy.BY_ID
        assert config.id_name == "name"
        assert config.id_match is IdMatch.LOOSE
        assert config.validate() == []

    def test_defaults_need_link_name(self):
        assert ChainConfig().validate() == ["link_name must be a hashable field name"]

    def test_by_id_needs_id_name(self):
        config = ChainConfig(link_name="parent", strategy=LinkStrategy.BY_ID)
        assert "id_name is required when strategy is BY_ID" in config.validate()

    def test_by_id_fields_may_be_the_same(self):
        assert ChainConfig.by_id("id", "id").validate() == []

    @pytest.mark.parametrize("name", ["", 0, 1, ("a", "b"), "parent"])
    def test_any_hashable_field_name(self, name):
        assert ChainConfig.by_id(name, name, merge_property=name).validate() == []

    def test_unhashable_field_names(self):
        config = ChainConfig(link_name=["parent"], merge_property={})
        assert config.validate() == [
            "link_name must be a hashable field name",
            "merge_property must be a hashable field name",
        ]

    def test_empty_merge_property_is_a_valid_key(self):
        assert ChainConfig.direct("parent", merge_property="").validate() == []

    def test_unknown_enums(self):
        config = ChainConfig(link_name="parent", strategy="up", id_match="fuzzy")
        errors = config.validate()

        assert "unknown link strategy: 'up'" in errors
        assert "unknown id match mode: 'fuzzy'" in errors

    def test_collects_all_errors(self):
        config = ChainConfig(strategy=LinkStrategy.BY_ID, merge_property=[])
        assert len(config.validate()) == 3


class TestChainPlan:

    def test_builds_direct_resolver(self):
        plan = ChainPlan(ChainConfig.direct("parent"))
        assert isinstance(plan.resolver, DirectLinkResolver)
        assert plan.walker.resolver is plan.resolver

    def test_builds_id_resolver(self):
        nodes = [{"id": "a"}]
        plan = ChainPlan(ChainConfig.by_id("parent", "id"), nodes)

        assert isinstance(plan.resolver, IdLinkResolver)
        assert plan.resolver.node_list is nodes

    def test_invalid_config_rejected(self):
        with pytest.raises(ChainConfigError) as excinfo:
            ChainPlan(ChainConfig())
        assert excinfo.value.errors == ["link_name must be a hashable field name"]

    def test_by_id_without_node_list_rejected(self):
        with pytest.raises(ChainConfigError, match="node_list is required"):
            ChainPlan(ChainConfig.by_id("parent", "id"))

    def test_empty_node_list_is_fine(self):
        plan = ChainPlan(ChainConfig.by_id("parent", "id"), [])
        assert plan.chain({"id": "a", "parent": "b"}) == [{"id": "a", "parent": "b"}]

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ChainPlan(ChainConfig(link_name=[]))

    def test_async_plan_validates_too(self):
        with pytest.raises(ChainConfigError):
            AsyncChainPlan(ChainConfig.by_id("parent", None), [])

    def test_explain(self):
        config = ChainConfig.by_id("extends", "name", merge_property="vars")
        text = ChainPlan(config, []).explain()

        assert "Link field: extends" in text
        assert "Strategy: by_id" in text
        assert "Id field: name (strict match)" in text
        assert "Merge property: vars" in text

    def test_repr(self):
        assert "DirectLinkResolver" in repr(ChainPlan(ChainConfig.direct("parent")))
        assert repr(AsyncChainPlan(ChainConfig.direct("parent"))).startswith("AsyncChainPlan(")
