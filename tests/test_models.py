"""Tests for the condition model and QuayRegistry parsing."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from quaystatus.crd.base import (
    Condition,
    ConditionStatus,
    CRDSpec,
    conditions_to_dicts,
)
from quaystatus.crd.registry import CRDRegistry
from quaystatus.models.quay import (
    ComponentKind,
    ConditionReason,
    ConditionType,
    QuayRegistry,
    QuayRegistrySpec,
)

from .conftest import make_quay


def mirror_condition(message="Mirror component healthy"):
    return Condition.new(
        ConditionType.COMPONENT_MIRROR_READY,
        ConditionStatus.TRUE,
        ConditionReason.COMPONENT_READY,
        message,
    )


class TestCondition:
    def test_new_stamps_current_time(self):
        cond = mirror_condition()

        assert cond.lastUpdateTime is not None
        assert cond.lastUpdateTime.tzinfo is not None
        assert cond.type == "ComponentMirrorReady"
        assert cond.reason == "ComponentReady"

    def test_equality_ignores_timestamps(self):
        first = mirror_condition()
        second = first.model_copy(
            update={
                "lastUpdateTime": first.lastUpdateTime + timedelta(seconds=30),
                "lastTransitionTime": first.lastUpdateTime,
            }
        )

        assert first == second
        assert hash(first) == hash(second)

    def test_equality_compares_message(self):
        assert mirror_condition() != mirror_condition("Mirror manually scaled down")

    def test_round_trip_through_status_dict(self):
        cond = mirror_condition()

        data = cond.to_dict()

        assert data["type"] == "ComponentMirrorReady"
        assert data["status"] == "True"
        assert isinstance(data["lastUpdateTime"], str)
        assert "lastTransitionTime" not in data
        restored = Condition.from_dict(data)
        assert restored == cond
        assert restored.lastUpdateTime == cond.lastUpdateTime

    def test_naive_timestamps_are_read_as_utc(self):
        cond = Condition.from_dict(
            {
                "type": "ComponentMirrorReady",
                "status": "True",
                "reason": "ComponentReady",
                "lastUpdateTime": "2024-01-01T00:00:00",
            }
        )

        assert cond.lastUpdateTime == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert cond.lastTransitionTime is None

    def test_keeps_extra_fields(self):
        data = mirror_condition().to_dict()
        data["observedGeneration"] = 4

        assert Condition.from_dict(data).to_dict()["observedGeneration"] == 4

    def test_rejects_invalid_status(self):
        with pytest.raises(ValidationError):
            Condition.from_dict(
                {
                    "type": "ComponentMirrorReady",
                    "status": "Sometimes",
                    "reason": "ComponentReady",
                    "lastUpdateTime": "2024-01-01T00:00:00Z",
                }
            )


class TestQuayRegistry:
    def test_from_body(self):
        quay = make_quay(("mirror", True, 0), ("clair", False), name="prod", uid="abc")

        assert quay.name == "prod"
        assert quay.namespace == "quay"
        assert quay.uid == "abc"
        assert quay.kind == "QuayRegistry"
        assert quay.api_version == "quay.redhat.com/v1"
        assert quay.resource_name("quay-mirror") == "prod-quay-mirror"

        mirror = quay.spec.component(ComponentKind.MIRROR)
        assert mirror.scaled_down
        assert mirror.has_replicas_override
        assert not quay.spec.is_managed("clair")
        assert not quay.spec.is_managed("redis")
        assert quay.spec.component("redis") is None

    def test_keeps_unreadable_conditions_as_stored(self):
        stored = mirror_condition().to_dict()
        broken = {"type": "ComponentQuayReady", "status": "Sometimes"}
        quay = make_quay(("mirror", True), conditions=[stored, broken])

        assert quay.status.conditions == [mirror_condition(), broken]
        assert isinstance(quay.status.conditions[1], dict)

    def test_foreign_conditions_are_not_parsed(self):
        foreign = {
            "type": "RolloutBlocked",
            "status": "True",
            "lastTransitionTime": "2024-01-01T00:00:00Z",
            "observedGeneration": 3,
        }
        quay = make_quay(("mirror", True), conditions=[foreign])

        assert quay.status.conditions == [foreign]
        assert conditions_to_dicts(quay.status.conditions) == [foreign]

    def test_override_ignores_unknown_fields(self):
        quay = QuayRegistry.from_body(
            {
                "metadata": {"name": "registry", "uid": "uid"},
                "spec": {
                    "components": [
                        {
                            "kind": "quay",
                            "managed": True,
                            "overrides": {"replicas": 2, "affinity": {}},
                        }
                    ]
                },
            }
        )

        component = quay.spec.component("quay")
        assert component.overrides.replicas == 2
        assert not component.scaled_down

    def test_rejects_unknown_component_kind(self):
        with pytest.raises(ValidationError):
            make_quay(("sidecar", True))

    def test_rejects_negative_replicas(self):
        with pytest.raises(ValidationError):
            make_quay(("mirror", True, -1))


class TestCRDRegistry:
    def test_resource_coordinates(self):
        assert CRDRegistry.resource(QuayRegistrySpec) == (
            "quay.redhat.com",
            "v1",
            "quayregistries",
        )
        assert CRDRegistry.api_version(QuayRegistrySpec) == "quay.redhat.com/v1"
        assert QuayRegistrySpec._crd_kind == "QuayRegistry"

    def test_default_plural(self):
        @CRDRegistry.register("example.com", "v1alpha1", "Widget")
        class WidgetSpec(CRDSpec):
            size: int = 1

        assert CRDRegistry.resource(WidgetSpec) == ("example.com", "v1alpha1", "widgets")

    def test_unregistered_model(self):
        with pytest.raises(ValueError):
            CRDRegistry.resource(CRDSpec)
