"""Tests for StatusEnricher and ExpandedOrchestrationStatus."""

import copy
import inspect

import pytest

from core.domain.entities.orchestration_status import OrchestrationStatus
from core.domain.entities.sub_orchestration import SubOrchestrationRecord
from core.domain.enums.entity_type import EntityType
from core.domain.enums.runtime_status import OrchestrationRuntimeStatus
from core.domain.value_objects.entity_id import EntityId
from core.settings import MonitorSettings
from orchestration import expand_status
from orchestration.enricher import StatusEnricher
from tests.fakes import T0, T1, FakeFetch


def _status(instance_id: str = "abc123", history=None) -> OrchestrationStatus:
    return OrchestrationStatus(
        instance_id=instance_id,
        name="ParentOrchestrator",
        created_time=T0,
        last_updated_time=T1,
        input={"order": 1},
        output="done",
        runtime_status=OrchestrationRuntimeStatus.COMPLETED,
        custom_status={"progress": 100},
        history=history,
    )


@pytest.mark.asyncio
async def test_plain_fields_are_copied_verbatim():
    """Test base status fields pass through unchanged."""
    status = _status()

    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(status)

    assert expanded.instance_id == "abc123"
    assert expanded.name == "ParentOrchestrator"
    assert expanded.created_time == T0
    assert expanded.last_updated_time == T1
    assert expanded.input == {"order": 1}
    assert expanded.output == "done"
    assert expanded.runtime_status == OrchestrationRuntimeStatus.COMPLETED
    assert expanded.custom_status == {"progress": 100}
    assert expanded.entity_type == EntityType.ORCHESTRATION
    assert expanded.entity_id is None
    assert await expanded.get_last_event() == ""


@pytest.mark.asyncio
async def test_durable_entity_is_classified():
    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(_status("@bot@123"))

    assert expanded.entity_type == EntityType.DURABLE_ENTITY
    assert expanded.entity_id == EntityId(type="bot", key="123")


@pytest.mark.asyncio
async def test_history_is_correlated_when_source_given():
    """Test sibling records are linked into the history."""
    history = [
        {"EventType": "ExecutionStarted"},
        {"EventType": "SubOrchestrationInstanceCompleted", "FunctionName": "Child", "ScheduledTime": T0},
    ]
    status = _status(history=history)
    original = copy.deepcopy(history)
    siblings = FakeFetch([SubOrchestrationRecord(instance_id="child-1", name="Child", timestamp=T0)])

    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(status, sub_orchestrations=siblings)

    assert expanded.history[1]["subOrchestrationId"] == "child-1"
    assert expanded.history[0] == original[0]
    assert status.history == original


@pytest.mark.asyncio
async def test_history_untouched_without_source():
    history = [{"EventType": "SubOrchestrationInstanceCompleted", "FunctionName": "Child", "ScheduledTime": T0}]
    status = _status(history=history)

    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(status)

    assert expanded.history is history


@pytest.mark.asyncio
async def test_failed_sibling_fetch_degrades_silently():
    """Test a failing sibling fetch still produces the record with raw history."""
    history = [{"EventType": "SubOrchestrationInstanceCompleted", "FunctionName": "Child", "ScheduledTime": T0}]
    original = copy.deepcopy(history)
    siblings = FakeFetch(error=RuntimeError("boom"))

    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(
        _status(history=history), sub_orchestrations=siblings
    )

    assert list(expanded.history) == original


@pytest.mark.asyncio
async def test_last_event_is_lazy_and_memoized():
    """Test the detailed fetch is awaited on first read only."""
    details = FakeFetch(_status(history=[{"EventType": "TaskCompleted", "FunctionName": "Step2"}]))

    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(_status(), details=details)

    assert details.await_count == 0
    assert await expanded.get_last_event() == "Step2"
    assert await expanded.get_last_event() == "Step2"
    assert details.await_count == 1


@pytest.mark.asyncio
async def test_failed_details_fetch_gives_empty_last_event():
    details = FakeFetch(error=ValueError("bad history"))

    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(_status(), details=details)

    assert await expanded.get_last_event() == ""


@pytest.mark.asyncio
async def test_settings_can_disable_correlation_and_last_event():
    """Test both derived fields can be switched off."""
    history = [{"EventType": "SubOrchestrationInstanceCompleted", "FunctionName": "Child", "ScheduledTime": T0}]
    siblings = FakeFetch([SubOrchestrationRecord(instance_id="child-1", name="Child", timestamp=T0)])
    details = FakeFetch(_status(history=[{"Name": "Step"}]))
    settings = MonitorSettings(correlate_sub_orchestrations=False, resolve_last_event=False)

    expanded = await StatusEnricher(settings=settings).enrich(
        _status(history=history), details=details, sub_orchestrations=siblings
    )

    assert "subOrchestrationId" not in expanded.history[0]
    assert await expanded.get_last_event() == ""
    assert siblings.await_count == 0
    assert details.await_count == 0


@pytest.mark.asyncio
async def test_to_dict_serializes_camel_case_record():
    """Test the serialized shape consumed by the UI."""
    history = [{"EventType": "SubOrchestrationInstanceCompleted", "FunctionName": "Child", "ScheduledTime": T0}]
    siblings = FakeFetch([SubOrchestrationRecord(instance_id="child-1", name="Child", timestamp=T0)])
    details = FakeFetch(_status(history=[{"Name": "Child"}]))

    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(
        _status("@counter@c1", history=history), details=details, sub_orchestrations=siblings
    )
    data = await expanded.to_dict()

    assert set(data) == {
        "name",
        "instanceId",
        "createdTime",
        "lastUpdatedTime",
        "input",
        "output",
        "runtimeStatus",
        "customStatus",
        "history",
        "entityType",
        "entityId",
        "lastEvent",
    }
    assert data["instanceId"] == "@counter@c1"
    assert data["runtimeStatus"] == "Completed"
    assert data["entityType"] == "DurableEntity"
    assert data["entityId"] == {"type": "counter", "key": "c1"}
    assert data["lastEvent"] == "Child"
    assert data["history"][0]["subOrchestrationId"] == "child-1"


@pytest.mark.asyncio
async def test_to_dict_for_orchestration_has_null_entity_id():
    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(_status())

    data = await expanded.to_dict()

    assert data["entityType"] == "Orchestration"
    assert data["entityId"] is None
    assert data["lastEvent"] == ""


@pytest.mark.asyncio
async def test_expand_status_uses_default_enricher(monkeypatch):
    monkeypatch.delenv("MONITOR_CORRELATE_SUB_ORCHESTRATIONS", raising=False)
    history = [{"EventType": "SubOrchestrationInstanceFailed", "FunctionName": "Child", "ScheduledTime": T0}]
    siblings = FakeFetch([SubOrchestrationRecord(instance_id="child-9", name="Child", timestamp=T0)])

    expanded = await expand_status(_status(history=history), sub_orchestrations=siblings)

    assert expanded.history[0]["subOrchestrationId"] == "child-9"


@pytest.mark.asyncio
async def test_disabled_fetches_are_released():
    """Test handles the enricher will never await are closed."""

    async def fetch_details():
        return _status()

    async def fetch_children():
        return []

    details = fetch_details()
    siblings = fetch_children()
    settings = MonitorSettings(correlate_sub_orchestrations=False, resolve_last_event=False)

    await StatusEnricher(settings=settings).enrich(_status(), details=details, sub_orchestrations=siblings)

    assert inspect.getcoroutinestate(details) == inspect.CORO_CLOSED
    assert inspect.getcoroutinestate(siblings) == inspect.CORO_CLOSED


@pytest.mark.asyncio
async def test_close_releases_unread_details():
    """Test close() drops an unread detailed fetch and leaves an empty last event."""

    async def fetch_details():
        return _status(history=[{"Name": "Step"}])

    details = fetch_details()
    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(_status(), details=details)

    expanded.close()

    assert inspect.getcoroutinestate(details) == inspect.CORO_CLOSED
    assert await expanded.get_last_event() == ""


@pytest.mark.asyncio
async def test_close_after_read_keeps_value():
    details = FakeFetch(_status(history=[{"Name": "Step"}]))
    expanded = await StatusEnricher(settings=MonitorSettings()).enrich(_status(), details=details)

    assert await expanded.get_last_event() == "Step"
    expanded.close()

    assert await expanded.get_last_event() == "Step"
