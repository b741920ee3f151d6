import json
import httpx
import pytest

from planchat.api.errors import ApplicationError, PlanSyncError, TransportError
from planchat.api.gateway import CommandGateway
from planchat.domain.Course import Priority
from planchat.logic.conversation.formatting import compose_success_message

BASE = "http://service.test/api/chatbot"


def make_gateway(handler):
    return CommandGateway(base_url=BASE, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_send_posts_command_and_parses_result():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={
            "success": True,
            "message": "Command history retrieved",
            "commandHistory": [{"command": "list subjects", "formattedTimestamp": "2025-12-01 10:00:00"}],
            "updatedPlan": {"courses": [{"id": "Math", "workloadHours": 10, "priority": "HIGH"}]},
        })

    async with make_gateway(handler) as gateway:
        result = await gateway.send('add subject "Math" hours 10 priority HIGH')

    assert seen["method"] == "POST"
    assert seen["url"] == f"{BASE}/command"
    assert seen["body"] == {"command": 'add subject "Math" hours 10 priority HIGH'}
    assert result.success is True
    assert result.command_history[0].command == "list subjects"
    assert result.updated_plan.courses[0].priority is Priority.HIGH
    assert result.schedule is None


@pytest.mark.asyncio
async def test_send_application_failure():
    def handler(request):
        return httpx.Response(200, json={"success": False, "message": "Error: Unknown command"})

    async with make_gateway(handler) as gateway:
        with pytest.raises(ApplicationError) as exc:
            await gateway.send("fly to the moon")
    assert exc.value.message == "Error: Unknown command"


@pytest.mark.asyncio
async def test_send_non_2xx_with_result_body_is_application_failure():
    def handler(request):
        return httpx.Response(400, json={"success": False, "message": "Bad command"})

    async with make_gateway(handler) as gateway:
        with pytest.raises(ApplicationError):
            await gateway.send("x")


@pytest.mark.asyncio
async def test_send_non_2xx_without_json_is_transport_failure():
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    async with make_gateway(handler) as gateway:
        with pytest.raises(TransportError) as exc:
            await gateway.send("list subjects")
    assert exc.value.status_code == 502
    assert not isinstance(exc.value, ApplicationError)


@pytest.mark.asyncio
async def test_send_malformed_json_is_transport_failure():
    def handler(request):
        return httpx.Response(200, text="{not json")

    async with make_gateway(handler) as gateway:
        with pytest.raises(TransportError):
            await gateway.send("list subjects")


@pytest.mark.asyncio
async def test_send_result_missing_success_is_transport_failure():
    def handler(request):
        return httpx.Response(200, json={"message": "hello"})

    async with make_gateway(handler) as gateway:
        with pytest.raises(TransportError):
            await gateway.send("list subjects")


@pytest.mark.asyncio
async def test_send_network_error_is_transport_failure_and_not_retried():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("Connection refused", request=request)

    async with make_gateway(handler) as gateway:
        with pytest.raises(TransportError) as exc:
            await gateway.send('add subject "Math" hours 10 priority HIGH')
    assert "Connection refused" in exc.value.reason
    assert len(calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("body", ["", "   \n"])
async def test_fetch_plan_empty_body_means_no_plan(body):
    def handler(request):
        return httpx.Response(200, text=body)

    async with make_gateway(handler) as gateway:
        assert await gateway.fetch_plan() is None


@pytest.mark.asyncio
async def test_fetch_plan_parses_courses():
    def handler(request):
        assert request.url.path == "/api/chatbot/plan"
        return httpx.Response(200, json={
            "planName": None,
            "courses": [
                {"id": "Math", "workloadHours": 10.0, "priority": "HIGH", "examDate": [2025, 12, 20]},
                {"id": "Art", "workloadHours": 2.5, "priority": "LOW", "components": []},
            ],
            "availability": {},
        })

    async with make_gateway(handler) as gateway:
        plan = await gateway.fetch_plan()
    assert [c.id for c in plan.courses] == ["Math", "Art"]
    assert plan.courses[0].exam_date == "2025-12-20"
    assert plan.courses[1].workload_hours == 2.5


@pytest.mark.asyncio
async def test_fetch_plan_failures_are_plan_sync_errors():
    responses = iter([
        httpx.Response(503, text="unavailable"),
        httpx.Response(200, text="[oops"),
        httpx.Response(200, json={"courses": [{"workloadHours": 3}]}),
    ])

    def handler(request):
        return next(responses)

    async with make_gateway(handler) as gateway:
        for _ in range(3):
            with pytest.raises(PlanSyncError):
                await gateway.fetch_plan()


@pytest.mark.asyncio
async def test_fetch_schedule_text_is_verbatim():
    text = "=== STUDY SCHEDULE ===\n  Mon  Math   2h\n\n  Tue  Art    1h\n"

    def handler(request):
        return httpx.Response(200, text=text)

    async with make_gateway(handler) as gateway:
        assert await gateway.fetch_schedule_text() == text


@pytest.mark.asyncio
async def test_saved_schedules_and_load():
    def handler(request):
        if request.url.path.endswith("/schedules/history"):
            return httpx.Response(200, json=[
                {"path": "/home/u/.scheduler-chatbot/schedules/schedule_2.json",
                 "filename": "schedule_2.json", "timestamp": 1700000000000, "formattedDate": "2023-11-14 22:13"},
            ])
        body = json.loads(request.content)
        if body["filepath"] == "missing.json":
            return httpx.Response(200, json={"success": False, "message": "Failed to load schedule: missing.json"})
        return httpx.Response(200, json={"success": True, "message": "Schedule loaded successfully", "schedule": {}})

    async with make_gateway(handler) as gateway:
        saved = await gateway.list_saved_schedules()
        assert saved[0].filename == "schedule_2.json"
        result = await gateway.load_schedule(saved[0].path)
        assert result.message == "Schedule loaded successfully"
        with pytest.raises(ApplicationError):
            await gateway.load_schedule("missing.json")


@pytest.mark.asyncio
@pytest.mark.parametrize("updated_plan,expected", [
    ({}, "✅ ok"),
    ({"courses": None}, "✅ ok"),
    ({"courses": []}, "✅ ok\n\n📚 Current Subjects: 0"),
    ({"courses": [{"id": "Math", "workloadHours": 10, "priority": "HIGH"}]}, "✅ ok\n\n📚 Current Subjects: 1"),
])
async def test_subject_count_only_when_courses_sent(updated_plan, expected):
    def handler(request):
        return httpx.Response(200, json={"success": True, "message": "ok", "updatedPlan": updated_plan})

    async with make_gateway(handler) as gateway:
        result = await gateway.send("list subjects")
    assert compose_success_message(result) == expected
