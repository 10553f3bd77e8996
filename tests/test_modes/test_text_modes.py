"""Tests for the flowchart and runner modes, which never raise."""

from __future__ import annotations

import logging

import httpx
import pytest
from openai import APIConnectionError

from uci.modes.runner import NO_OUTPUT, SIMULATION_ERROR
from uci.service import CodeIntelligence


def _connection_error() -> APIConnectionError:
    return APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))


class TestFlowchart:
    @pytest.mark.asyncio
    async def test_raw_svg_returned_unchanged(self, service: CodeIntelligence, respond) -> None:
        svg = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="10" height="10"/></svg>'
        respond(svg)
        assert await service.generate_flowchart_svg("x = 1") == svg

    @pytest.mark.asyncio
    @pytest.mark.parametrize("label", ["xml", "svg"])
    async def test_fences_stripped(self, service: CodeIntelligence, respond, label: str) -> None:
        respond(f"```{label}\n<svg><circle r=\"4\"/></svg>\n```")
        assert await service.generate_flowchart_svg("x = 1") == '\n<svg><circle r="4"/></svg>\n'

    @pytest.mark.asyncio
    async def test_free_text_request(self, service: CodeIntelligence, respond) -> None:
        create = respond("<svg/>")
        await service.generate_flowchart_svg("while True: pass")
        kwargs = create.call_args.kwargs
        assert "response_format" not in kwargs
        msg = kwargs["messages"][1]["content"]
        assert msg.startswith("Code:\nwhile True: pass\n\n")
        assert "Return ONLY raw SVG" in msg

    @pytest.mark.asyncio
    async def test_empty_reply_gives_empty_string(self, service: CodeIntelligence, respond) -> None:
        respond(None)
        assert await service.generate_flowchart_svg("x") == ""

    @pytest.mark.asyncio
    async def test_failure_gives_empty_string_and_logs(
        self, service: CodeIntelligence, respond, caplog: pytest.LogCaptureFixture,
    ) -> None:
        respond(_connection_error())
        with caplog.at_level(logging.WARNING, logger="uci.modes.base"):
            assert await service.generate_flowchart_svg("x") == ""
        assert "Flowchart error" in caplog.text


class TestRunner:
    @pytest.mark.asyncio
    async def test_returns_output(self, service: CodeIntelligence, respond) -> None:
        respond("Hello, world!\n")
        assert await service.simulate_runner("print('Hello, world!')", "Python") == "Hello, world!\n"

    @pytest.mark.asyncio
    async def test_prompt_names_interpreter(self, service: CodeIntelligence, respond) -> None:
        create = respond("ok")
        await service.simulate_runner("console.log(1)", "JavaScript")
        msg = create.call_args.kwargs["messages"][1]["content"]
        assert "Act as a JavaScript interpreter." in msg
        assert "show the stack trace" in msg

    @pytest.mark.asyncio
    async def test_empty_reply_fallback(self, service: CodeIntelligence, respond) -> None:
        respond("")
        assert await service.simulate_runner("x", "Python") == NO_OUTPUT

    @pytest.mark.asyncio
    async def test_failure_fallback(self, service: CodeIntelligence, respond) -> None:
        respond(_connection_error())
        assert await service.simulate_runner("x", "Python") == SIMULATION_ERROR


class TestUnexpectedErrors:
    @pytest.mark.asyncio
    async def test_flowchart_absorbs_runtime_error(
        self, service: CodeIntelligence, respond, caplog: pytest.LogCaptureFixture,
    ) -> None:
        respond(RuntimeError("Event loop is closed"))
        with caplog.at_level(logging.WARNING, logger="uci.modes.base"):
            assert await service.generate_flowchart_svg("x") == ""
        assert "Event loop is closed" in caplog.text

    @pytest.mark.asyncio
    async def test_runner_absorbs_runtime_error(self, service: CodeIntelligence, respond) -> None:
        respond(RuntimeError("Event loop is closed"))
        assert await service.simulate_runner("x", "Python") == SIMULATION_ERROR

    @pytest.mark.asyncio
    async def test_runner_absorbs_httpx_error(self, service: CodeIntelligence, respond) -> None:
        respond(httpx.ReadError("connection reset"))
        assert await service.simulate_runner("x", "Python") == SIMULATION_ERROR


class TestTokenUsage:
    @pytest.mark.asyncio
    async def test_usage_logged_at_debug(
        self, service: CodeIntelligence, respond, caplog: pytest.LogCaptureFixture,
    ) -> None:
        respond("3\n")
        with caplog.at_level(logging.DEBUG, logger="uci.modes.base"):
            await service.simulate_runner("print(3)", "Python")
        assert "Simulate Runner used 12 input / 34 output tokens" in caplog.text
