# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the command line entry point."""

import orjson
import pytest

from responses_compliance import cli
from responses_compliance.common.models import TestResult, TestStatus
from responses_compliance.compliance.templates import TEST_TEMPLATES

BASE_ARGS = ["--base-url", "https://api.test/v1", "--api-key", "sk-test", "--model", "m"]


def _fake_runner(status: TestStatus, calls: list):
    async def _run_all_tests(config, on_progress, *, templates):
        calls.append((config, templates))
        results = []
        for template in templates:
            on_progress(TestResult.running(template))
            result = TestResult(
                id=template.id,
                name=template.name,
                description=template.description,
                status=status,
                duration=1.0,
                errors=[] if status == TestStatus.PASSED else ["boom"],
            )
            on_progress(result)
            results.append(result)
        return results

    return _run_all_tests


class TestCli:
    def test_list_command(self, capsys):
        cli.main(["list"])

        output = capsys.readouterr().out
        for template in TEST_TEMPLATES:
            assert template.id in output

    def test_run_all_pass(self, monkeypatch, capsys):
        calls: list = []
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.PASSED, calls))

        cli.main(BASE_ARGS)

        config, templates = calls[0]
        assert config.base_url == "https://api.test/v1"
        assert config.api_key == "sk-test"
        assert config.model == "m"
        assert config.use_bearer_prefix is True
        assert templates == TEST_TEMPLATES
        assert "6/6 passed" in capsys.readouterr().out

    def test_run_failure_exits_one(self, monkeypatch):
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.FAILED, []))

        with pytest.raises(SystemExit) as exc_info:
            cli.main(BASE_ARGS)

        assert exc_info.value.code == 1

    def test_only_selects_templates(self, monkeypatch):
        calls: list = []
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.PASSED, calls))

        cli.main([*BASE_ARGS, "--only", "multi-turn", "--only", "basic-response"])

        _, templates = calls[0]
        assert [t.id for t in templates] == ["basic-response", "multi-turn"]

    def test_unknown_only_exits_two(self, monkeypatch):
        calls: list = []
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.PASSED, calls))

        with pytest.raises(SystemExit) as exc_info:
            cli.main([*BASE_ARGS, "--only", "nope"])

        assert exc_info.value.code == 2
        assert calls == []

    def test_json_output(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.PASSED, []))

        cli.main([*BASE_ARGS, "--json", "--only", "tool-calling"])

        payload = orjson.loads(capsys.readouterr().out)
        assert payload == [
            {
                "id": "tool-calling",
                "name": "Tool Calling",
                "description": "Define a function tool and verify function_call output",
                "status": "passed",
                "duration": 1.0,
                "request": None,
                "response": None,
                "errors": [],
                "stream_events": None,
            }
        ]

    def test_auth_options(self, monkeypatch):
        calls: list = []
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.PASSED, calls))

        cli.main([*BASE_ARGS, "--auth-header", "x-api-key", "--no-bearer"])

        config, _ = calls[0]
        assert config.auth_header_name == "x-api-key"
        assert config.use_bearer_prefix is False

    def test_api_key_from_environment(self, monkeypatch):
        calls: list = []
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.PASSED, calls))
        monkeypatch.setenv("RESPONSES_COMPLIANCE_API_KEY", "sk-env")

        cli.main(["--base-url", "https://api.test", "--model", "m"])

        config, _ = calls[0]
        assert config.api_key == "sk-env"

    @pytest.mark.parametrize(
        "args",
        [
            ["--base-url", "", "--api-key", "sk-test", "--model", "m"],
            ["--base-url", "https://api.test", "--api-key", "sk-test", "--model", ""],
            ["--base-url", "https://api.test", "--model", "m"],
        ],
        ids=["empty-base-url", "empty-model", "missing-api-key"],
    )
    def test_invalid_config_exits_two(self, monkeypatch, args):
        calls: list = []
        monkeypatch.setattr(cli, "run_all_tests", _fake_runner(TestStatus.PASSED, calls))
        for name in ("BASE_URL", "API_KEY", "MODEL"):
            monkeypatch.delenv(f"RESPONSES_COMPLIANCE_{name}", raising=False)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(args)

        assert exc_info.value.code == 2
        assert calls == []
