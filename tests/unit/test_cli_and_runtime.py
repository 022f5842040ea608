# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from methodwizard import runtime
from methodwizard.catalog import HTTP_METHODS
from methodwizard.cli.main import build_parser, main
from methodwizard.config import HttpSettings
from methodwizard.http import HttpResponse, StubHttpClient
from methodwizard.runtime import MethodWizard


def _allowing(*allowed):
    def respond(request):
        if not request.url or "unreachable" in request.url:
            return HttpResponse.failure(ConnectionError("refused"), stage="send")
        status = 200 if request.method in allowed else 405
        return HttpResponse(ok=True, status_code=status, body_length=len(request.url))

    return respond


@pytest.fixture
def stub_client(monkeypatch):
    created = {}

    def factory(settings=None):
        client = StubHttpClient(default=_allowing("GET", "POST"))
        created["client"] = client
        created["settings"] = settings
        return client

    monkeypatch.setattr(runtime, "create_default_http_client", factory)
    return created


def test_build_parser_defaults_and_single_dash_flags():
    parser = build_parser()
    args = parser.parse_args([])
    assert args.url == ""
    assert args.url_list == ""
    assert args.method == "GET"
    assert args.output == "results.json"
    assert args.combine is False
    assert args.workers is None

    args = parser.parse_args(["-w", "urls.txt", "-method", "PROPFIND", "-o", "out.json", "-combine", "-workers", "4"])
    assert args.url_list == "urls.txt"
    assert args.method == "PROPFIND"
    assert args.output == "out.json"
    assert args.combine is True
    assert args.workers == 4


def test_no_flags_prints_usage(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "-u" in out
    assert "-combine" in out


def test_single_target_prints_and_writes_nothing(stub_client, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-u", "http://single.test/"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[*] Testing HTTP methods on: http://single.test/"
    assert len(lines) == 1 + len(HTTP_METHODS)
    assert list(tmp_path.iterdir()) == []
    assert stub_client["client"].closed is True


def test_single_url_takes_priority_over_list(stub_client, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-u", "http://single.test/", "-w", "does-not-exist.txt"]) == 0
    assert "Error reading file" not in capsys.readouterr().out
    assert {r.url for r in stub_client["client"].requests} == {"http://single.test/"}


def test_list_single_method_writes_json(stub_client, tmp_path, capsys):
    urls = tmp_path / "urls.txt"
    urls.write_text("http://one.test/\nhttp://unreachable.test/\nhttp://two.test/\n", encoding="utf-8")
    output = tmp_path / "out.json"

    assert main(["-w", str(urls), "-method", "GET", "-o", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data) == 2
    assert {entry["method"] for entry in data} == {"GET"}
    assert "http://unreachable.test/" not in {entry["url"] for entry in data}
    assert f"[+] Results saved to {output}" in capsys.readouterr().out


def test_list_combine_writes_cross_product(stub_client, tmp_path):
    urls = tmp_path / "urls.txt"
    urls.write_text("http://one.test/\nhttp://two.test/", encoding="utf-8")
    output = tmp_path / "combined.json"

    assert main(["-w", str(urls), "-combine", "-o", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert sorted((entry["url"], entry["method"]) for entry in data) == [
        ("http://one.test/", "GET"),
        ("http://one.test/", "POST"),
        ("http://two.test/", "GET"),
        ("http://two.test/", "POST"),
    ]
    assert all(entry["status"] != 405 for entry in data)
    assert len(stub_client["client"].requests) == 2 * len(HTTP_METHODS)


def test_missing_list_file_aborts_before_probing(stub_client, tmp_path, capsys):
    assert main(["-w", str(tmp_path / "missing.txt"), "-o", str(tmp_path / "out.json")]) == 0
    assert "[-] Error reading file:" in capsys.readouterr().out
    assert "client" not in stub_client
    assert not (tmp_path / "out.json").exists()


def test_cli_flags_override_settings(stub_client, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(["-u", "http://single.test/", "-workers", "3", "-timeout", "1.5", "-insecure"])
    settings = stub_client["settings"]
    assert settings.max_workers == 3
    assert settings.timeout == 1.5
    assert settings.verify_ssl is False


def test_method_wizard_facade_closes_injected_client():
    client = StubHttpClient(default=_allowing("GET"))
    lines = []
    with MethodWizard(http_client=client, settings=HttpSettings(max_workers=5), out=lines.append) as wizard:
        assert wizard.coordinator.max_workers == 5
        batch = wizard.multi_target(["http://a.test/", ""], "GET")
        assert [r.url for r in batch.results] == ["http://a.test/"]
        assert batch.failures == 1
    assert client.closed is True
    assert lines == ["[*] Testing GET on multiple targets..."]


def test_thread_exhaustion_is_reported_not_raised(stub_client, tmp_path, monkeypatch, capsys):
    def refuse(self, urls):  # noqa: ARG001
        raise RuntimeError("can't start new thread")

    monkeypatch.setattr(MethodWizard, "multi_target_all_methods", refuse)
    urls = tmp_path / "urls.txt"
    urls.write_text("http://one.test/\n", encoding="utf-8")
    output = tmp_path / "out.json"

    assert main(["-w", str(urls), "-combine", "-o", str(output)]) == 0

    out = capsys.readouterr().out
    assert "can't start new thread" in out
    assert "-workers" in out
    assert not output.exists()
    assert stub_client["client"].closed is True


def test_workers_help_mentions_large_combine_runs():
    workers = next(action for action in build_parser()._actions if "-workers" in action.option_strings)
    assert "-combine" in workers.help
