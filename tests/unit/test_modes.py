# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from methodwizard.catalog import HTTP_METHODS
from methodwizard.http import HttpResponse, StubHttpClient
from methodwizard.probe import ProbeExecutor
from methodwizard.scan import FanOutCoordinator
from methodwizard.scan.modes import (
    METHOD_NOT_ALLOWED,
    build_work_items,
    is_reportable,
    probe_single_target,
    probe_targets,
    probe_targets_all_methods,
)
from methodwizard.targets import split_targets


def _allowing(*allowed, body_length=10):
    def respond(request):
        status = 200 if request.method in allowed else METHOD_NOT_ALLOWED
        return HttpResponse(ok=True, status_code=status, body_length=body_length)

    return respond


def _coordinator(client):
    return FanOutCoordinator(ProbeExecutor(client))


def test_work_item_cardinality():
    targets = ["http://a.test/", "http://b.test/", ""]
    assert len(build_work_items(targets, HTTP_METHODS)) == len(targets) * len(HTTP_METHODS)
    assert len(build_work_items(targets, ["GET"])) == len(targets)
    items = build_work_items(["http://a.test/", "http://b.test/"], ["GET", "POST"])
    assert [(i.url, i.method) for i in items] == [
        ("http://a.test/", "GET"),
        ("http://a.test/", "POST"),
        ("http://b.test/", "GET"),
        ("http://b.test/", "POST"),
    ]


def test_is_reportable_only_rejects_405():
    client = StubHttpClient(default=_allowing("GET"))
    executor = ProbeExecutor(client)
    assert is_reportable(executor.probe("http://a.test/", "GET")) is True
    assert is_reportable(executor.probe("http://a.test/", "PUT")) is False


def test_single_target_prints_every_method(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    lines = []
    client = StubHttpClient(default=_allowing("GET", body_length=25))

    batch = probe_single_target(_coordinator(client), "http://single.test/", out=lines.append)

    assert lines[0] == "[*] Testing HTTP methods on: http://single.test/"
    result_lines = lines[1:]
    assert len(result_lines) == len(HTTP_METHODS) == 26
    assert [line for line in result_lines if " 200 " in line] == ["[GET] 200 (25 bytes)"]
    assert sum(1 for line in result_lines if " 405 " in line) == 25
    assert len(batch.results) == 26
    assert list(tmp_path.iterdir()) == []


def test_multi_target_single_method_drops_unreachable():
    client = StubHttpClient(
        {
            ("GET", "http://one.test/"): HttpResponse(ok=True, status_code=200, body_length=5),
            ("GET", "http://two.test/"): HttpResponse(ok=True, status_code=302, body_length=0),
        }
    )
    urls = ["http://one.test/", "http://unreachable.test/", "http://two.test/"]

    batch = probe_targets(_coordinator(client), urls, "GET", out=lambda _line: None)

    assert len(batch.results) == 2
    assert {r.method for r in batch.results} == {"GET"}
    assert "http://unreachable.test/" not in {r.url for r in batch.results}
    assert batch.failures == 1
    assert {r.method for r in client.requests} == {"GET"}


def test_multi_target_single_method_filters_405():
    client = StubHttpClient(default=_allowing("GET"))
    batch = probe_targets(_coordinator(client), ["http://a.test/", "http://b.test/"], "DELETE", out=lambda _line: None)
    assert batch.results == []
    assert batch.filtered == 2


def test_multi_target_all_methods_cross_product():
    client = StubHttpClient(default=_allowing("GET", "POST"))
    urls = ["http://one.test/", "http://two.test/"]

    batch = probe_targets_all_methods(_coordinator(client), urls, out=lambda _line: None)

    assert len(client.requests) == len(urls) * len(HTTP_METHODS)
    assert sorted((r.url, r.method) for r in batch.results) == [
        ("http://one.test/", "GET"),
        ("http://one.test/", "POST"),
        ("http://two.test/", "GET"),
        ("http://two.test/", "POST"),
    ]
    assert all(r.status != METHOD_NOT_ALLOWED for r in batch.results)


def test_blank_lines_become_dropped_probes():
    urls = split_targets("http://one.test/\n\nhttp://two.test/\n")
    assert urls == ["http://one.test/", "", "http://two.test/", ""]

    def respond(request):
        if not request.url:
            return HttpResponse.failure(ValueError("missing scheme"), stage="send")
        return _allowing("GET")(request)

    client = StubHttpClient(default=respond)
    batch = probe_targets(_coordinator(client), urls, "GET", out=lambda _line: None)

    assert len(client.requests) == 4
    assert batch.failures == 2
    assert sorted(r.url for r in batch.results) == ["http://one.test/", "http://two.test/"]


def test_repeated_runs_yield_equal_result_sets():
    client = StubHttpClient(default=_allowing("GET", "OPTIONS", "PROPFIND"))
    urls = ["http://a.test/", "http://b.test/", "http://c.test/"]
    coordinator = _coordinator(client)

    first = probe_targets_all_methods(coordinator, urls, out=lambda _line: None)
    second = probe_targets_all_methods(coordinator, urls, out=lambda _line: None)

    assert set(first.results) == set(second.results)
    assert len(first.results) == 9
