import hashlib

import httpx
import pytest

from tableside.deploy import main, menu_content_hash, should_restart, smoke_check


def test_menu_content_hash_is_sha256_of_bytes(menu_file):
    with open(menu_file, "rb") as fh:
        expected = hashlib.sha256(fh.read()).hexdigest()
    assert menu_content_hash(menu_file) == expected


def test_should_restart_only_on_change(menu_file):
    current = menu_content_hash(menu_file)
    assert should_restart(menu_file, None) is True
    assert should_restart(menu_file, current) is False
    assert should_restart(menu_file, "0" * 64) is True


def _client(statuses):
    def handler(request):
        return httpx.Response(statuses.get(request.url.path, 404), text="ok")

    return httpx.Client(transport=httpx.MockTransport(handler))


def test_smoke_check_passes_when_both_paths_served():
    client = _client({"/": 200, "/listofitems.txt": 200})
    assert smoke_check("http://web.local/", client) == []


def test_smoke_check_reports_missing_menu():
    client = _client({"/": 200})
    failures = smoke_check("http://web.local", client)
    assert failures == ["GET http://web.local/listofitems.txt returned 404"]


def test_smoke_check_reports_transport_errors():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    assert len(smoke_check("http://web.local", client)) == 2


def test_cli_hash_and_check_restart(menu_file, capsys):
    assert main(["hash", menu_file]) == 0
    digest = capsys.readouterr().out.strip()
    assert digest == menu_content_hash(menu_file)

    assert main(["check-restart", menu_file, "--previous", digest]) == 1
    assert capsys.readouterr().out.startswith("unchanged")
    assert main(["check-restart", menu_file]) == 0
    assert capsys.readouterr().out.startswith("restart")


def test_cli_requires_command():
    with pytest.raises(SystemExit):
        main([])
