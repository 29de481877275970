"""
Tests for settings loading and the batch broadcast entry point.
"""
import asyncio
import importlib.util
import json
from pathlib import Path
import httpx
import pytest

from txkit.config.loader import get_core_config
from txkit.main import broadcast_batch
from txkit.utils.decoders import RawLogWithInterfaceDecoder
from txkit.utils.models.settings_model import Settings
from tests.conftest import ALICE, BOB, ERC20_EVENTS_ABI, TRANSFER_TOPIC, make_event_log


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setenv("TXKIT_SETTINGS_FILE", str(path))
    get_core_config.cache_clear()
    yield path
    get_core_config.cache_clear()


def test_loads_settings_with_defaults(settings_file):
    settings_file.write_text(json.dumps({"rpc": {"url": "http://127.0.0.1:8545"}}))

    settings = get_core_config()

    assert settings.rpc.url == "http://127.0.0.1:8545"
    assert settings.rpc.retry == 0
    assert settings.decoder.kind == "raw_log"
    assert settings.batch.event_name is None
    assert get_core_config() is settings


def test_template_strings_are_coerced(settings_file):
    settings_file.write_text(json.dumps({
        "rpc": {"url": "http://node", "retry": "2", "request_time_out": "10"},
        "logs": {"debug_mode": "true", "write_to_files": "false", "level": "DEBUG"},
    }))

    settings = get_core_config()
    assert settings.rpc.retry == 2
    assert settings.logs.debug_mode is True


def test_missing_settings_file(settings_file):
    with pytest.raises(RuntimeError, match="Settings file not found"):
        get_core_config()


def test_invalid_settings_json(settings_file):
    settings_file.write_text("{not json")
    with pytest.raises(RuntimeError, match="Error decoding settings file"):
        get_core_config()


def test_invalid_settings_values(settings_file):
    settings_file.write_text(json.dumps({"logs": {}}))
    with pytest.raises(RuntimeError, match="Error loading settings"):
        get_core_config()


def test_broadcast_batch_reports_every_transaction(tmp_path, make_rpc, capsys, log_messages):
    batch = tmp_path / "pre_signed.txt"
    batch.write_text("0xaa,\n0xbb,\n")
    settings = Settings(
        rpc={"url": "http://rpc.test"},
        batch={"pre_signed_file": str(batch), "output_dir": str(tmp_path), "poll_interval": 0, "event_name": "Transfer"},
    )
    receipts = {
        "0x" + "01" * 32: {"status": "0x1", "blockNumber": "0x64", "logs": [make_event_log(TRANSFER_TOPIC, ALICE, BOB, 9)]},
        "0x" + "02" * 32: {"status": "0x0", "blockNumber": "0x65", "logs": []},
    }
    hashes = {"0xaa": "0x" + "01" * 32, "0xbb": "0x" + "02" * 32}
    (tmp_path / "statuses.csv").write_text("stale\n")

    def handler(request):
        payload = json.loads(request.content)
        if payload["method"] == "eth_sendRawTransaction":
            result = hashes[payload["params"][0]]
        else:
            result = receipts[payload["params"][0]]
        return httpx.Response(200, json={"id": 1, "jsonrpc": "2.0", "result": result})

    summaries = asyncio.run(broadcast_batch(settings, make_rpc(handler), RawLogWithInterfaceDecoder(ERC20_EVENTS_ABI)))

    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("Tx Status:")]
    assert lines == ["Tx Status:0x1 Height:0x64", "Tx Status:0x0 Height:0x65"]
    assert [s.status for s in summaries] == ["0x1", "0x0"]
    assert any(f"Transfer: '{ALICE}'" in message for message in log_messages)

    assert (tmp_path / "statuses.csv").read_text() == "0xaa,0x1,0x64\n0xbb,0x0,0x65\n"


def _load_entrypoint():
    path = Path(__file__).resolve().parent.parent / "scripts" / "entrypoint.py"
    spec = importlib.util.spec_from_file_location("txkit_entrypoint", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_entrypoint_fills_optional_variables_with_defaults():
    entrypoint = _load_entrypoint()

    rendered = entrypoint.render_settings(
        json.dumps({"rpc": {"url": "${RPC_URL}"}, "batch": {"event_name": "${BATCH_EVENT_NAME}"}}),
        {"RPC_URL": "http://node"},
    )
    settings = Settings(**rendered)
    assert settings.rpc.url == "http://node"
    assert not settings.batch.event_name


def test_entrypoint_requires_rpc_url():
    entrypoint = _load_entrypoint()
    with pytest.raises(KeyError):
        entrypoint.render_settings(json.dumps({"rpc": {"url": "${RPC_URL}"}}), {})


def test_entrypoint_writes_settings_file(tmp_path, monkeypatch):
    entrypoint = _load_entrypoint()
    template_file = tmp_path / "settings.template.json"
    template_file.write_text(json.dumps({"rpc": {"url": "${RPC_URL}", "retry": "${RPC_RETRY}"}}))
    settings_file = tmp_path / "settings.json"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RPC_URL", "http://node")
    monkeypatch.delenv("RPC_RETRY", raising=False)

    entrypoint.fill_template(str(template_file), str(settings_file))

    assert json.loads(settings_file.read_text()) == {"rpc": {"url": "http://node", "retry": "0"}}
