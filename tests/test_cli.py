# ===============================================
# tests/test_cli.py
# End-to-end runs of `namegen` against a stubbed
# /api/chat endpoint.
# ===============================================

import pytest

from conftest import FakeResponse, chat_reply
from namegen.cli import main
from namegen.errors import Cancelled
from namegen.generate import NameGenerator


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("OLLAMA_HOST", "http://localhost:11434")
    monkeypatch.setenv("LLM", "qwen2.5:0.5b")


def data_rows(path):
    return path.read_text(encoding="utf-8").splitlines()[2:]


def test_fifteen_dwarves(env, stub_server, clean_env):
    session = stub_server(*[chat_reply({"name": "Thorin", "kind": "Dwarf"}) for _ in range(15)])
    assert main([]) == 0
    rows = data_rows(clean_env / "characters.Dwarf.md")
    assert len(rows) == 15
    assert all("| Thorin      | Dwarf       |" in r for r in rows)
    assert len(session.calls) == 15
    assert all(c["json"]["stream"] is False for c in session.calls)


def test_single_elf(env, stub_server, clean_env, monkeypatch):
    monkeypatch.setenv("KIND", "Elf")
    stub_server(chat_reply({"name": "Elara", "kind": "Elf"}))
    assert main(["--batch-size", "1"]) == 0
    assert data_rows(clean_env / "characters.Elf.md") == ["| 1   | Elara      | Elf       |"]


def test_malformed_json_on_third_iteration(env, stub_server, clean_env):
    stub_server(
        chat_reply({"name": "Brokk", "kind": "Dwarf"}),
        chat_reply({"name": "Durin", "kind": "Dwarf"}),
        chat_reply("not-json"),
    )
    assert main([]) != 0
    assert not (clean_env / "characters.Dwarf.md").exists()


def test_kind_drift_is_written_as_returned(env, stub_server, clean_env):
    stub_server(chat_reply({"name": "Karl", "kind": "knight"}))
    assert main(["--batch-size", "1", "--kind", "Dwarf"]) == 0
    assert data_rows(clean_env / "characters.Dwarf.md") == ["| 1   | Karl      | knight       |"]


def test_missing_llm_issues_no_request(monkeypatch, stub_server, clean_env):
    monkeypatch.setenv("OLLAMA_HOST", "http://localhost:11434")
    session = stub_server()
    assert main([]) == 2
    assert session.calls == []
    assert not (clean_env / "characters.Dwarf.md").exists()


def test_http_500(env, stub_server, clean_env):
    stub_server(FakeResponse(500, {"error": "internal"}))
    assert main([]) == 3
    assert not (clean_env / "characters.Dwarf.md").exists()


def test_batch_size_zero_writes_header_only(env, stub_server, clean_env):
    session = stub_server()
    assert main(["--batch-size", "0", "--kind", "Human"]) == 0
    assert (clean_env / "characters.Human.md").read_text(encoding="utf-8").count("\n") == 2
    assert session.calls == []


def test_guided_profile_and_output_dir(env, stub_server, clean_env):
    out = clean_env / "out"
    out.mkdir()
    session = stub_server(chat_reply({"name": "Theowyn", "kind": "Human"}))
    assert main(["--profile", "guided", "--kind", "Human", "--batch-size", "1", "--output-dir", str(out), "--decoding", "deterministic"]) == 0
    assert (out / "characters.Human.md").exists()
    sent = session.calls[0]["json"]
    assert [m["role"] for m in sent["messages"]] == ["system", "system", "user"]
    assert sent["options"]["temperature"] == 0.0


def test_echo_client_runs_offline(env, clean_env):
    assert main(["--client", "echo", "--batch-size", "2", "--kind", "Elf"]) == 0
    assert data_rows(clean_env / "characters.Elf.md") == [
        "| 1   | Echo-1      | Elf       |",
        "| 2   | Echo-2      | Elf       |",
    ]


def test_unknown_decoding_profile_is_config_error(env, stub_server):
    session = stub_server()
    assert main(["--decoding", "chaotic"]) == 2
    assert session.calls == []


def test_ctrl_c_mid_batch_exits_130_and_writes_nothing(env, stub_server, clean_env):
    session = stub_server(chat_reply({"name": "Brokk", "kind": "Dwarf"}), KeyboardInterrupt())
    assert main([]) == 130
    assert len(session.calls) == 2
    assert not (clean_env / "characters.Dwarf.md").exists()


def test_cancelled_batch_exits_130_and_writes_nothing(env, clean_env, monkeypatch):
    def cancelled(self, batch_size=None, cancel=None):
        raise Cancelled("batch cancelled after 1 of 15 generations")

    monkeypatch.setattr(NameGenerator, "generate_batch", cancelled)
    assert main([]) == 130
    assert not (clean_env / "characters.Dwarf.md").exists()


def test_host_without_scheme_is_config_error(monkeypatch, clean_env):
    monkeypatch.setenv("OLLAMA_HOST", "localhost:11434")
    monkeypatch.setenv("LLM", "qwen2.5:0.5b")
    assert main(["--batch-size", "1"]) == 2
    assert not (clean_env / "characters.Dwarf.md").exists()
