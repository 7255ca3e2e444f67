"""End-to-end runs through create_discord_bot.scaffold()."""
import json

import pytest

import create_discord_bot
from create_discord_bot import Mode, UpdateDeclined, scaffold
from create_discord_bot.errors import InstallFailed
from create_discord_bot.steps import StepExecutor
from helpers import FakeRunner, output_of, snapshot


def _outside_core(snap):
    return {
        rel: data
        for rel, data in snap.items()
        if not (rel in ("src/index.js", "src/core") or rel.startswith("src/core/"))
    }


def test_create_end_to_end(tmp_path, executor, runner, prober, console):
    result = scaffold("sample-app", token="my-token", directory=tmp_path, executor=executor, console=console)

    target = tmp_path / "sample-app"
    assert result.mode is Mode.CREATE
    assert result.target == target.resolve()
    assert target.is_dir()

    manifest = json.loads((target / "package.json").read_text())
    assert manifest["name"] == "sample-app"
    assert manifest["description"] == f"Generated by create-discord-bot v{executor.config.version}."
    assert (target / "package.json").read_text().endswith("}\n")

    assert json.loads((target / "token.json").read_text()) == {"token": "my-token"}

    ignored = (target / ".gitignore").read_text().splitlines()
    assert "node_modules/" in ignored
    assert "token.json" in ignored

    assert runner.calls == [(executor.config.template.install, target.resolve())]
    assert prober.tokens == ["my-token"]

    out = output_of(console)
    assert "Creating directory 'sample-app'..." in out
    assert "Invite your bot:" in out
    assert "Done!" in out
    assert "$ cd sample-app/" in out


def test_create_uses_placeholder_token_by_default(tmp_path, executor):
    scaffold("sample-app", directory=tmp_path, executor=executor)
    token = json.loads((tmp_path / "sample-app" / "token.json").read_text())["token"]
    assert token == "DISCORD_BOT_TOKEN_PLACEHOLDER"


def test_create_dry_run_writes_nothing(tmp_path, executor, runner, prober, console):
    result = scaffold("sample-app", token="t", dry_run=True, directory=tmp_path, executor=executor, console=console)
    assert list(tmp_path.iterdir()) == []
    assert runner.calls == []
    assert prober.tokens == ["t"]
    assert [o.executed for o in result.outcomes] == [False] * 5 + [True]
    assert "Installing modules..." in output_of(console)


def test_invalid_name_is_rejected_before_touching_disk(tmp_path, executor):
    with pytest.raises(ValueError, match="capital letters"):
        scaffold("SampleApp", token="t", directory=tmp_path, executor=executor)
    assert list(tmp_path.iterdir()) == []


def test_update_declined_changes_nothing(tmp_path, executor, runner, prober):
    target = tmp_path / "sample-app"
    (target / "src").mkdir(parents=True)
    (target / "src" / "index.js").write_text("mine")
    before = snapshot(tmp_path)

    with pytest.raises(UpdateDeclined):
        scaffold("sample-app", update=False, directory=tmp_path, executor=executor)

    assert snapshot(tmp_path) == before
    assert runner.calls == []
    assert prober.tokens == []


def test_update_only_touches_core_files(tmp_path, executor, runner, prober):
    target = tmp_path / "sample-app"
    (target / "src" / "core").mkdir(parents=True)
    (target / "src" / "widgets").mkdir(parents=True)
    user_files = {
        "package.json": '{"name": "sample-app", "version": "9.9.9"}\n',
        "token.json": '{"token": "keep"}\n',
        "notes.txt": "hello",
        "src/widgets/custom.js": "custom widget",
        "src/core/extra.js": "user helper in core",
    }
    for rel, text in user_files.items():
        (target / rel).write_text(text)
    (target / "src" / "index.js").write_text("old entry")
    (target / "src" / "core" / "Bot.js").write_text("old bot")
    before = snapshot(target)

    result = scaffold("sample-app", update=True, directory=tmp_path, executor=executor)

    assert result.mode is Mode.UPDATE
    assert [o.name for o in result.outcomes] == ["sync_core"]
    app_dir = executor.config.app_dir
    assert (target / "src" / "index.js").read_text() == (app_dir / "src" / "index.js").read_text()
    assert (target / "src" / "core" / "Bot.js").read_text() == (app_dir / "src" / "core" / "Bot.js").read_text()
    for rel, text in user_files.items():
        assert (target / rel).read_text() == text
    assert _outside_core(snapshot(target)) == _outside_core(before)
    assert runner.calls == []
    assert prober.tokens == []


def test_update_dry_run_changes_nothing(tmp_path, executor):
    target = tmp_path / "sample-app"
    target.mkdir()
    (target / "index.js").write_text("x")
    before = snapshot(tmp_path)
    result = scaffold("sample-app", update=True, dry_run=True, directory=tmp_path, executor=executor)
    assert [o.executed for o in result.outcomes] == [False]
    assert snapshot(tmp_path) == before


def test_install_failure_propagates_and_stops(tmp_path, tool_config, console, prober):
    executor = StepExecutor(config=tool_config, console=console, runner=FakeRunner(returncode=1), prober=prober)
    with pytest.raises(InstallFailed):
        scaffold("sample-app", token="t", directory=tmp_path, executor=executor, console=console)
    # Steps before the install ran; the invite link step did not.
    assert (tmp_path / "sample-app" / "token.json").exists()
    assert prober.tokens == []
    assert "Done!" not in output_of(console)


def test_create_into_unwritable_parent_fails(tmp_path, executor):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    with pytest.raises(OSError):
        scaffold("sample-app", token="t", directory=blocker, executor=executor)


def test_public_api_exports():
    assert create_discord_bot.__version__
    for name in create_discord_bot.__all__:
        assert hasattr(create_discord_bot, name)
