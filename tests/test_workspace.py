import json
import sys

import pytest

from create_discord_bot.errors import UnsafePath
from create_discord_bot.project.schemas import dump_json, synthesize_manifest
from create_discord_bot.project.workspace import Workspace


def test_path_ok(tmp_path):
    ws = Workspace(tmp_path / "bot")
    assert ws.path("src", "index.js") == tmp_path / "bot" / "src" / "index.js"


def test_path_traversal(tmp_path):
    ws = Workspace(tmp_path / "bot")
    with pytest.raises(UnsafePath, match="Refusing to access path"):
        ws.path("..", "secret.txt")
    with pytest.raises(UnsafePath, match="Refusing to access path"):
        ws.path("src", "../../secret.txt")


@pytest.mark.skipif(sys.platform == "win32", reason="needs symlinks")
def test_sync_refuses_symlink_out_of_project(tmp_path):
    outside = tmp_path / "shared"
    outside.mkdir()
    (tmp_path / "bot").mkdir()
    (tmp_path / "bot" / "core").symlink_to(outside, target_is_directory=True)
    src_root = tmp_path / "template"
    (src_root / "core").mkdir(parents=True)
    (src_root / "core" / "Bot.js").write_text("x")

    with pytest.raises(UnsafePath):
        Workspace(tmp_path / "bot").sync(src_root, "core")
    assert list(outside.iterdir()) == []


def test_create_fails_if_exists(tmp_path):
    ws = Workspace(tmp_path / "bot")
    ws.create()
    assert (tmp_path / "bot").is_dir()
    with pytest.raises(FileExistsError):
        ws.create()


def test_create_makes_parents_for_scoped_names(tmp_path):
    Workspace(tmp_path / "@scope" / "bot").create()
    assert (tmp_path / "@scope" / "bot").is_dir()


def test_write_json_format(tmp_path):
    ws = Workspace(tmp_path)
    ws.write_json("token.json", {"token": "abc"})
    assert (tmp_path / "token.json").read_text() == '{\n  "token": "abc"\n}\n'
    assert ws.read_json("token.json") == {"token": "abc"}


def test_copy_tree_merges_and_overwrites(tmp_path):
    src = tmp_path / "src"
    (src / "core").mkdir(parents=True)
    (src / "core" / "a.js").write_text("new a")
    dest = tmp_path / "dest"
    (dest / "core").mkdir(parents=True)
    (dest / "core" / "a.js").write_text("old a")
    (dest / "core" / "mine.js").write_text("keep me")

    Workspace(dest).copy_tree(src)

    assert (dest / "core" / "a.js").read_text() == "new a"
    assert (dest / "core" / "mine.js").read_text() == "keep me"


def test_sync_file_and_dir(tmp_path):
    src = tmp_path / "tpl"
    (src / "src" / "core").mkdir(parents=True)
    (src / "src" / "core" / "Bot.js").write_text("bot")
    (src / "src" / "index.js").write_text("index")
    dest = tmp_path / "project"
    dest.mkdir()

    ws = Workspace(dest)
    ws.sync(src, "src/core")
    ws.sync(src, "src/index.js")

    assert (dest / "src" / "core" / "Bot.js").read_text() == "bot"
    assert (dest / "src" / "index.js").read_text() == "index"


def test_synthesize_manifest_keeps_key_order():
    template = {"name": "discord-bot", "version": "1.0.0", "description": "x", "main": "src/index.js"}
    out = synthesize_manifest(template, name="sample-app", description="Generated by me.")
    assert list(out) == ["name", "version", "description", "main"]
    assert out["name"] == "sample-app"
    assert out["description"] == "Generated by me."
    assert template["name"] == "discord-bot"


def test_synthesize_manifest_adds_missing_description():
    out = synthesize_manifest({"name": "a", "version": "1.0.0"}, name="b", description="d")
    assert out == {"name": "b", "version": "1.0.0", "description": "d"}


def test_dump_json_is_pretty_and_newline_terminated():
    text = dump_json({"a": [1, 2]})
    assert text.endswith("}\n")
    assert json.loads(text) == {"a": [1, 2]}
    assert '\n  "a": [\n    1,' in text
