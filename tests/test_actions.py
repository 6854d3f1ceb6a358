"""Tests for the workflow host interface."""
import io
import os

import pytest

from setup_coolify import actions
from setup_coolify.errors import MissingInputError
from setup_coolify.types import ActionInputs


def test_get_input_strips_whitespace():
    env = {"INPUT_VERSION": "  v1.4.0 \n"}
    assert actions.get_input("version", environ=env) == "v1.4.0"


def test_get_input_name_with_spaces():
    env = {"INPUT_CONTEXT_NAME": "prod"}
    assert actions.get_input("context name", environ=env) == "prod"


def test_get_input_required_missing():
    with pytest.raises(MissingInputError, match="Input required and not supplied: token"):
        actions.get_input("token", required=True, environ={"INPUT_TOKEN": "  "})


def test_read_inputs_defaults(config):
    inputs = actions.read_inputs(config, {"INPUT_TOKEN": "s3cret"})

    assert inputs == ActionInputs(
        version="latest",
        token="s3cret",
        url="https://app.coolify.io",
        context="actions-context",
    )


def test_read_inputs_explicit(config):
    env = {
        "INPUT_VERSION": "1.3.9",
        "INPUT_TOKEN": "s3cret",
        "INPUT_URL": "https://coolify.example.com",
        "INPUT_CONTEXT": "staging",
    }
    inputs = actions.read_inputs(config, env)

    assert inputs.version == "1.3.9"
    assert inputs.url == "https://coolify.example.com"
    assert inputs.context == "staging"


def test_add_path_updates_process_and_github_path(tmp_path):
    github_path = tmp_path / "github_path"
    github_path.write_text("")
    env = {"PATH": "/usr/bin", "GITHUB_PATH": str(github_path)}
    install = tmp_path / "coolify" / "1.4.0" / "amd64"

    actions.add_path(install, env)

    assert env["PATH"] == f"{install}{os.pathsep}/usr/bin"
    assert github_path.read_bytes() == f"{install}{os.linesep}".encode()


def test_add_path_appends_one_line_per_call(tmp_path):
    github_path = tmp_path / "github_path"
    env = {"GITHUB_PATH": str(github_path)}

    actions.add_path(tmp_path / "a", env)
    actions.add_path(tmp_path / "b", env)

    assert b"\r\r" not in github_path.read_bytes()
    assert github_path.read_text().splitlines() == [str(tmp_path / "a"), str(tmp_path / "b")]


def test_add_path_outside_runner(tmp_path):
    env = {}
    actions.add_path(tmp_path, env)
    assert env["PATH"] == str(tmp_path)


def test_set_secret_masks_value():
    out = io.StringIO()
    actions.set_secret("s3cret", out)
    assert out.getvalue() == "::add-mask::s3cret\n"


def test_set_failed_reports_error():
    out = io.StringIO()
    status = actions.set_failed("Failed to download coolify.\nTried versions: 1.4.0", out)

    assert status == 1
    assert out.getvalue() == "::error::Failed to download coolify.%0ATried versions: 1.4.0\n"
