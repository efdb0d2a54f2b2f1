import argparse

from cobo_custody.cli import add_credential_args, client_from_args


def test_flags_override_environment(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("")
    monkeypatch.setenv("COBO_API_KEY", "env-key")
    monkeypatch.setenv("COBO_API_SECRET", "env-secret")
    parser = argparse.ArgumentParser()
    add_credential_args(parser)

    args = parser.parse_args([
        "--api-key", "flag-key",
        "--base-url", "http://localhost:3000/",
        "--env-file", str(env_file),
        "--quiet",
    ])
    client = client_from_args(args)

    assert client.config.api_key == "flag-key"
    assert client.config.api_secret == "env-secret"
    assert client.config.base_url == "http://localhost:3000"
