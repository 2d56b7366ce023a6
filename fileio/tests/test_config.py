import pytest

import fileio
from fileio.client import DEFAULT_URL, ClientConfig, FileIOClient, Transport, UrllibTransport
from fileio.client.transport import DEFAULT_TIMEOUT


def test_defaults() -> None:
    cfg = ClientConfig()
    assert cfg.base_url == DEFAULT_URL == "https://file.io"
    assert isinstance(cfg.transport, UrllibTransport)
    assert isinstance(cfg.transport, Transport)


def test_trailing_slash_is_stripped() -> None:
    assert ClientConfig(base_url="http://localhost:8080/").base_url == "http://localhost:8080"


def test_config_is_frozen() -> None:
    cfg = ClientConfig()
    with pytest.raises(AttributeError):
        cfg.base_url = "http://elsewhere"  # type: ignore[misc]


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FILEIO_URL", "http://localhost:9000/")
    monkeypatch.setenv("FILEIO_TIMEOUT", "5")

    cfg = ClientConfig.from_env()

    assert cfg.base_url == "http://localhost:9000"
    assert cfg.transport.timeout == 5.0


def test_from_env_defaults(monkeypatch) -> None:
    monkeypatch.delenv("FILEIO_URL", raising=False)
    monkeypatch.delenv("FILEIO_TIMEOUT", raising=False)

    cfg = ClientConfig.from_env()

    assert cfg.base_url == DEFAULT_URL
    assert cfg.transport.timeout == DEFAULT_TIMEOUT


def test_from_env_zero_timeout_disables_it() -> None:
    cfg = ClientConfig.from_env({"FILEIO_TIMEOUT": "0"})
    assert cfg.transport.timeout is None


def test_from_env_rejects_bad_timeout() -> None:
    with pytest.raises(ValueError, match="FILEIO_TIMEOUT"):
        ClientConfig.from_env({"FILEIO_TIMEOUT": "soon"})


def test_from_env_keeps_injected_transport(fake_transport) -> None:
    cfg = ClientConfig.from_env({}, transport=fake_transport)
    assert cfg.transport is fake_transport


def test_module_level_functions_use_default_client(fake_transport, sample_file, tmp_path) -> None:
    fileio.set_default_client(
        FileIOClient(ClientConfig(base_url="https://file.io", transport=fake_transport))
    )
    try:
        assert fileio.upload(str(sample_file)) == "2ojE41"
        assert fileio.upload_with_expiry(str(sample_file), 7) == ("2ojE41", "7 days")
        assert fileio.download("exists", tmp_path / "out.txt") == 14
    finally:
        fileio.set_default_client(None)

    assert [m for m, _ in fake_transport.calls] == ["POST", "POST", "GET"]


def test_default_client_is_built_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FILEIO_URL", "http://localhost:9000")
    fileio.set_default_client(None)
    try:
        c = fileio.get_default_client()
        assert c.base_url == "http://localhost:9000"
        assert fileio.get_default_client() is c
    finally:
        fileio.set_default_client(None)
