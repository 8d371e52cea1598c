"""Tests for Credential and credential stores."""

from __future__ import annotations

import json
from pathlib import Path

from request_lifecycle.credentials import (
    Credential,
    CredentialStore,
    InMemoryCredentialStore,
    SessionFileCredentialStore,
)


class TestCredential:
    def test_from_mapping(self) -> None:
        cred = Credential.from_mapping({"authenticated": True, "token": "abc"})
        assert cred == Credential(authenticated=True, token="abc")

    def test_from_empty_mapping_is_anonymous(self) -> None:
        assert Credential.from_mapping({}) == Credential()
        assert Credential.from_mapping(None) == Credential()

    def test_blank_or_non_string_token_is_dropped(self) -> None:
        assert Credential.from_mapping({"token": ""}).token is None
        assert Credential.from_mapping({"token": 123}).token is None


class TestInMemoryCredentialStore:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryCredentialStore(), CredentialStore)

    def test_external_updates_visible_on_next_read(self) -> None:
        store = InMemoryCredentialStore()
        assert store.read().authenticated is False
        store.set(Credential(authenticated=True, token="t"))
        assert store.read().token == "t"
        store.clear()
        assert store.read() == Credential()


class TestSessionFileCredentialStore:
    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(SessionFileCredentialStore(tmp_path / "s.json"), CredentialStore)

    def test_missing_file_is_anonymous(self, tmp_path: Path) -> None:
        store = SessionFileCredentialStore(tmp_path / "missing.json")
        assert store.read() == Credential()

    def test_reads_auth_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"auth": {"authenticated": True, "token": "abc"}}))
        store = SessionFileCredentialStore(path)
        assert store.read() == Credential(authenticated=True, token="abc")

    def test_rereads_on_every_call(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        store = SessionFileCredentialStore(path)
        path.write_text(json.dumps({"auth": {"authenticated": True, "token": "one"}}))
        assert store.read().token == "one"
        path.write_text(json.dumps({"auth": {"authenticated": True, "token": "two"}}))
        assert store.read().token == "two"

    def test_custom_key(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"session": {"token": "xyz"}}))
        store = SessionFileCredentialStore(path, key="session")
        assert store.read().token == "xyz"

    def test_corrupt_file_is_anonymous(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_text("{not json")
        assert SessionFileCredentialStore(path).read() == Credential()

    def test_non_object_payload_is_anonymous(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_text(json.dumps(["auth"]))
        assert SessionFileCredentialStore(path).read() == Credential()

    def test_non_utf8_file_is_anonymous(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_bytes(b'{"auth": {"token": "\xff\xfe"}}')
        assert SessionFileCredentialStore(path).read() == Credential()
