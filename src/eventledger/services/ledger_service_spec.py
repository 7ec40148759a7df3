from __future__ import annotations

from pathlib import Path

import pytest

from eventledger.config import LedgerSettings, StorageBackend
from eventledger.errors import ConfigError
from eventledger.services.ledger_service import LedgerService
from eventledger.storage.account_store import InMemoryAccountStore, SqliteAccountStore
from eventledger.storage.event_log import InMemoryEventLog, SqliteEventLog
from eventledger.workspace import Workspace


class DescribeLedgerService:
    @pytest.fixture
    def workspace(self, tmp_path: Path) -> Workspace:
        return Workspace(root=tmp_path)

    def it_should_default_to_sqlite_backend(self, workspace):
        service = LedgerService(workspace)

        assert isinstance(service.get_event_log(), SqliteEventLog)
        assert isinstance(service.get_account_store(), SqliteAccountStore)
        assert service.event_log_path == workspace.event_log_path

    def it_should_use_memory_backend_from_settings(self, workspace):
        service = LedgerService(workspace, settings=LedgerSettings(backend=StorageBackend.memory))

        assert isinstance(service.get_event_log(), InMemoryEventLog)
        assert isinstance(service.get_account_store(), InMemoryAccountStore)
        assert service.event_log_path is None

    def it_should_read_settings_file(self, workspace):
        workspace.config_dir.mkdir()
        workspace.settings_path.write_text("backend: memory\n", encoding="utf-8")

        assert not LedgerService(workspace).is_persistent

    def it_should_raise_on_invalid_settings(self, workspace):
        workspace.config_dir.mkdir()
        workspace.settings_path.write_text("backend: postgres\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            LedgerService(workspace)

    def it_should_share_components(self, workspace):
        service = LedgerService(workspace)
        handler = service.get_event_handler()

        assert handler.event_log is service.get_event_log()
        assert handler.projection_builder is service.get_projection_builder()
        assert service.get_projection_builder().account_store is service.get_account_store()

    class DescribeCheckStoreStatus:
        def it_should_report_missing_log_without_creating_it(self, tmp_path: Path):
            workspace = Workspace(root=tmp_path)
            status = LedgerService(workspace).check_store_status()

            assert not status.exists
            assert status.path == workspace.event_log_path
            assert not workspace.event_log_path.exists()

        def it_should_count_events_and_accounts(self, tmp_path: Path, account_created, deposit_confirmed):
            service = LedgerService(Workspace(root=tmp_path))
            handler = service.get_event_handler()
            handler.send(account_created(account_id="1", event_id="a"))
            handler.send(deposit_confirmed(account_id="1", event_id="b"))
            handler.send(account_created(account_id="2", event_id="c"))

            status = service.check_store_status()

            assert status.exists
            assert status.event_count == 3
            assert status.account_count == 2
