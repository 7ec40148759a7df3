from __future__ import annotations

from pathlib import Path

from eventledger.cli.command.rebuild import run
from eventledger.services.ledger_service import LedgerService
from eventledger.workspace import Workspace


class DescribeRebuildCommand:
    def it_should_fail_when_event_log_missing(self, tmp_path: Path):
        assert run(workspace=Workspace(root=tmp_path)) == 1

    def it_should_rebuild_all_accounts_from_appended_events(
        self, tmp_path: Path, account_created, deposit_confirmed
    ):
        workspace = Workspace(root=tmp_path)
        service = LedgerService(workspace)
        # append without rebuilding, as after a crash between the two steps
        service.get_event_log().append(account_created(account_id="a", event_id="1"))
        service.get_event_log().append(deposit_confirmed(account_id="b", event_id="2", amount="5"))

        assert run(workspace=workspace) == 0

        store = LedgerService(workspace).get_account_store()
        assert store.find_latest_by_id("a").customer.email == "olu@example.com"
        assert store.find_latest_by_id("b").balance == 5

    def it_should_rebuild_single_account(self, tmp_path: Path, account_created):
        workspace = Workspace(root=tmp_path)
        service = LedgerService(workspace)
        service.get_event_log().append(account_created(account_id="a", event_id="1"))
        service.get_event_log().append(account_created(account_id="b", event_id="2"))

        assert run(workspace=workspace, account_id="a") == 0

        store = LedgerService(workspace).get_account_store()
        assert [acct.id for acct in store.get_all_accounts()] == ["a"]

    def it_should_fail_for_account_without_events(self, tmp_path: Path, account_created):
        workspace = Workspace(root=tmp_path)
        LedgerService(workspace).get_event_log().append(account_created())

        assert run(workspace=workspace, account_id="nobody") == 1

    def it_should_succeed_on_empty_log(self, tmp_path: Path):
        workspace = Workspace(root=tmp_path)
        LedgerService(workspace).get_event_log()

        assert run(workspace=workspace) == 0
