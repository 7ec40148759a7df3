"""
Tests for the read-only commands: account, accounts, event.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from eventledger.cli.command import account, accounts, event
from eventledger.services.ledger_service import LedgerService
from eventledger.workspace import Workspace


class DescribeQueryCommands:
    @pytest.fixture
    def workspace(self, tmp_path: Path, account_created, deposit_confirmed) -> Workspace:
        workspace = Workspace(root=tmp_path)
        handler = LedgerService(workspace).get_event_handler()
        handler.send(account_created())
        handler.send(deposit_confirmed(amount="100"))
        return workspace

    def it_should_show_account(self, workspace, capsys):
        assert account.run(workspace=workspace, account_id="123") == 0
        out = capsys.readouterr().out
        assert "olu@example.com" in out
        assert "100.00" in out

    def it_should_show_projection_history(self, workspace, capsys):
        assert account.run(workspace=workspace, account_id="123", history=True) == 0
        out = capsys.readouterr().out
        assert "0.00" in out
        assert "100.00" in out

    def it_should_fail_for_unknown_account(self, workspace):
        assert account.run(workspace=workspace, account_id="999") == 1

    def it_should_list_accounts_by_email(self, workspace, capsys):
        assert accounts.run(workspace=workspace, email="olu@example.com") == 0
        assert "123" in capsys.readouterr().out

    def it_should_fail_for_unknown_email(self, workspace):
        assert accounts.run(workspace=workspace, email="nobody@example.com") == 1

    def it_should_show_event_as_json(self, workspace, capsys):
        assert event.run(workspace=workspace, event_id="2") == 0
        assert "DepositConfirmed" in capsys.readouterr().out

    def it_should_fail_for_unknown_event(self, workspace):
        assert event.run(workspace=workspace, event_id="missing") == 1


def it_should_fail_when_nothing_recorded(tmp_path: Path):
    workspace = Workspace(root=tmp_path)

    assert account.run(workspace=workspace, account_id="123") == 1
    assert accounts.run(workspace=workspace, email="olu@example.com") == 1
    assert event.run(workspace=workspace, event_id="1") == 1
    assert not workspace.event_log_path.exists()
