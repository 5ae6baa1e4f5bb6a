"""Tests for ledger aggregation."""

import logging
import random
from datetime import date

import pytest

from ledgerkit.domain.aggregation import (
    AccountIndex,
    aggregate,
    aggregate_partitioned,
    merge_balances,
    partition,
)
from ledgerkit.domain.errors import ValidationError
from conftest import make_account, make_entry


@pytest.fixture
def accounts():
    return [
        make_account(1, "1.01", "asset", "debit"),
        make_account(2, "2.01", "liability", "credit"),
        make_account(3, "4.01", "revenue", "credit"),
    ]


def test_aggregate_totals_per_account(accounts):
    entries = [
        make_entry(1, 1, "debit", 1000),
        make_entry(2, 3, "credit", 1000),
        make_entry(3, 1, "credit", 300),
        make_entry(4, 2, "credit", 300),
    ]

    balances = aggregate(entries, accounts)

    assert balances[1].debit_total == 1000
    assert balances[1].credit_total == 300
    assert balances[1].signed_balance == 700
    assert balances[2].signed_balance == 300
    assert balances[3].signed_balance == 1000


def test_aggregate_includes_accounts_without_entries(accounts):
    balances = aggregate([make_entry(1, 1, "debit", 100)], accounts)

    assert len(balances) == 3
    assert balances[2].debit_total == 0
    assert balances[2].credit_total == 0
    assert not balances[2].has_movement


def test_aggregate_empty_chart():
    balances = aggregate([], [])
    assert len(balances) == 0
    assert balances.unknown_references == ()


def test_aggregate_records_unknown_account(accounts, caplog):
    entries = [make_entry(1, 1, "debit", 100), make_entry(2, 99, "credit", 100)]

    with caplog.at_level(logging.WARNING):
        balances = aggregate(entries, accounts)

    assert len(balances.unknown_references) == 1
    reference = balances.unknown_references[0]
    assert reference.entry_id == 2
    assert reference.account_id == 99
    assert reference.amount == 100
    assert 99 not in balances
    assert "unknown account 99" in caplog.text


def test_aggregate_rejects_negative_amount(accounts):
    with pytest.raises(ValidationError, match="negative amount"):
        aggregate([make_entry(7, 1, "debit", -5)], accounts)


def test_duplicate_account_id_rejected():
    with pytest.raises(ValidationError, match="more than once"):
        AccountIndex([make_account(1, "1.01", "asset", "debit"), make_account(1, "1.02", "asset", "debit")])


def test_aggregate_is_idempotent(accounts):
    entries = [make_entry(1, 1, "debit", 100), make_entry(2, 3, "credit", 100)]
    assert aggregate(entries, accounts) == aggregate(entries, accounts)


def test_aggregate_is_order_independent(accounts):
    entries = [make_entry(i, 1 + i % 3, "debit" if i % 2 else "credit", i * 10) for i in range(1, 40)]
    shuffled = list(entries)
    random.Random(7).shuffle(shuffled)

    assert aggregate(entries, accounts).balances == aggregate(shuffled, accounts).balances


def test_merge_adds_partial_totals(accounts):
    index = AccountIndex(accounts)
    left = aggregate([make_entry(1, 1, "debit", 100)], index)
    right = aggregate([make_entry(2, 1, "debit", 50), make_entry(3, 1, "credit", 20)], index)

    merged = merge_balances(left, right)

    assert merged[1].debit_total == 150
    assert merged[1].credit_total == 20


def test_partition_covers_every_entry():
    entries = list(range(10))
    slices = partition(entries, 3)

    assert [len(chunk) for chunk in slices] == [4, 3, 3]
    assert [item for chunk in slices for item in chunk] == entries


def test_partition_rejects_non_positive_count():
    with pytest.raises(ValidationError):
        partition([], 0)


@pytest.mark.parametrize("partitions", [1, 2, 4, 7, 50])
def test_partitioned_aggregation_matches_single_pass(accounts, partitions):
    entries = [
        make_entry(i, 1 + i % 4, "debit" if i % 3 else "credit", i, date(2024, 1, 1 + i % 28))
        for i in range(1, 200)
    ]

    single = aggregate(entries, accounts)
    parallel = aggregate_partitioned(entries, accounts, partitions=partitions)

    assert parallel.balances == single.balances
    assert sorted(r.entry_id for r in parallel.unknown_references) == sorted(
        r.entry_id for r in single.unknown_references
    )
